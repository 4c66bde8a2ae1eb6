"""Web API for the interview prep app."""
