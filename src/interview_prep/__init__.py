"""Interview preparation practice: questions, practice answers, progress."""

__version__ = "0.1.0"
