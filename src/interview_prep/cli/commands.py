"""CLI commands for the interview prep app.

Operator tooling around the web app:
- init-db: Create the database schema
- seed: Load categories and questions from a YAML file
- sign-in: Issue a session token for an email
- progress: Show a user's progress
- serve: Run the web API
"""

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from interview_prep.config.app_config import load_app_config
from interview_prep.core.auth import AuthError, get_auth_provider
from interview_prep.core.models import ProgressStatus
from interview_prep.db.catalog_repository import get_question_by_id
from interview_prep.db.database import init_db
from interview_prep.db.progress_repository import list_progress_for_user
from interview_prep.db.seed import SeedError, load_seed_file, seed_catalog
from interview_prep.db.users_repository import get_user_by_email

app = typer.Typer(
    name="prep",
    help="Interview preparation practice: questions, answers and progress.",
    no_args_is_help=True,
)

console = Console()

STATUS_STYLES = {
    ProgressStatus.NOT_STARTED: "dim",
    ProgressStatus.IN_PROGRESS: "yellow",
    ProgressStatus.COMPLETED: "green",
}


def _open_db(db: str | None) -> Path:
    """Initialize the database from --db or config and return its path."""
    db_path = Path(db) if db else load_app_config().database.resolve_path()
    init_db(db_path)
    return db_path


def _truncate(text: str, max_len: int = 60) -> str:
    """Truncate text with ellipsis if too long."""
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."


@app.command(name="init-db")
def init_db_command(
    db: str | None = typer.Option(None, "--db", help="Database file path"),
) -> None:
    """Create the database schema."""
    db_path = _open_db(db)
    console.print(f"[green]✓ Database ready:[/green] {db_path}")


@app.command()
def seed(
    file: str | None = typer.Argument(
        None, help="Path to seed YAML file (default: questions_v1.yaml in paths.seed_dir)"
    ),
    db: str | None = typer.Option(None, "--db", help="Database file path"),
) -> None:
    """Load categories and questions from a YAML file."""
    _open_db(db)
    seed_path = Path(file).expanduser() if file else load_app_config().default_seed_file()

    try:
        data = load_seed_file(seed_path)
        result = seed_catalog(data)
    except SeedError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1)

    console.print(
        f"[green]✓ Seeded {result.categories} categories, "
        f"{result.questions} questions[/green]"
    )


@app.command(name="sign-in")
def sign_in(
    email: str = typer.Argument(..., help="User email"),
    db: str | None = typer.Option(None, "--db", help="Database file path"),
) -> None:
    """Issue a session token for an email (creates the user on first use)."""
    _open_db(db)

    try:
        session = asyncio.run(get_auth_provider().sign_in(email))
    except AuthError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]✓ Signed in as {session.email}[/green]")
    console.print(f"  [dim]user_id:[/dim] {session.user_id}")
    console.print(f"  [dim]token:[/dim]   {session.token}")


@app.command()
def progress(
    email: str = typer.Argument(..., help="User email"),
    db: str | None = typer.Option(None, "--db", help="Database file path"),
) -> None:
    """Show a user's saved progress."""
    _open_db(db)

    user = get_user_by_email(email.strip().lower())
    if user is None:
        console.print(f"[red]✗ No user with email '{email}'[/red]")
        raise typer.Exit(code=1)

    records = list_progress_for_user(user.id)
    if not records:
        console.print("[yellow]No progress saved yet[/yellow]")
        return

    table = Table(title=f"Progress for {user.email}")
    table.add_column("Question")
    table.add_column("Status")
    table.add_column("Completed at")
    table.add_column("Notes")

    for record in records:
        question = get_question_by_id(record.question_id)
        title = question.title if question else record.question_id
        style = STATUS_STYLES[record.status]
        table.add_row(
            title,
            f"[{style}]{record.status.value}[/{style}]",
            record.completed_at or "-",
            _truncate(record.notes.replace("\n", " ")),
        )

    console.print(table)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the web API with uvicorn."""
    import uvicorn

    uvicorn.run("interview_prep.web.api:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
