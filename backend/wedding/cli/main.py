"""Wedding CLI - Main entry point."""
import typer
from rich.console import Console
from rich.table import Table

from wedding.cli import admin

app = typer.Typer(
    name="wedding",
    help="Wedding - party coordination backend",
    add_completion=True,
)

console = Console()

# Add subcommands
app.add_typer(admin.app, name="admin", help="Admin commands")


@app.command()
def version():
    """Show version information."""
    from wedding import __version__
    console.print(f"Wedding v{__version__}")


@app.command()
def status():
    """Check system status."""
    from sqlalchemy import text
    from sqlalchemy.exc import SQLAlchemyError
    from wedding.config import settings
    from wedding.database import engine

    table = Table(title="Wedding Status")
    table.add_column("Component", style="cyan")
    table.add_column("Status", style="green")

    # Check database
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        table.add_row("Database", "Connected")
    except SQLAlchemyError as e:
        table.add_row("Database", f"[red]Error: {e}[/red]")

    table.add_row("Environment", settings.env)
    table.add_row("Music request limit", str(settings.max_music_requests_per_user))

    console.print(table)


if __name__ == "__main__":
    app()
