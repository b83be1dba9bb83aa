"""Wedding CLI - Admin commands."""
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer()
console = Console()


def get_db_session():
    """Get a database session."""
    from wedding.database import SessionLocal
    return SessionLocal()


@app.command("create-party")
def create_party(
    code: str = typer.Argument(..., help="Invitation code"),
    max_person_count: Optional[int] = typer.Option(None, "--max-persons", "-m", help="Party size"),
):
    """Create a new party."""
    from wedding.services.auth import AuthService

    db = get_db_session()
    try:
        auth_service = AuthService(db)
        if auth_service.get_party_by_code(code):
            console.print(f"[red]Party '{code}' already exists[/red]")
            raise typer.Exit(1)

        party = auth_service.create_party(code, max_person_count)
        console.print(f"[green]Party '{party.code}' created (id {party.id})[/green]")
    finally:
        db.close()


@app.command("create-user")
def create_user(
    code: str = typer.Argument(..., help="Invitation code of the party"),
    name: str = typer.Argument(..., help="Guest name"),
    password: str = typer.Option(None, "--password", "-p", help="Password (will prompt if not provided)"),
    email: Optional[str] = typer.Option(None, "--email", "-e", help="Email address"),
    relation: Optional[str] = typer.Option(None, "--relation", "-r", help="Relation key, e.g. bride"),
):
    """Create a new guest in a party."""
    from wedding.services.auth import AuthService
    from wedding.models.user import User

    db = get_db_session()
    try:
        auth_service = AuthService(db)

        party = auth_service.get_party_by_code(code)
        if not party:
            console.print(f"[red]Party '{code}' not found[/red]")
            raise typer.Exit(1)

        existing = db.query(User).filter(User.party_id == party.id, User.name == name).first()
        if existing:
            console.print(f"[red]Guest '{name}' already exists in party '{code}'[/red]")
            raise typer.Exit(1)

        # Get password
        if not password:
            password = typer.prompt("Password", hide_input=True)
            password_confirm = typer.prompt("Confirm password", hide_input=True)
            if password != password_confirm:
                console.print("[red]Passwords do not match[/red]")
                raise typer.Exit(1)

        user = auth_service.create_user(party, name, password, email=email, relation_key=relation)
        console.print(f"[green]Guest '{user.name}' created (id {user.id})[/green]")
    finally:
        db.close()


@app.command("list-users")
def list_users():
    """List all guests."""
    from wedding.models.user import User

    db = get_db_session()
    try:
        users = db.query(User).order_by(User.party_id, User.name).all()

        table = Table(title="Guests")
        table.add_column("ID", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("Party")
        table.add_column("Relation")

        for u in users:
            table.add_row(
                str(u.id),
                u.name,
                u.party.code,
                u.relation_key or "",
            )

        console.print(table)
    finally:
        db.close()


@app.command("create-token")
def create_token(
    user_id: int = typer.Argument(..., help="Guest ID"),
):
    """Print a bearer token for a guest."""
    from wedding.services.auth import AuthService

    db = get_db_session()
    try:
        auth_service = AuthService(db)
        user = auth_service.get_user_by_id(user_id)
        if not user:
            console.print(f"[red]Guest {user_id} not found[/red]")
            raise typer.Exit(1)

        typer.echo(auth_service.create_token(user))
    finally:
        db.close()


@app.command("create-hotel-room")
def create_hotel_room(
    description: str = typer.Argument(..., help="Room description"),
    price: float = typer.Option(..., "--price", help="Price per night"),
    max_person_count: int = typer.Option(2, "--max-persons", "-m", help="Beds"),
):
    """Create a hotel room."""
    from wedding.services.hotel_rooms import HotelRoomService

    db = get_db_session()
    try:
        room = HotelRoomService(db).create_room(description, price, max_person_count)
        console.print(f"[green]Hotel room {room.id} created[/green]")
    finally:
        db.close()
