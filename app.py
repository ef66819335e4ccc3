import logging
import sqlite3
from typing import Any, Optional

import typer

import database.database as db
from menus.dispatch import resolve
from menus.state import Navigator
from services.auth import GUEST, login, register
from utils.console import ConsoleIO
from utils.constants import ID_MAX
from utils.errors import AuthError
from utils.utils import optional_text

MAX_CONSECUTIVE_ERRORS = 3

cli = typer.Typer(
    name="flashcards",
    help="Terminal flashcards: decks, cards and self-graded reviews.",
    no_args_is_help=True,
)
card_app = typer.Typer(help="Manage cards without the menu.")
deck_app = typer.Typer(help="Manage decks without the menu.")
cli.add_typer(card_app, name="card")
cli.add_typer(deck_app, name="deck")


def run(io, nav: Navigator | None = None, user: dict[str, Any] | None = None) -> Navigator:
    """
    The menu loop. Each iteration is one unit-of-work: it commits when the
    iteration returns (the quitting one included) and rolls back if it raises.
    """
    nav = nav or Navigator()
    user = user or GUEST
    logging.info(f"Starting menu loop for {user['username']}")

    keep_running = True
    errors = 0
    while keep_running:
        try:
            with db.get_db() as conn:
                next_state, keep_running = resolve(nav.current, conn, io, nav)
                nav.navigate(next_state)
        except sqlite3.Error:
            errors += 1
            logging.exception(f"Storage error in {nav.current}, changes rolled back")
            io.write_line("\u26a0\ufe0f Something went wrong with the database. Your last action was not saved.")
            if errors >= MAX_CONSECUTIVE_ERRORS:
                raise
            continue
        except (EOFError, KeyboardInterrupt):
            io.write_line()
            logging.info("Input closed, stopping")
            break

        errors = 0
        logging.info(f"Committed unit of work, now at {nav.current}")

    io.write_line("\U0001f44b Bye")
    return nav


# ── Commands ─────────────────────────────────────────────────

@cli.callback()
def setup() -> None:
    """Terminal flashcards: decks, cards and self-graded reviews."""
    db.init_db()


@cli.command()
def start(
    guest: bool = typer.Option(False, "--guest", help="Skip login and continue as guest."),
) -> None:
    """Show the menu and start the app."""
    io = ConsoleIO()
    io.clear()
    io.write_line("Starting app")

    user = dict(GUEST)
    if not guest:
        try:
            with db.get_db() as conn:
                user = login(io, conn)
        except (EOFError, KeyboardInterrupt):
            raise typer.Exit(0)

    run(io, user=user)


@cli.command("init-db")
def init_db_command() -> None:
    """Create the database tables if they don't exist."""
    typer.echo(f"Database ready at {db.DB_PATH}")


@cli.command("register")
def register_command(
    username: str = typer.Option(..., "--username", "-u", help="Name to log in with."),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True),
) -> None:
    """Create a user account."""
    try:
        with db.get_db() as conn:
            user_id = register(conn, username, password)
    except AuthError as e:
        typer.echo(f"\u274c {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Registered {username} (id {user_id})")


@card_app.command("list")
def card_list() -> None:
    """List all cards."""
    with db.get_db() as conn:
        cards = db.list_cards(conn)
    for card in cards:
        typer.echo(f"{card['id']}: | {card['front']} | {card['back']} |")


@card_app.command("create")
def card_create(
    front: str = typer.Option(..., "--front", "-f", help="The front of the card."),
    back: str = typer.Option(..., "--back", "-b", help="The back of the card."),
) -> None:
    """Create a new card."""
    front, back = optional_text(front), optional_text(back)
    if front is None or back is None:
        typer.echo("\u26a0\ufe0f Card side can't be empty.", err=True)
        raise typer.Exit(1)
    with db.get_db() as conn:
        card_id = db.create_card(conn, front, back)
    typer.echo(f"Created card {card_id}")


@card_app.command("update")
def card_update(
    card_id: int = typer.Option(..., "--id", "-i", min=1, max=ID_MAX, help="The id of the card."),
    front: Optional[str] = typer.Option(None, "--front", "-f", help="New front."),
    back: Optional[str] = typer.Option(None, "--back", "-b", help="New back."),
) -> None:
    """Update an existing card; omitted or blank sides are left unchanged."""
    front = optional_text(front) if front is not None else None
    back = optional_text(back) if back is not None else None
    if front is None and back is None:
        typer.echo("No changes to make")
        return
    with db.get_db() as conn:
        rows = db.update_card(conn, card_id, front, back)
    if not rows:
        typer.echo(f"No card with id: {card_id} found", err=True)
        raise typer.Exit(1)
    typer.echo(f"Updated card with id: {card_id}")


@card_app.command("delete")
def card_delete(
    card_id: int = typer.Option(..., "--id", "-i", min=1, max=ID_MAX, help="The id of the card."),
) -> None:
    """Delete an existing card."""
    with db.get_db() as conn:
        rows = db.delete_card(conn, card_id)
    if not rows:
        typer.echo(f"No card with id: {card_id} found", err=True)
        raise typer.Exit(1)
    typer.echo(f"Deleted card with id: {card_id}")


@deck_app.command("list")
def deck_list() -> None:
    """List all decks."""
    with db.get_db() as conn:
        decks = db.list_decks(conn)
    for deck in decks:
        typer.echo(f"{deck['id']}: | {deck['name']} | {deck['description'] or ''} |")


@deck_app.command("create")
def deck_create(
    name: str = typer.Option(..., "--name", "-n", help="Unique deck name."),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
) -> None:
    """Create a new deck."""
    try:
        with db.get_db() as conn:
            deck_id = db.create_deck(conn, name.strip(), description)
    except sqlite3.IntegrityError:
        typer.echo(f"A deck named '{name}' already exists", err=True)
        raise typer.Exit(1)
    typer.echo(f"Created deck {deck_id}")


def main() -> None:
    cli()


if __name__ == '__main__':
    main()
