"""Database management CLI commands."""

import typer
from rich.console import Console
from rich.table import Table

from library_lending.core.services import DbSessionService, LendingService
from library_lending.runtime.init_db import init_db
from library_lending.runtime.seed import seed

console = Console()

db_app = typer.Typer(help="Create, seed and inspect the library database")


@db_app.command("init")
def init(
    with_seed: bool = typer.Option(False, "--seed", help="Also load the demo data"),
) -> None:
    """Create all missing tables."""
    init_db(with_seed=with_seed)
    console.print("[green]✅ Database initialized[/green]")


@db_app.command("seed")
def seed_command() -> None:
    """Load two authors, two books, two customers and their loans."""
    db_service = DbSessionService()
    db_service.create_all()
    with db_service.session_scope() as session:
        loaded = seed(session)
    if loaded:
        console.print("[green]✅ Seed data loaded[/green]")
    else:
        console.print("[yellow]Seed data already present[/yellow]")


@db_app.command("loans")
def list_loans() -> None:
    """Show every borrowing record."""
    db_service = DbSessionService()
    with db_service.session_scope() as session:
        records = LendingService(session).list_borrowing_records()

        if not records:
            console.print("[yellow]No borrowing records[/yellow]")
            return

        table = Table(title="Borrowing records")
        table.add_column("ID", style="cyan")
        table.add_column("Customer", style="green")
        table.add_column("Book", style="blue")
        table.add_column("Borrowed", style="magenta")
        table.add_column("Due", style="magenta")

        for record in records:
            table.add_row(
                str(record.id),
                record.customer.name if record.customer else str(record.customer_id),
                record.book.title if record.book else str(record.book_id),
                record.borrow_date.isoformat(),
                record.return_date.isoformat(),
            )

    console.print(table)
    console.print(f"\n[green]Found {len(records)} records[/green]")
