"""StoreRate CLI application using Typer.

This module provides command-line utilities for the StoreRate backend:
secret generation, schema creation, demo data and the API server.
"""

import asyncio
import secrets

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from storerate.infrastructure.persistence.sqlalchemy import (
    Database,
    SQLAlchemyRepositoryFactory,
)
from storerate.presentation.cli.seed import SeedReport, seed_demo_data
from storerate_auth import PasswordHashingService
from storerate_config.settings import Settings, get_settings

app = typer.Typer(
    name="storerate",
    help="StoreRate - store rating platform CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database schema and demo data",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for StoreRate configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]StoreRate Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _init_schema(settings: Settings) -> None:
    database = Database.from_settings(settings)
    try:
        await database.create_schema()
    finally:
        await database.dispose()


async def _seed(settings: Settings) -> SeedReport:
    database = Database.from_settings(settings)
    password_service = PasswordHashingService(rounds=settings.password_hash_rounds)
    try:
        await database.create_schema()
        async with database.session() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            try:
                report = await seed_demo_data(factory, password_service)
                await session.commit()
            except Exception:
                await session.rollback()
                raise
    finally:
        await database.dispose()
    return report


@db_app.command("init")
def init_db() -> None:
    """Create all missing tables."""
    settings = get_settings()
    asyncio.run(_init_schema(settings))
    console.print(
        f"[green]Schema ready[/green] on [bold]{settings.database_type}[/bold]"
    )


@db_app.command("seed")
def seed_db() -> None:
    """Insert the demo admin, users, store owners, stores and ratings.

    Records that already exist (matched by email) are skipped.
    """
    report = asyncio.run(_seed(get_settings()))

    table = Table(title="Demo data")
    table.add_column("Kind")
    table.add_column("Created", justify="right")
    table.add_column("Skipped", justify="right")
    table.add_row(
        "Users",
        str(len(report.users_created)),
        str(len(report.users_skipped)),
    )
    table.add_row(
        "Stores",
        str(len(report.stores_created)),
        str(len(report.stores_skipped)),
    )
    table.add_row("Ratings", str(report.ratings_created), str(report.ratings_skipped))
    console.print(table)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "storerate.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
