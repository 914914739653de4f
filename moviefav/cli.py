"""Command line interface for MovieFav."""

import asyncio
import sys

import click
from alembic import command

from moviefav.infrastructure.database.init_db import (
    check_database_health,
    get_alembic_config,
    get_database_info,
    init_database,
)
from moviefav.infrastructure.database.session import close_db_connections
from moviefav.settings import get_settings
from moviefav.utils.logging import setup_logging


@click.group()
def cli():
    """MovieFav CLI."""
    setup_logging()


@cli.command()
def init_db():
    """Initialize the database schema with migrations."""
    click.echo("Initializing database...")
    asyncio.run(init_database())
    click.echo("Database initialized successfully!")


@cli.command()
def migrate():
    """Run database migrations to the latest version."""
    click.echo("Running database migrations...")
    command.upgrade(get_alembic_config(), "head")
    click.echo("Migrations completed successfully!")


@cli.command()
@click.option('--message', '-m', required=True, help='Migration message')
def create_migration(message: str):
    """Create a new migration file."""
    click.echo(f"Creating migration: {message}")
    command.revision(get_alembic_config(), message=message, autogenerate=True)
    click.echo("Migration created successfully!")


@cli.command()
def current():
    """Show current migration version."""
    command.current(get_alembic_config(), verbose=True)


@cli.command()
def check_db():
    """Check database connectivity and show table statistics."""
    click.echo("Checking database health...")

    async def check():
        try:
            if not await check_database_health():
                click.echo("✗ Database connection failed")
                return 1

            click.echo("✓ Database connection is healthy")

            info = await get_database_info()
            click.echo("\nDatabase statistics:")
            for table, count in info["tables"].items():
                click.echo(f"  - {table}: {count} records")
            return 0
        finally:
            await close_db_connections()

    sys.exit(asyncio.run(check()))


@cli.command()
def show_config():
    """Display current configuration settings."""
    settings = get_settings()

    click.echo("Current configuration:")
    click.echo(f"  Environment: {settings.environment}")
    click.echo(f"  Debug: {settings.debug}")
    click.echo(f"  Database URL: {settings.database_url}")
    click.echo(f"  API prefix: {settings.api_v1_prefix}")
    click.echo(f"  JWT Algorithm: {settings.jwt_algorithm}")
    click.echo(f"  Token lifetime: {settings.jwt_expires_in} seconds")
    click.echo(f"  Allowed origins: {', '.join(settings.allowed_origins)}")
    click.echo(f"  Movie API: {settings.tmdb_base_url}")
    click.echo(f"  Movie API key set: {bool(settings.tmdb_api_key)}")
    click.echo(f"  Log level: {settings.log_level} ({settings.log_format})")


if __name__ == "__main__":
    cli()
