"""Main CLI entry point."""

import logging

import click

from bookkeeper.config import DB_PATH_ENV, Settings
from bookkeeper.database.factories import create_sqlite_database

# Import and register all commands at module level
from bookkeeper.cli.commands import category, countries, init_db, serve

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, debug: bool):
    """Bookkeeper - personal finance bookkeeping service.

    Keep track of currencies, banks, accounts, credit cards and transactions,
    and serve them over a JSON API.
    """
    ctx.ensure_object(dict)

    settings = Settings.from_environment(database_path=db_path)
    logging.basicConfig(
        level=logging.DEBUG if debug else settings.log_level,
        format=LOG_FORMAT,
    )
    ctx.obj["settings"] = settings

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=settings.database_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db


# Register all commands
serve.register_commands(cli)
init_db.register_commands(cli)
countries.register_commands(cli)
category.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
