"""Database initialization command."""

import click

from bookkeeper.domain.country import CountryService


@click.command("init-db")
@click.pass_context
def init_db(ctx):
    """Create the database schema and seed the countries table."""
    db = ctx.obj["db"]
    db.initialize_schema()

    count = len(CountryService(db).list_countries())
    click.echo(f"Database ready at {ctx.obj['settings'].database_path} ({count} countries)")


def register_commands(cli):
    """Register init-db command with main CLI."""
    cli.add_command(init_db)
