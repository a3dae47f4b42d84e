"""Country listing command."""

import click

from bookkeeper.domain.country import CountryService


@click.command("countries")
@click.pass_context
def list_countries(ctx):
    """List the known countries."""
    service = CountryService(ctx.obj["db"])
    for country in service.list_countries():
        click.echo(f"{country.code}  {country.name}")


def register_commands(cli):
    """Register countries command with main CLI."""
    cli.add_command(list_countries)
