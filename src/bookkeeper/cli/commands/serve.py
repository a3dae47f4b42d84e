"""API server command."""

import logging

import click

from bookkeeper.api import create_app

logger = logging.getLogger(__name__)


@click.command("serve")
@click.option("--host", help="Interface to bind (default: BOOKKEEPER_HOST or 127.0.0.1)")
@click.option("--port", type=int, help="Port to listen on (default: BOOKKEEPER_PORT or 8080)")
@click.pass_context
def serve(ctx, host: str | None, port: int | None):
    """Run the JSON API server."""
    settings = ctx.obj["settings"]
    host = host or settings.host
    port = port or settings.port

    app = create_app(db=ctx.obj["db"], settings=settings)
    logger.info("Listening on http://%s:%d", host, port)
    click.echo(f"Serving bookkeeper API on http://{host}:{port}/api")
    app.run(host=host, port=port, threaded=True)


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
