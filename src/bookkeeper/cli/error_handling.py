"""CLI error handling helpers."""

import functools
import logging

import click

from bookkeeper.domain.errors import DomainError

logger = logging.getLogger(__name__)


def report_domain_errors(command):
    """Turn a DomainError raised by a command into an error line and exit 1.

    The line carries the same message and code the API answers with, e.g.
    ``Error: transaction category is in use (category_in_use)``.
    """

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except DomainError as e:
            logger.debug("Command rejected with %s: %s", e.code, e.message)
            click.echo(f"Error: {e.message} ({e.code})", err=True)
            click.get_current_context().exit(1)

    return wrapper
