# lending_cli/main.py
import logging

import click

from lending.sa.database import DATABASE_URL_ENV
from .commands.db import db
from .commands.book import book
from .commands.copy import copy
from .commands.publisher import publisher
from .commands.user import user
from .commands.librarian import librarian
from .commands.loan import loan

@click.group()
@click.option('--database-url', envvar=DATABASE_URL_ENV, default=None,
              help=f'SQLAlchemy database URL (default: ${DATABASE_URL_ENV} or sqlite:///library.db)')
@click.option('--verbose/--no-verbose', default=False, help='Show debug logging')
@click.pass_context
def cli(ctx, database_url, verbose):
    """Library lending catalog CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    ctx.ensure_object(dict)
    ctx.obj['database_url'] = database_url

cli.add_command(db)
cli.add_command(book)
cli.add_command(copy)
cli.add_command(publisher)
cli.add_command(user)
cli.add_command(librarian)
cli.add_command(loan)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
