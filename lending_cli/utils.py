import functools
import logging
from datetime import date, datetime
from typing import Any, Callable, Iterable, List, Optional

import click

from lending import LendingCatalog, LendingError, NotFound, PreconditionViolation

logger = logging.getLogger(__name__)

def open_catalog(ctx: click.Context) -> LendingCatalog:
    """Open a catalog on the database chosen by the root command.

    The catalog is closed when the command finishes.
    """
    url = ctx.obj.get('database_url') if ctx.obj else None
    catalog = LendingCatalog.open(url)
    ctx.call_on_close(catalog.close)
    return catalog

def domain_errors(func: Callable) -> Callable:
    """Print lending errors in red and exit with status 1 instead of a traceback"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PreconditionViolation as e:
            click.echo(click.style(f"Refused ({e.rule}): {e}", fg='red'), err=True)
            logger.debug("Precondition failed", exc_info=True)
            raise click.exceptions.Exit(1)
        except NotFound as e:
            click.echo(click.style(f"Not found: {e}", fg='red'), err=True)
            raise click.exceptions.Exit(1)
        except LendingError as e:
            click.echo(click.style(f"Error: {e}", fg='red'), err=True)
            raise click.exceptions.Exit(1)
    return wrapper

def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse a YYYY-MM-DD string, None stays None"""
    if not value:
        return None
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a date in YYYY-MM-DD format")

def print_table(headers: List[str], rows: Iterable[Iterable[Any]], empty: str = "Nothing to show.") -> None:
    """Print rows as left-aligned columns"""
    rows = [["" if v is None else str(v) for v in row] for row in rows]
    if not rows:
        click.echo(click.style(empty, fg='yellow'))
        return
    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(v)) for w, v in zip(widths, row)]
    click.echo(click.style("  ".join(h.ljust(w) for h, w in zip(headers, widths)), fg='blue'))
    for row in rows:
        click.echo("  ".join(v.ljust(w) for v, w in zip(row, widths)))

def success(message: str) -> None:
    click.echo(click.style(message, fg='green'))
