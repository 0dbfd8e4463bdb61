import click

from lending.sa.models import CopyStatus
from ..utils import open_catalog, domain_errors, success

STATUS_CHOICES = [s.value for s in CopyStatus]

@click.group()
def copy():
    """Copy commands"""
    pass

@copy.command()
@click.argument('book_id', type=int)
@click.option('--status', type=click.Choice(STATUS_CHOICES), default=CopyStatus.AVAILABLE.value, show_default=True)
@click.pass_context
@domain_errors
def add(ctx, book_id, status):
    """Add a copy to a book"""
    catalog = open_catalog(ctx)
    created = catalog.circulation.add_copy(book_id, CopyStatus(status))
    success(f"Added copy {created.id} (number {created.copy_number}) to book {book_id}")

@copy.command()
@click.argument('copy_id', type=int)
@click.argument('status', type=click.Choice(STATUS_CHOICES))
@click.pass_context
@domain_errors
def status(ctx, copy_id, status):
    """Set the status of a copy"""
    catalog = open_catalog(ctx)
    updated = catalog.copies.set_status(copy_id, CopyStatus(status))
    success(f"Copy {updated.id} is now {updated.status.value}")

@copy.command()
@click.argument('copy_id', type=int)
@click.pass_context
@domain_errors
def delete(ctx, copy_id):
    """Delete a copy that is not Borrowed"""
    catalog = open_catalog(ctx)
    if catalog.copies.delete(copy_id):
        success(f"Deleted copy {copy_id}")
    else:
        click.echo(click.style(f"Copy {copy_id} not found", fg='yellow'))
