import click

from lending.errors import NotFound
from lending.sa.models import Librarian
from ..utils import open_catalog, domain_errors, parse_date, print_table, success

@click.group()
def librarian():
    """Librarian commands"""
    pass

@librarian.command(name='list')
@click.pass_context
@domain_errors
def list_librarians(ctx):
    """List librarians"""
    catalog = open_catalog(ctx)
    rows = []
    for lib in catalog.librarians.find_all():
        u = catalog.users.find_by_id(lib.user_id)
        rows.append([lib.id, u.name if u else None, lib.position, lib.hire_date])
    print_table(["ID", "Name", "Position", "Hired"], rows, empty="No librarians.")

@librarian.command()
@click.argument('user_id', type=int)
@click.option('--position', default=None)
@click.option('--hire-date', default=None, help='YYYY-MM-DD')
@click.pass_context
@domain_errors
def add(ctx, user_id, position, hire_date):
    """Make an existing user a librarian"""
    catalog = open_catalog(ctx)
    if catalog.users.find_by_id(user_id) is None:
        raise NotFound("User", user_id)
    created = catalog.librarians.create(
        Librarian(user_id=user_id, position=position, hire_date=parse_date(hire_date))
    )
    success(f"Added librarian {created.id} for user {user_id}")

@librarian.command()
@click.argument('librarian_id', type=int)
@click.pass_context
@domain_errors
def delete(ctx, librarian_id):
    """Delete a librarian record"""
    catalog = open_catalog(ctx)
    if catalog.librarians.delete(librarian_id):
        success(f"Deleted librarian {librarian_id}")
    else:
        click.echo(click.style(f"Librarian {librarian_id} not found", fg='yellow'))
