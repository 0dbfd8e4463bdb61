import click

from lending.sa.models import Publisher
from ..utils import open_catalog, domain_errors, print_table, success

@click.group()
def publisher():
    """Publisher commands"""
    pass

@publisher.command(name='list')
@click.pass_context
@domain_errors
def list_publishers(ctx):
    """List publishers with the number of books referencing them"""
    catalog = open_catalog(ctx)
    rows = [[p.id, p.name, p.address, p.contact, catalog.index.count_books_of_publisher(p.id)]
            for p in catalog.publishers.find_all()]
    print_table(["ID", "Name", "Address", "Contact", "Books"], rows, empty="No publishers.")

@publisher.command()
@click.option('--name', required=True)
@click.option('--address', default=None)
@click.option('--contact', default=None)
@click.pass_context
@domain_errors
def add(ctx, name, address, contact):
    """Add a publisher"""
    catalog = open_catalog(ctx)
    created = catalog.publishers.create(Publisher(name=name, address=address, contact=contact))
    success(f"Added publisher {created.id}: {created.name}")

@publisher.command()
@click.argument('book_id', type=int)
@click.argument('publisher_id', type=int, required=False)
@click.pass_context
@domain_errors
def assign(ctx, book_id, publisher_id):
    """Point a book at a publisher (omit PUBLISHER_ID to detach it)"""
    catalog = open_catalog(ctx)
    catalog.publishers.assign_book(book_id, publisher_id)
    if publisher_id is None:
        success(f"Book {book_id} no longer references a publisher")
    else:
        success(f"Book {book_id} now references publisher {publisher_id}")

@publisher.command()
@click.argument('publisher_id', type=int)
@click.pass_context
@domain_errors
def delete(ctx, publisher_id):
    """Delete a publisher no book references"""
    catalog = open_catalog(ctx)
    if catalog.publishers.delete(publisher_id):
        success(f"Deleted publisher {publisher_id}")
    else:
        click.echo(click.style(f"Publisher {publisher_id} not found", fg='yellow'))
