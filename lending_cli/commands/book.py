import click

from lending.sa.models import Book
from ..utils import open_catalog, domain_errors, print_table, success

@click.group()
def book():
    """Book commands"""
    pass

def _book_rows(catalog, books):
    for b in books:
        summary = catalog.circulation.book_summary(b.id)
        yield [b.id, b.title, b.author, b.isbn, b.publisher, b.publication_year,
               summary['total'], summary['available']]

BOOK_HEADERS = ["ID", "Title", "Author", "ISBN", "Publisher", "Year", "Copies", "Available"]

@book.command(name='list')
@click.option('--search', default=None, help='Only books whose title or author matches')
@click.pass_context
@domain_errors
def list_books(ctx, search):
    """List books with their copy counts"""
    catalog = open_catalog(ctx)
    books = catalog.books.search_books(search, limit=1000) if search else catalog.books.find_all()
    print_table(BOOK_HEADERS, _book_rows(catalog, books), empty="No books in the catalog.")

@book.command()
@click.pass_context
@domain_errors
def available(ctx):
    """List books with at least one Available copy"""
    catalog = open_catalog(ctx)
    print_table(BOOK_HEADERS, _book_rows(catalog, catalog.circulation.available_titles()),
                empty="No titles available.")

@book.command()
@click.argument('book_id', type=int)
@click.pass_context
@domain_errors
def show(ctx, book_id):
    """Show a book and its copies"""
    catalog = open_catalog(ctx)
    b = catalog.books.find_by_id(book_id)
    if b is None:
        click.echo(click.style(f"Book {book_id} not found", fg='yellow'))
        return
    click.echo(click.style(b.title, fg='cyan') + f" by {b.author} (ISBN {b.isbn})")
    rows = []
    for c in catalog.index.copies_of_book(b.id):
        open_loan = catalog.index.borrowing_of_copy(c.id)
        rows.append([c.id, c.copy_number, c.status.value, open_loan.user_id if open_loan else None])
    print_table(["Copy ID", "Number", "Status", "Borrowed by"], rows, empty="No copies.")

@book.command()
@click.option('--title', required=True)
@click.option('--author', required=True)
@click.option('--isbn', required=True)
@click.option('--publisher', default=None, help='Publisher name (free text)')
@click.option('--publisher-id', type=int, default=None, help='Publisher record to reference')
@click.option('--year', type=int, default=None, help='Publication year')
@click.option('--copies', type=int, default=1, show_default=True, help='Number of copies to create')
@click.pass_context
@domain_errors
def add(ctx, title, author, isbn, publisher, publisher_id, year, copies):
    """Add a book together with its copies"""
    catalog = open_catalog(ctx)
    if publisher_id is not None:
        ref = catalog.publishers.find_by_id(publisher_id)
        if ref is None:
            raise click.BadParameter(f"Publisher {publisher_id} not found", param_hint='--publisher-id')
        publisher = publisher or ref.name
    created = catalog.circulation.add_book_with_copies(
        Book(title=title, author=author, isbn=isbn, publisher=publisher,
             publication_year=year, publisher_id=publisher_id),
        copies=copies,
    )
    success(f"Added book {created.id}: {created.title} with {copies} copies")

@book.command()
@click.argument('book_id', type=int)
@click.pass_context
@domain_errors
def delete(ctx, book_id):
    """Delete a book that has no copies left"""
    catalog = open_catalog(ctx)
    if catalog.books.delete(book_id):
        success(f"Deleted book {book_id}")
    else:
        click.echo(click.style(f"Book {book_id} not found", fg='yellow'))
