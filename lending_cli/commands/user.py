import click

from lending.sa.models import User
from ..utils import open_catalog, domain_errors, print_table, success

@click.group()
def user():
    """User commands"""
    pass

@user.command(name='list')
@click.pass_context
@domain_errors
def list_users(ctx):
    """List users"""
    catalog = open_catalog(ctx)
    rows = [[u.id, u.name, u.email, u.phone_number, u.address] for u in catalog.users.find_all()]
    print_table(["ID", "Name", "Email", "Phone", "Address"], rows, empty="No users.")

@user.command()
@click.option('--name', required=True)
@click.option('--email', required=True)
@click.option('--phone', default=None)
@click.option('--address', default=None)
@click.pass_context
@domain_errors
def add(ctx, name, email, phone, address):
    """Add a user"""
    catalog = open_catalog(ctx)
    created = catalog.users.create(User(name=name, email=email, phone_number=phone, address=address))
    success(f"Added user {created.id}: {created.name}")

@user.command()
@click.argument('user_id', type=int)
@click.pass_context
@domain_errors
def history(ctx, user_id):
    """Show the borrowing history of a user"""
    catalog = open_catalog(ctx)
    rows = []
    for b in catalog.circulation.borrowing_history(user_id):
        copy = catalog.copies.find_by_id(b.copy_id)
        title = catalog.books.find_by_id(copy.book_id).title if copy else None
        rows.append([b.id, title, b.borrow_date, b.return_date])
    print_table(["Loan ID", "Title", "Borrowed", "Returned"], rows, empty="No borrowings.")

@user.command()
@click.argument('user_id', type=int)
@click.pass_context
@domain_errors
def delete(ctx, user_id):
    """Delete a user without borrowings"""
    catalog = open_catalog(ctx)
    if catalog.users.delete(user_id):
        success(f"Deleted user {user_id}")
    else:
        click.echo(click.style(f"User {user_id} not found", fg='yellow'))
