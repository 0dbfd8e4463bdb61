import click

from ..utils import open_catalog, domain_errors, parse_date, print_table, success

@click.group()
def loan():
    """Borrowing commands"""
    pass

@loan.command(name='list')
@click.option('--open-only', is_flag=True, help='Only loans that were not returned')
@click.pass_context
@domain_errors
def list_loans(ctx, open_only):
    """List borrowings"""
    catalog = open_catalog(ctx)
    loans = catalog.borrowings.get_open() if open_only else catalog.borrowings.find_all()
    rows = [[b.id, b.user_id, b.copy_id, b.borrow_date, b.return_date] for b in loans]
    print_table(["ID", "User", "Copy", "Borrowed", "Returned"], rows, empty="No borrowings.")

@loan.command()
@click.argument('user_id', type=int)
@click.argument('book_id', type=int)
@click.option('--borrow-date', default=None, help='YYYY-MM-DD (default: today)')
@click.pass_context
@domain_errors
def lend(ctx, user_id, book_id, borrow_date):
    """Lend a free copy of BOOK_ID to USER_ID"""
    catalog = open_catalog(ctx)
    borrowing = catalog.circulation.lend(user_id, book_id, borrow_date=parse_date(borrow_date))
    success(f"Lent copy {borrowing.copy_id} to user {user_id} (loan {borrowing.id})")

@loan.command(name='return')
@click.argument('borrowing_id', type=int)
@click.option('--return-date', default=None, help='YYYY-MM-DD (default: today)')
@click.pass_context
@domain_errors
def return_loan(ctx, borrowing_id, return_date):
    """Mark a borrowing as returned"""
    catalog = open_catalog(ctx)
    borrowing = catalog.circulation.return_borrowing(borrowing_id, parse_date(return_date))
    success(f"Loan {borrowing.id} returned on {borrowing.return_date}")

@loan.command()
@click.argument('borrowing_id', type=int)
@click.pass_context
@domain_errors
def delete(ctx, borrowing_id):
    """Delete a borrowing and put its copy back to Available"""
    catalog = open_catalog(ctx)
    if catalog.borrowings.delete(borrowing_id):
        success(f"Deleted loan {borrowing_id}")
    else:
        click.echo(click.style(f"Loan {borrowing_id} not found", fg='yellow'))
