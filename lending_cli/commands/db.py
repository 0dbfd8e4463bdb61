import click

from lending.sa.database import Database
from lending.seed import seed_sample_data
from ..utils import open_catalog, success, domain_errors

@click.group()
def db():
    """Database management commands"""
    pass

@db.command()
@click.option('--drop', is_flag=True, help='Drop existing tables first')
@click.pass_context
def init(ctx, drop):
    """Create the catalog tables"""
    database = Database(ctx.obj.get('database_url'))
    try:
        if drop:
            database.drop_db()
        database.init_db()
    finally:
        database.close()
    success("Database initialized")

@db.command()
@click.pass_context
@domain_errors
def seed(ctx):
    """Insert the sample users, publishers, books, copies and loans"""
    catalog = open_catalog(ctx)
    if catalog.books.count() or catalog.users.count():
        click.echo(click.style("Catalog is not empty, skipping seed", fg='yellow'))
        return
    created = seed_sample_data(catalog.session)
    success("Seeded " + ", ".join(f"{len(items)} {kind}" for kind, items in created.items()))
