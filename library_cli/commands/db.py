# library_cli/commands/db.py
import click
from library_core.seed import load_sample_data
from ..utils import get_database, session_scope

@click.group()
def db():
    """Schema management commands"""
    pass

@db.command()
@click.option('--seed/--no-seed', default=False, help='Also load the sample rows')
@click.pass_context
def init(ctx: click.Context, seed: bool):
    """Create tables, indexes and views

    Example:
        library-db db init --seed
    """
    database = get_database(ctx)
    database.init_db()
    click.echo(click.style("\nSchema created", fg='green'))

    if seed:
        ctx.invoke(seed_command)

@db.command(name='seed')
@click.pass_context
def seed_command(ctx: click.Context):
    """Load the sample categories, authors, books, members and loans"""
    with session_scope(ctx) as session:
        if load_sample_data(session):
            click.echo(click.style("Sample data loaded", fg='green'))
        else:
            click.echo(click.style("Database already has data, nothing loaded", fg='yellow'))

@db.command()
@click.confirmation_option(prompt='Drop every table and view?')
@click.pass_context
def drop(ctx: click.Context):
    """Drop views and tables"""
    get_database(ctx).drop_db()
    click.echo(click.style("\nSchema dropped", fg='green'))

@db.command()
@click.pass_context
def tables(ctx: click.Context):
    """List tables and views (SHOW TABLES)"""
    database = get_database(ctx)
    table_names = database.table_names()
    view_names = database.view_names()

    if not table_names and not view_names:
        click.echo(click.style("\nNo tables found. Run 'db init' first.", fg='yellow'))
        return

    click.echo(click.style("\nTables:", fg='blue'))
    for name in table_names:
        click.echo(f" - {name}")
    click.echo(click.style("Views:", fg='blue'))
    for name in view_names:
        click.echo(f" - {name}")
