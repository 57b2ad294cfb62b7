# library_cli/main.py
import click
from .commands.db import db
from .commands.book import book
from .commands.loan import loan
from .commands.member import member
from .utils import configure_logging

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='SQLAlchemy database URL (default: sqlite:///library.db)')
@click.option('--verbose/--no-verbose', default=False, help='Log schema and workflow activity')
@click.pass_context
def cli(ctx: click.Context, database_url: str, verbose: bool):
    """Simple Library lending database CLI"""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['database_url'] = database_url

cli.add_command(db)
cli.add_command(book)
cli.add_command(loan)
cli.add_command(member)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
