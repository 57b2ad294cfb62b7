# library_cli/utils.py
import click
import logging
from contextlib import contextmanager
from typing import Iterator, List, Sequence, Any, Optional
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from sqlalchemy.orm import Session
from library_core.database import Database
from library_core.exceptions import LibraryError

logger = logging.getLogger(__name__)

def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; INFO with --verbose, WARNING otherwise"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

def get_database(ctx: click.Context) -> Database:
    """Build the Database once per invocation from the root group's options"""
    root = ctx.find_root()
    root.ensure_object(dict)
    if 'database' not in root.obj:
        root.obj['database'] = Database(root.obj.get('database_url'))
        root.call_on_close(root.obj['database'].dispose)
    return root.obj['database']

@contextmanager
def session_scope(ctx: click.Context) -> Iterator[Session]:
    """Session for one command; domain and database errors end the command with exit code 1"""
    session = get_database(ctx).get_session()
    try:
        yield session
    except IntegrityError as e:
        session.rollback()
        click.echo(click.style(f"\nRejected by database: {e.orig}", fg='red'), err=True)
        ctx.exit(1)
    except (LibraryError, SQLAlchemyError) as e:
        session.rollback()
        click.echo(click.style(f"\nError: {str(e)}", fg='red'), err=True)
        ctx.exit(1)
    finally:
        session.close()

def format_value(value: Any) -> str:
    if value is None:
        return "-"
    if hasattr(value, 'value'):  # enums
        return str(value.value)
    return str(value)

def print_table(headers: Sequence[str], rows: List[Sequence[Any]], empty_message: Optional[str] = None) -> None:
    """Print rows as aligned columns, like a SQL client would"""
    if not rows:
        click.echo(click.style(empty_message or "\nNo rows.", fg='yellow'))
        return

    cells = [[format_value(value) for value in row] for row in rows]
    widths = [
        max(len(str(header)), *(len(row[i]) for row in cells))
        for i, header in enumerate(headers)
    ]

    click.echo(click.style("  ".join(str(h).ljust(w) for h, w in zip(headers, widths)), fg='blue'))
    click.echo(click.style("  ".join("-" * w for w in widths), fg='blue'))
    for row in cells:
        click.echo("  ".join(cell.ljust(w) for cell, w in zip(row, widths)))
    click.echo(click.style(f"\n{len(rows)} row(s)", fg='cyan'))
