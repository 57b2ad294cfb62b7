# library_cli/commands/loan.py
import click
from datetime import datetime
from library_core.models import LoanStatus
from library_core.repositories import LoanRepository, ReportRepository
from library_core.services import LoanService
from ..utils import session_scope, print_table

STATUS_CHOICES = [status.value for status in LoanStatus]

def _parse_date(value):
    return value.date() if isinstance(value, datetime) else value

@click.group()
def loan():
    """Lending commands"""
    pass

@loan.command()
@click.option('--overdue-only/--all', default=False, help='Only loans past their due date')
@click.pass_context
def active(ctx: click.Context, overdue_only: bool):
    """Active loans with days overdue (SELECT * FROM active_loans)

    Negative days_overdue means the loan is not yet due.
    """
    with session_scope(ctx) as session:
        rows = ReportRepository(session).get_active_loans(overdue_only=overdue_only)
        print_table(
            ['loan_id', 'member', 'book', 'loan_date', 'due_date', 'days_overdue'],
            rows,
            empty_message="\nNo active loans."
        )

@loan.command()
@click.option('--status', type=click.Choice(STATUS_CHOICES), default=None, help='Only count loans with this status')
@click.pass_context
def count(ctx: click.Context, status: str):
    """Count loans (SELECT COUNT(*) FROM loans [WHERE status=...])"""
    with session_scope(ctx) as session:
        total = LoanRepository(session).count_by_status(LoanStatus(status) if status else None)
        click.echo(total)

@loan.command()
@click.argument('book_id', type=int)
@click.argument('member_id', type=int)
@click.option('--loan-date', type=click.DateTime(formats=['%Y-%m-%d']), default=None, help='Start date (default: today)')
@click.option('--days', type=click.IntRange(min=1), default=None, help='Loan period in days (default: LOAN_PERIOD_DAYS or 14)')
@click.pass_context
def checkout(ctx: click.Context, book_id: int, member_id: int, loan_date, days: int):
    """Lend a copy of BOOK_ID to MEMBER_ID"""
    with session_scope(ctx) as session:
        new_loan = LoanService(session, loan_period_days=days).checkout_book(
            book_id, member_id, loan_date=_parse_date(loan_date)
        )
        click.echo(
            click.style("\nCreated loan ", fg='green') +
            click.style(str(new_loan.loan_id), fg='cyan') +
            click.style(f", due {new_loan.due_date}", fg='green')
        )

@loan.command(name='return')
@click.argument('loan_id', type=int)
@click.option('--return-date', type=click.DateTime(formats=['%Y-%m-%d']), default=None, help='Return date (default: today)')
@click.option('--fine', type=float, default=None, help='Fine to record on the loan, e.g. 2.50')
@click.pass_context
def return_loan(ctx: click.Context, loan_id: int, return_date, fine: float):
    """Close LOAN_ID and put the copy back on the shelf"""
    with session_scope(ctx) as session:
        closed = LoanService(session).return_book(
            loan_id, return_date=_parse_date(return_date), fine_amount=fine
        )
        click.echo(
            click.style("\nReturned loan ", fg='green') +
            click.style(str(closed.loan_id), fg='cyan') +
            click.style(f" on {closed.return_date}", fg='green')
        )

@loan.command(name='mark-overdue')
@click.option('--as-of', type=click.DateTime(formats=['%Y-%m-%d']), default=None, help='Reference date (default: today)')
@click.pass_context
def mark_overdue(ctx: click.Context, as_of):
    """Move Active loans past their due date to Overdue"""
    with session_scope(ctx) as session:
        changed = LoanService(session).mark_overdue_loans(as_of=_parse_date(as_of))
        click.echo(
            click.style("\nMarked ", fg='blue') +
            click.style(str(changed), fg='cyan') +
            click.style(" loan(s) overdue", fg='blue')
        )
