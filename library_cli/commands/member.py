# library_cli/commands/member.py
import click
from library_core.models import MemberStatus
from library_core.repositories import MemberRepository, LoanRepository
from ..utils import session_scope, print_table

@click.group()
def member():
    """Member commands"""
    pass

@member.command(name='list')
@click.argument('query', required=False, default='')
@click.option('--limit', default=20, type=int, help='Maximum number of members to show')
@click.pass_context
def list_members(ctx: click.Context, query: str, limit: int):
    """List members, optionally filtered by name or email"""
    with session_scope(ctx) as session:
        members = MemberRepository(session).search_members(query, limit=limit)
        print_table(
            ['member_id', 'name', 'email', 'phone', 'joined', 'status'],
            [(m.member_id, m.full_name, m.email, m.phone, m.join_date, m.status) for m in members],
            empty_message="\nNo members found."
        )

@member.command()
@click.argument('member_id', type=int)
@click.argument('status', type=click.Choice([s.value for s in MemberStatus]))
@click.pass_context
def status(ctx: click.Context, member_id: int, status: str):
    """Set MEMBER_ID's status to Active, Suspended or Expired"""
    with session_scope(ctx) as session:
        updated = MemberRepository(session).update_status(member_id, MemberStatus(status))
        if updated is None:
            click.echo(click.style(f"\nMember {member_id} not found", fg='red'), err=True)
            ctx.exit(1)
        click.echo(
            click.style(f"\n{updated.full_name} is now ", fg='green') +
            click.style(status, fg='cyan')
        )

@member.command()
@click.argument('member_id', type=int)
@click.option('--open-only/--all', default=False, help='Only loans that still hold a copy')
@click.pass_context
def loans(ctx: click.Context, member_id: int, open_only: bool):
    """Show MEMBER_ID's loan history"""
    with session_scope(ctx) as session:
        history = LoanRepository(session).get_loans_by_member(member_id, open_only=open_only)
        print_table(
            ['loan_id', 'book_id', 'loan_date', 'due_date', 'return_date', 'fine', 'status'],
            [
                (r.loan_id, r.book_id, r.loan_date, r.due_date, r.return_date, r.fine_amount, r.status)
                for r in history
            ],
            empty_message=f"\nNo loans for member {member_id}."
        )
