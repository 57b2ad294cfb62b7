# library_core/services/loan_service.py
"""Lending workflow on top of the schema.

The schema itself never touches ``available_copies`` or moves a loan from
Active to Overdue. This service does both inside ordinary session
transactions:

* checkout decrements ``available_copies`` with a conditional UPDATE in the
  same transaction as the loan insert, so two concurrent checkouts of the last
  copy cannot both succeed;
* return stamps the loan and puts the copy back on the shelf;
* ``mark_overdue_loans`` is the sweep an operator or scheduler runs to flag
  Active loans past their due date.

Fines are never computed here; a caller may record one on return.
"""
import logging
import os
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional, Union

from sqlalchemy import update
from sqlalchemy.orm import Session

from library_core.exceptions import (
    BookNotFoundError, MemberNotFoundError, MemberNotActiveError,
    BookUnavailableError, LoanNotFoundError, LoanAlreadyReturnedError, InvalidLoanPeriodError
)
from library_core.models import Book, Member, MemberStatus, Loan, LoanStatus

logger = logging.getLogger(__name__)

DEFAULT_LOAN_PERIOD_DAYS = 14

class LoanService:
    def __init__(self, session: Session, loan_period_days: Optional[int] = None):
        self.session = session
        if loan_period_days is None:
            configured = os.getenv("LOAN_PERIOD_DAYS", str(DEFAULT_LOAN_PERIOD_DAYS))
            try:
                loan_period_days = int(configured)
            except ValueError:
                raise InvalidLoanPeriodError(configured) from None
        if loan_period_days < 1:
            raise InvalidLoanPeriodError(loan_period_days)
        self.loan_period_days = loan_period_days

    def checkout_book(self, book_id: int, member_id: int, loan_date: Optional[date] = None) -> Loan:
        """Lend one copy of a book to a member.

        Args:
            book_id: The book to lend
            member_id: The borrowing member; must be Active
            loan_date: Day the loan starts (default: today)

        Returns:
            The new Active Loan, due ``loan_period_days`` after ``loan_date``

        Raises:
            MemberNotFoundError, MemberNotActiveError, BookNotFoundError, BookUnavailableError
        """
        loan_date = loan_date or date.today()
        try:
            member = self.session.get(Member, member_id)
            if member is None:
                raise MemberNotFoundError(member_id)
            if member.status != MemberStatus.ACTIVE:
                raise MemberNotActiveError(member_id, member.status.value if member.status else "unknown")

            if self.session.get(Book, book_id) is None:
                raise BookNotFoundError(book_id)

            result = self.session.execute(
                update(Book)
                .where(Book.book_id == book_id, Book.available_copies > 0)
                .values(available_copies=Book.available_copies - 1)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise BookUnavailableError(book_id)

            loan = Loan(
                book_id=book_id,
                member_id=member_id,
                loan_date=loan_date,
                due_date=loan_date + timedelta(days=self.loan_period_days),
                status=LoanStatus.ACTIVE
            )
            self.session.add(loan)
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            logger.warning(f"Checkout of book {book_id} by member {member_id} rejected: {e}")
            raise

        logger.info(f"Loan {loan.loan_id}: book {book_id} to member {member_id}, due {loan.due_date}")
        return loan

    def return_book(
        self,
        loan_id: int,
        return_date: Optional[date] = None,
        fine_amount: Optional[Union[Decimal, float, str]] = None
    ) -> Loan:
        """Close a loan (Active or Overdue) and put the copy back.

        Args:
            loan_id: The loan to close
            return_date: Day the book came back (default: today)
            fine_amount: Fine to record on the loan; left untouched when None

        Raises:
            LoanNotFoundError, LoanAlreadyReturnedError
        """
        return_date = return_date or date.today()
        try:
            loan = self.session.get(Loan, loan_id)
            if loan is None:
                raise LoanNotFoundError(loan_id)
            if loan.status == LoanStatus.RETURNED:
                raise LoanAlreadyReturnedError(loan_id)

            loan.return_date = return_date
            loan.status = LoanStatus.RETURNED
            if fine_amount is not None:
                loan.fine_amount = Decimal(str(fine_amount))

            self.session.execute(
                update(Book)
                .where(Book.book_id == loan.book_id)
                .values(available_copies=Book.available_copies + 1)
                .execution_options(synchronize_session=False)
            )
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            logger.warning(f"Return of loan {loan_id} rejected: {e}")
            raise

        logger.info(f"Loan {loan_id} returned on {return_date}")
        return loan

    def mark_overdue_loans(self, as_of: Optional[date] = None) -> int:
        """Move Active loans due before ``as_of`` (default: today) to Overdue.

        Returns:
            Number of loans transitioned
        """
        as_of = as_of or date.today()
        try:
            result = self.session.execute(
                update(Loan)
                .where(Loan.overdue_as_of(as_of))
                .values(status=LoanStatus.OVERDUE)
                .execution_options(synchronize_session=False)
            )
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info(f"Marked {result.rowcount} loans overdue as of {as_of}")
        return result.rowcount
