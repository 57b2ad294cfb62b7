# library_core/repositories/loan.py
from typing import List, Optional
from datetime import date
from sqlalchemy import func
from sqlalchemy.orm import joinedload
from library_core.models import Loan, LoanStatus
from .base import BaseRepository

class LoanRepository(BaseRepository[Loan]):
    model = Loan

    def get_with_details(self, loan_id: int) -> Optional[Loan]:
        """Get a loan with its book and member loaded"""
        return (
            self.session.query(Loan)
            .options(joinedload(Loan.book), joinedload(Loan.member))
            .filter(Loan.loan_id == loan_id)
            .first()
        )

    def get_loans_by_member(self, member_id: int, open_only: bool = False) -> List[Loan]:
        """Get a member's loans, most recent first.

        Args:
            member_id: The member whose loans to fetch
            open_only: Only include loans that still hold a copy (Active or Overdue)
        """
        query = self.session.query(Loan).filter(Loan.member_id == member_id)
        if open_only:
            query = query.filter(Loan.status != LoanStatus.RETURNED)
        return query.order_by(Loan.loan_date.desc(), Loan.loan_id.desc()).all()

    def get_loans_by_status(self, status: LoanStatus) -> List[Loan]:
        """Get all loans with the given status, earliest due first"""
        return (
            self.session.query(Loan)
            .filter(Loan.status == status)
            .order_by(Loan.due_date, Loan.loan_id)
            .all()
        )

    def count_by_status(self, status: Optional[LoanStatus] = None) -> int:
        """SELECT COUNT(*) FROM loans [WHERE status = ...]"""
        query = self.session.query(func.count(Loan.loan_id))
        if status is not None:
            query = query.filter(Loan.status == status)
        return query.scalar() or 0

    def get_overdue_candidates(self, as_of: date) -> List[Loan]:
        """Active loans whose due date has passed as of the given day"""
        return (
            self.session.query(Loan)
            .filter(Loan.overdue_as_of(as_of))
            .order_by(Loan.due_date)
            .all()
        )
