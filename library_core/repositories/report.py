# library_core/repositories/report.py
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session
from library_core.views import book_details, active_loans

class ReportRepository:
    """Reads the book_details and active_loans views."""

    def __init__(self, session: Session):
        self.session = session

    def get_book_details(self, title: Optional[str] = None) -> List[Row]:
        """SELECT * FROM book_details, optionally filtered by exact title.

        Args:
            title: Only return the row for this title

        Returns:
            Rows with book_id, title, isbn, publication_year, available_copies,
            total_copies, category_name and the comma-separated authors
        """
        query = select(book_details)
        if title is not None:
            query = query.where(book_details.c.title == title)
        return list(self.session.execute(query.order_by(book_details.c.book_id)).all())

    def get_active_loans(self, overdue_only: bool = False) -> List[Row]:
        """SELECT * FROM active_loans.

        Args:
            overdue_only: Only rows whose due date has passed (days_overdue > 0)

        Returns:
            Rows with loan_id, member_name, book_title, loan_date, due_date and
            days_overdue, most overdue first
        """
        query = select(active_loans)
        if overdue_only:
            query = query.where(active_loans.c.days_overdue > 0)
        query = query.order_by(active_loans.c.days_overdue.desc(), active_loans.c.loan_id)
        return list(self.session.execute(query).all())
