# library_core/models/loan.py
from datetime import date
from decimal import Decimal
from enum import Enum
from sqlalchemy import Integer, Date, Numeric, ForeignKey, CheckConstraint, Index, and_, text
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, enum_values

class LoanStatus(str, Enum):
    ACTIVE = "Active"
    RETURNED = "Returned"
    OVERDUE = "Overdue"

class Loan(Base):
    __tablename__ = 'loans'

    loan_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    book_id: Mapped[int] = mapped_column(
        ForeignKey('books.book_id', name='fk_loan_book', ondelete='RESTRICT', onupdate='CASCADE'),
        nullable=False
    )
    member_id: Mapped[int] = mapped_column(
        ForeignKey('members.member_id', name='fk_loan_member', ondelete='RESTRICT', onupdate='CASCADE'),
        nullable=False
    )
    loan_date: Mapped[date] = mapped_column(Date, nullable=False, server_default=text('(CURRENT_DATE)'))
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    return_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    fine_amount: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2),
        default=Decimal('0.00'),
        server_default='0.00'
    )
    status: Mapped[LoanStatus | None] = mapped_column(
        SAEnum(
            LoanStatus,
            name='loan_status',
            values_callable=enum_values,
            native_enum=False,
            create_constraint=True,
            length=20
        ),
        default=LoanStatus.ACTIVE,
        server_default=LoanStatus.ACTIVE.value
    )

    # Relationships
    book = relationship('Book', back_populates='loans')
    member = relationship('Member', back_populates='loans')

    __table_args__ = (
        # Business rules
        CheckConstraint('due_date > loan_date', name='chk_due_date'),
        CheckConstraint('return_date IS NULL OR return_date >= loan_date', name='chk_return_date'),
        CheckConstraint('fine_amount >= 0', name='chk_fine_amount'),

        Index('idx_loans_status', 'status'),
        Index('idx_loans_due_date', 'due_date'),
    )

    @property
    def is_open(self) -> bool:
        """Loan still holds a copy (Active or Overdue)"""
        return self.status != LoanStatus.RETURNED

    def __repr__(self) -> str:
        return f"<Loan {self.loan_id} book={self.book_id} member={self.member_id} {self.status}>"

    @classmethod
    def overdue_as_of(cls, as_of: date):
        """WHERE clause for Active loans whose due date is before ``as_of``"""
        return and_(cls.status == LoanStatus.ACTIVE, cls.due_date < as_of)
