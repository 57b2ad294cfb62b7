# library_core/models/member.py
from datetime import date
from enum import Enum
from sqlalchemy import Integer, String, Text, Date, CheckConstraint, Index, text
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, enum_values

class MemberStatus(str, Enum):
    ACTIVE = "Active"
    SUSPENDED = "Suspended"
    EXPIRED = "Expired"

class Member(Base):
    __tablename__ = 'members'

    member_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(15), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    join_date: Mapped[date] = mapped_column(Date, nullable=False, server_default=text('(CURRENT_DATE)'))
    status: Mapped[MemberStatus | None] = mapped_column(
        SAEnum(
            MemberStatus,
            name='member_status',
            values_callable=enum_values,
            native_enum=False,
            create_constraint=True,
            length=20
        ),
        nullable=True,
        default=MemberStatus.ACTIVE,
        server_default=MemberStatus.ACTIVE.value
    )

    # Loans block deletion (ON DELETE RESTRICT)
    loans = relationship('Loan', back_populates='member', passive_deletes='all')

    __table_args__ = (
        CheckConstraint("email LIKE '%@%.%'", name='chk_member_email'),
        Index('idx_members_email', 'email'),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Member {self.member_id} {self.full_name!r}>"
