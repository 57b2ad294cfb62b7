# library_core/models/author.py
from datetime import date
from sqlalchemy import Integer, String, Date, CheckConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class Author(Base):
    __tablename__ = 'authors'

    author_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str | None] = mapped_column(String(100), unique=True, nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Relationships
    book_authors = relationship(
        'BookAuthor',
        back_populates='author',
        cascade='all, delete-orphan',
        passive_deletes=True
    )

    # Convenience relationship
    books = relationship('Book', secondary='book_authors', viewonly=True)

    __table_args__ = (
        CheckConstraint("email LIKE '%@%.%'", name='chk_author_email'),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Author {self.author_id} {self.full_name!r}>"
