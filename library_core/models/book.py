# library_core/models/book.py
from enum import Enum
from sqlalchemy import Integer, SmallInteger, String, ForeignKey, CheckConstraint, Index
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, enum_values

class AuthorRole(str, Enum):
    PRIMARY_AUTHOR = "Primary Author"
    CO_AUTHOR = "Co-Author"
    EDITOR = "Editor"

class BookAuthor(Base):
    """Association model linking books to their authors"""
    __tablename__ = 'book_authors'

    book_id: Mapped[int] = mapped_column(
        ForeignKey('books.book_id', name='fk_ba_book', ondelete='CASCADE', onupdate='CASCADE'),
        primary_key=True
    )
    author_id: Mapped[int] = mapped_column(
        ForeignKey('authors.author_id', name='fk_ba_author', ondelete='CASCADE', onupdate='CASCADE'),
        primary_key=True
    )
    role: Mapped[AuthorRole | None] = mapped_column(
        SAEnum(
            AuthorRole,
            name='book_author_role',
            values_callable=enum_values,
            native_enum=False,
            create_constraint=True,
            length=20
        ),
        nullable=True,
        default=AuthorRole.PRIMARY_AUTHOR,
        server_default=AuthorRole.PRIMARY_AUTHOR.value
    )

    # Relationships
    book = relationship('Book', back_populates='book_authors')
    author = relationship('Author', back_populates='book_authors')

class Book(Base):
    __tablename__ = 'books'

    book_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    isbn: Mapped[str] = mapped_column(String(13), unique=True, nullable=False)
    publication_year: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)
    total_copies: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default='1')
    available_copies: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default='1')
    category_id: Mapped[int] = mapped_column(
        ForeignKey('categories.category_id', name='fk_book_category', ondelete='RESTRICT', onupdate='CASCADE'),
        nullable=False
    )

    # Relationships
    category = relationship('Category', back_populates='books')
    book_authors = relationship(
        'BookAuthor',
        back_populates='book',
        cascade='all, delete-orphan',
        passive_deletes=True
    )
    # Loans block deletion (ON DELETE RESTRICT); the database decides
    loans = relationship('Loan', back_populates='book', passive_deletes='all')

    # Convenience relationship
    authors = relationship('Author', secondary='book_authors', viewonly=True)

    __table_args__ = (
        CheckConstraint(
            'available_copies <= total_copies AND available_copies >= 0',
            name='chk_copies'
        ),

        # Search indexes
        Index('idx_books_title', 'title'),
        Index('idx_books_isbn', 'isbn'),
    )

    @property
    def borrowed_copies(self) -> int:
        return self.total_copies - self.available_copies

    def __repr__(self) -> str:
        return f"<Book {self.book_id} {self.title!r}>"
