# library_core/models/__init__.py
from .base import Base
from .category import Category
from .author import Author
from .book import Book, BookAuthor, AuthorRole
from .member import Member, MemberStatus
from .loan import Loan, LoanStatus

__all__ = [
    'Base',
    'Category',
    'Author',
    'Book',
    'BookAuthor',
    'AuthorRole',
    'Member',
    'MemberStatus',
    'Loan',
    'LoanStatus'
]
