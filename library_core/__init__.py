# library_core/__init__.py
from .database import Database
from .models import (
    Base, Category, Author, Book, BookAuthor, AuthorRole,
    Member, MemberStatus, Loan, LoanStatus
)
from .seed import load_sample_data

__all__ = [
    'Database',
    'Base',
    'Category',
    'Author',
    'Book',
    'BookAuthor',
    'AuthorRole',
    'Member',
    'MemberStatus',
    'Loan',
    'LoanStatus',
    'load_sample_data'
]
