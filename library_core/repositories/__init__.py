# library_core/repositories/__init__.py
from .category import CategoryRepository
from .author import AuthorRepository
from .book import BookRepository
from .member import MemberRepository
from .loan import LoanRepository
from .report import ReportRepository

__all__ = [
    'CategoryRepository',
    'AuthorRepository',
    'BookRepository',
    'MemberRepository',
    'LoanRepository',
    'ReportRepository'
]
