# library_core/services/__init__.py
from .loan_service import LoanService

__all__ = ['LoanService']
