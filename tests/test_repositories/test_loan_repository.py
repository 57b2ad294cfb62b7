# tests/test_repositories/test_loan_repository.py
import pytest
from datetime import date
from library_core.models import Loan, LoanStatus
from library_core.repositories import LoanRepository

@pytest.fixture
def loan_repo(db_session):
    return LoanRepository(db_session)

@pytest.fixture
def loan_history(db_session, sample_book, sample_member):
    """One loan of each status for the sample member."""
    loans = [
        Loan(book_id=sample_book.book_id, member_id=sample_member.member_id,
             loan_date=date(2024, 1, 1), due_date=date(2024, 1, 15),
             return_date=date(2024, 1, 10), status=LoanStatus.RETURNED),
        Loan(book_id=sample_book.book_id, member_id=sample_member.member_id,
             loan_date=date(2024, 2, 1), due_date=date(2024, 2, 15), status=LoanStatus.OVERDUE),
        Loan(book_id=sample_book.book_id, member_id=sample_member.member_id,
             loan_date=date(2024, 3, 1), due_date=date(2024, 3, 15), status=LoanStatus.ACTIVE),
    ]
    db_session.add_all(loans)
    db_session.commit()
    return loans

def test_get_with_details(loan_repo, sample_loan):
    loan = loan_repo.get_with_details(sample_loan.loan_id)
    assert loan.book.title == "Test Book"
    assert loan.member.full_name == "Test Member"

def test_get_loans_by_member(loan_repo, sample_member, loan_history):
    loans = loan_repo.get_loans_by_member(sample_member.member_id)
    assert [loan.loan_date for loan in loans] == [date(2024, 3, 1), date(2024, 2, 1), date(2024, 1, 1)]

def test_get_open_loans_by_member(loan_repo, sample_member, loan_history):
    loans = loan_repo.get_loans_by_member(sample_member.member_id, open_only=True)
    assert {loan.status for loan in loans} == {LoanStatus.ACTIVE, LoanStatus.OVERDUE}

def test_get_loans_by_status(loan_repo, loan_history):
    loans = loan_repo.get_loans_by_status(LoanStatus.OVERDUE)
    assert [loan.due_date for loan in loans] == [date(2024, 2, 15)]

def test_count_by_status(loan_repo, loan_history):
    assert loan_repo.count_by_status() == 3
    assert loan_repo.count_by_status(LoanStatus.ACTIVE) == 1
    assert loan_repo.count_by_status(LoanStatus.RETURNED) == 1

def test_count_seeded_active(loan_repo, seeded):
    assert loan_repo.count_by_status(LoanStatus.ACTIVE) == 2

def test_get_overdue_candidates(loan_repo, loan_history):
    assert [loan.due_date for loan in loan_repo.get_overdue_candidates(date(2024, 3, 16))] == [date(2024, 3, 15)]
    assert loan_repo.get_overdue_candidates(date(2024, 3, 15)) == []
