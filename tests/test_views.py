# tests/test_views.py
import pytest
from datetime import date, timedelta
from sqlalchemy.sql import text
from library_core.models import Author, Book, BookAuthor, AuthorRole, Loan, LoanStatus
from library_core.repositories import ReportRepository

@pytest.fixture
def report_repo(db_session):
    return ReportRepository(db_session)

def _add_loan(db_session, book, member, due_in_days, status=LoanStatus.ACTIVE):
    due_date = date.today() + timedelta(days=due_in_days)
    loan = Loan(
        book_id=book.book_id,
        member_id=member.member_id,
        loan_date=due_date - timedelta(days=14),
        due_date=due_date,
        status=status
    )
    db_session.add(loan)
    db_session.commit()
    return loan

def test_book_details_for_1984(seeded, report_repo):
    rows = report_repo.get_book_details(title="1984")
    assert len(rows) == 1
    row = rows[0]
    assert row.authors == "George Orwell"
    assert row.category_name == "Fiction"
    assert row.isbn == "9780451524935"
    assert row.publication_year == 1949
    assert (row.available_copies, row.total_copies) == (2, 3)

def test_book_details_one_row_per_book(seeded, report_repo):
    rows = report_repo.get_book_details()
    assert [row.title for row in rows] == ["1984", "Foundation", "Murder on the Orient Express"]

def test_book_details_raw_sql(seeded):
    rows = seeded.execute(text("SELECT * FROM book_details WHERE title = '1984'")).mappings().all()
    assert len(rows) == 1
    assert rows[0]["authors"] == "George Orwell"

def test_book_details_concatenates_all_authors(db_session, sample_book, report_repo):
    co_author = Author(first_name="Second", last_name="Writer", email="second.writer@example.com")
    db_session.add(co_author)
    db_session.flush()
    db_session.add(BookAuthor(book_id=sample_book.book_id, author_id=co_author.author_id, role=AuthorRole.CO_AUTHOR))
    db_session.commit()

    rows = report_repo.get_book_details(title="Test Book")
    assert len(rows) == 1
    assert sorted(rows[0].authors.split(", ")) == ["Second Writer", "Test Author"]

def test_book_details_excludes_books_without_authors(db_session, sample_book, sample_category, report_repo):
    db_session.add(Book(
        title="Anonymous",
        isbn="9780000000010",
        category_id=sample_category.category_id
    ))
    db_session.commit()

    titles = [row.title for row in report_repo.get_book_details()]
    assert titles == ["Test Book"]

def test_active_loans_past_due_is_positive(db_session, sample_book, sample_member, report_repo):
    loan = _add_loan(db_session, sample_book, sample_member, due_in_days=-10)

    rows = report_repo.get_active_loans()
    assert len(rows) == 1
    assert rows[0].loan_id == loan.loan_id
    # SQLite evaluates CURRENT_DATE in UTC; a day either way still keeps the sign
    assert 9 <= rows[0].days_overdue <= 11

def test_active_loans_future_due_is_negative(db_session, sample_book, sample_member, report_repo):
    _add_loan(db_session, sample_book, sample_member, due_in_days=10)

    rows = report_repo.get_active_loans()
    assert len(rows) == 1
    assert -11 <= rows[0].days_overdue <= -9

def test_active_loans_row_contents(db_session, sample_book, sample_member, report_repo):
    loan = _add_loan(db_session, sample_book, sample_member, due_in_days=5)

    row = report_repo.get_active_loans()[0]
    assert row.member_name == "Test Member"
    assert row.book_title == "Test Book"
    assert row.loan_date == loan.loan_date
    assert row.due_date == loan.due_date

def test_active_loans_only_lists_active_status(db_session, sample_book, sample_member, report_repo):
    _add_loan(db_session, sample_book, sample_member, due_in_days=-3, status=LoanStatus.OVERDUE)
    _add_loan(db_session, sample_book, sample_member, due_in_days=-2, status=LoanStatus.RETURNED)
    active = _add_loan(db_session, sample_book, sample_member, due_in_days=3)

    rows = report_repo.get_active_loans()
    assert [row.loan_id for row in rows] == [active.loan_id]

def test_active_loans_overdue_only(db_session, sample_book, sample_member, report_repo):
    late = _add_loan(db_session, sample_book, sample_member, due_in_days=-10)
    _add_loan(db_session, sample_book, sample_member, due_in_days=10)

    rows = report_repo.get_active_loans(overdue_only=True)
    assert [row.loan_id for row in rows] == [late.loan_id]

def test_active_loans_view_does_not_change_status(db_session, sample_book, sample_member, report_repo):
    loan = _add_loan(db_session, sample_book, sample_member, due_in_days=-30)
    report_repo.get_active_loans()

    db_session.expire_all()
    assert db_session.get(Loan, loan.loan_id).status == LoanStatus.ACTIVE

def test_seeded_active_loans_are_overdue(seeded, report_repo):
    rows = report_repo.get_active_loans()
    assert {row.member_name for row in rows} == {"John Doe", "Jane Smith"}
    assert all(row.days_overdue > 0 for row in rows)
