# tests/conftest.py
import os
import sys
import pytest
from pathlib import Path
from datetime import date, timedelta
from sqlalchemy.sql import text

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from library_core.models import (
    Base, Category, Author, Book, BookAuthor, AuthorRole,
    Member, Loan, LoanStatus
)
from library_core.database import Database
from library_core.seed import load_sample_data

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_library.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.dispose()
    try:
        os.remove(test_db_path)
    except OSError:
        pass  # Ignore errors if file doesn't exist

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    # Delete all data from tables in reverse order of dependencies
    db_session.execute(text("DELETE FROM loans"))
    db_session.execute(text("DELETE FROM book_authors"))
    db_session.execute(text("DELETE FROM books"))
    db_session.execute(text("DELETE FROM authors"))
    db_session.execute(text("DELETE FROM categories"))
    db_session.execute(text("DELETE FROM members"))
    db_session.commit()
    yield
    # Clean up after test as well
    db_session.rollback()

@pytest.fixture
def sample_category(db_session):
    """Create a sample category for testing."""
    category = Category(category_name="Test Category", description="Test category description")
    db_session.add(category)
    db_session.commit()
    return category

@pytest.fixture
def sample_author(db_session):
    """Create a sample author for testing."""
    author = Author(
        first_name="Test",
        last_name="Author",
        email="test.author@example.com",
        birth_date=date(1950, 1, 1)
    )
    db_session.add(author)
    db_session.commit()
    return author

@pytest.fixture
def sample_book(db_session, sample_category, sample_author):
    """Create a sample book linked to the sample author."""
    book = Book(
        title="Test Book",
        isbn="9780000000001",
        publication_year=2000,
        total_copies=2,
        available_copies=2,
        category_id=sample_category.category_id
    )
    book.book_authors.append(BookAuthor(author_id=sample_author.author_id, role=AuthorRole.PRIMARY_AUTHOR))
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def sample_member(db_session):
    """Create a sample member for testing."""
    member = Member(
        first_name="Test",
        last_name="Member",
        email="test.member@example.com",
        phone="555-0000",
        address="1 Test Lane"
    )
    db_session.add(member)
    db_session.commit()
    return member

@pytest.fixture
def sample_loan(db_session, sample_book, sample_member):
    """Create an active loan of the sample book, due in ten days."""
    loan = Loan(
        book_id=sample_book.book_id,
        member_id=sample_member.member_id,
        loan_date=date.today() - timedelta(days=4),
        due_date=date.today() + timedelta(days=10),
        status=LoanStatus.ACTIVE
    )
    db_session.add(loan)
    db_session.commit()
    return loan

@pytest.fixture
def seeded(db_session):
    """Load the sample library rows."""
    assert load_sample_data(db_session)
    return db_session
