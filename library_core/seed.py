# library_core/seed.py
import logging
from datetime import date
from sqlalchemy.orm import Session

from library_core.models import (
    Category, Author, Book, BookAuthor, AuthorRole, Member, Loan, LoanStatus
)

logger = logging.getLogger(__name__)

CATEGORIES = [
    ("Fiction", "Fictional literature and novels"),
    ("Science", "Scientific and technical books"),
    ("History", "Historical books and biographies"),
    ("Technology", "Computer science and technology books"),
]

AUTHORS = [
    ("George", "Orwell", "g.orwell@email.com", date(1903, 6, 25)),
    ("Isaac", "Asimov", "i.asimov@email.com", date(1920, 1, 2)),
    ("Agatha", "Christie", "a.christie@email.com", date(1890, 9, 15)),
]

# title, isbn, year, total, available, category, author email
BOOKS = [
    ("1984", "9780451524935", 1949, 3, 2, "Fiction", "g.orwell@email.com"),
    ("Foundation", "9780553293357", 1951, 2, 2, "Science", "i.asimov@email.com"),
    ("Murder on the Orient Express", "9780062693662", 1934, 2, 1, "Fiction", "a.christie@email.com"),
]

MEMBERS = [
    ("John", "Doe", "john.doe@email.com", "555-0101", "123 Main St"),
    ("Jane", "Smith", "jane.smith@email.com", "555-0102", "456 Oak Ave"),
    ("Bob", "Johnson", "bob.johnson@email.com", "555-0103", "789 Pine Rd"),
]

# isbn, member email, loan date, due date
LOANS = [
    ("9780451524935", "john.doe@email.com", date(2024, 1, 15), date(2024, 2, 15)),
    ("9780062693662", "jane.smith@email.com", date(2024, 1, 10), date(2024, 2, 10)),
]

def load_sample_data(session: Session) -> bool:
    """Insert the sample library rows.

    Returns:
        True if the rows were inserted, False if the database already holds categories
    """
    if session.query(Category).first() is not None:
        logger.info("Sample data skipped: categories already present")
        return False

    try:
        categories = {
            name: Category(category_name=name, description=description)
            for name, description in CATEGORIES
        }
        authors = {
            email: Author(first_name=first, last_name=last, email=email, birth_date=born)
            for first, last, email, born in AUTHORS
        }
        session.add_all(categories.values())
        session.add_all(authors.values())

        books = {}
        for title, isbn, year, total, available, category_name, author_email in BOOKS:
            book = Book(
                title=title,
                isbn=isbn,
                publication_year=year,
                total_copies=total,
                available_copies=available,
                category=categories[category_name]
            )
            book.book_authors.append(
                BookAuthor(author=authors[author_email], role=AuthorRole.PRIMARY_AUTHOR)
            )
            books[isbn] = book
        session.add_all(books.values())

        members = {
            email: Member(first_name=first, last_name=last, email=email, phone=phone, address=address)
            for first, last, email, phone, address in MEMBERS
        }
        session.add_all(members.values())

        for isbn, member_email, loan_date, due_date in LOANS:
            session.add(Loan(
                book=books[isbn],
                member=members[member_email],
                loan_date=loan_date,
                due_date=due_date,
                status=LoanStatus.ACTIVE
            ))

        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info(
        f"Loaded sample data: {len(CATEGORIES)} categories, {len(AUTHORS)} authors, "
        f"{len(BOOKS)} books, {len(MEMBERS)} members, {len(LOANS)} loans"
    )
    return True
