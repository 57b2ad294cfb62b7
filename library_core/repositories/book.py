# library_core/repositories/book.py
from typing import Optional, List
from sqlalchemy import desc
from sqlalchemy.orm import joinedload
from library_core.models import Book, BookAuthor, Category, AuthorRole
from .base import BaseRepository

class BookRepository(BaseRepository[Book]):
    model = Book

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Get a book by its ISBN"""
        return self.session.query(Book).filter(Book.isbn == isbn).first()

    def get_with_authors(self, book_id: int) -> Optional[Book]:
        """Get a book with its category and author links loaded"""
        return (
            self.session.query(Book)
            .filter(Book.book_id == book_id)
            .options(
                joinedload(Book.category),
                joinedload(Book.book_authors).joinedload(BookAuthor.author)
            )
            .first()
        )

    def search_books(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        sort_field: str = "title",
        sort_order: str = "asc",
        limit: int = 20,
        offset: int = 0
    ) -> List[Book]:
        """Search books by title.

        Args:
            query: Search query string
            category: Filter by category name
            sort_field: Field to sort by (title, publication_year, available_copies, book_id)
            sort_order: Sort order (asc or desc)
            limit: Maximum number of results to return
            offset: Number of records to skip

        Returns:
            List of Book objects with loaded author relationships
        """
        base_query = self.session.query(Book).options(
            joinedload(Book.book_authors).joinedload(BookAuthor.author),
            joinedload(Book.category)
        )

        if query and query.strip():
            base_query = base_query.filter(Book.title.ilike(f"%{query.strip()}%"))

        if category:
            base_query = base_query.join(Book.category).filter(Category.category_name == category)

        valid_sort_fields = {
            "title": Book.title,
            "publication_year": Book.publication_year,
            "available_copies": Book.available_copies,
            "book_id": Book.book_id
        }

        sort_column = valid_sort_fields.get(sort_field, Book.title)
        if sort_order == "desc":
            base_query = base_query.order_by(desc(sort_column))
        else:
            base_query = base_query.order_by(sort_column)

        return base_query.offset(offset).limit(limit).all()

    def get_books_by_author(self, author_id: int) -> List[Book]:
        """Get books linked to an author, newest publication first"""
        return (
            self.session.query(Book)
            .join(BookAuthor, BookAuthor.book_id == Book.book_id)
            .filter(BookAuthor.author_id == author_id)
            .order_by(Book.publication_year.desc(), Book.title)
            .all()
        )

    def get_available_books(self) -> List[Book]:
        """Get books with at least one copy on the shelf"""
        return (
            self.session.query(Book)
            .filter(Book.available_copies > 0)
            .order_by(Book.title)
            .all()
        )

    def create_book(
        self,
        title: str,
        isbn: str,
        category_id: int,
        publication_year: Optional[int] = None,
        total_copies: int = 1,
        available_copies: Optional[int] = None,
        author_ids: Optional[List[int]] = None
    ) -> Book:
        """Create a book and link its authors.

        The first author is linked as Primary Author, any others as Co-Author.
        ``available_copies`` defaults to ``total_copies``.
        """
        book = Book(
            title=title,
            isbn=isbn,
            category_id=category_id,
            publication_year=publication_year,
            total_copies=total_copies,
            available_copies=total_copies if available_copies is None else available_copies
        )
        for position, author_id in enumerate(author_ids or []):
            role = AuthorRole.PRIMARY_AUTHOR if position == 0 else AuthorRole.CO_AUTHOR
            book.book_authors.append(BookAuthor(author_id=author_id, role=role))

        self.session.add(book)
        self._commit()
        return book

    def add_author(
        self,
        book_id: int,
        author_id: int,
        role: AuthorRole = AuthorRole.PRIMARY_AUTHOR
    ) -> BookAuthor:
        """Link an author to a book"""
        link = BookAuthor(book_id=book_id, author_id=author_id, role=role)
        self.session.add(link)
        self._commit()
        return link

    def delete_book(self, book_id: int) -> bool:
        """Delete a book and, through the database cascade, its author links.

        Returns:
            True if the book was deleted, False if not found

        Raises:
            IntegrityError: If loans still reference the book
        """
        book = self.get_by_id(book_id)
        if not book:
            return False

        self.session.delete(book)
        self._commit()
        return True
