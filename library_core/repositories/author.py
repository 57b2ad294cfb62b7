# library_core/repositories/author.py
from typing import Optional, List
from datetime import date
from sqlalchemy import or_
from library_core.models import Author, BookAuthor
from .base import BaseRepository

class AuthorRepository(BaseRepository[Author]):
    model = Author

    def get_by_email(self, email: str) -> Optional[Author]:
        """Get an author by email"""
        return self.session.query(Author).filter(Author.email == email).first()

    def search_authors(self, query: str, limit: int = 20) -> List[Author]:
        """Search authors by first or last name"""
        base_query = self.session.query(Author)
        if query:  # Only apply filter if query is not empty
            base_query = base_query.filter(or_(
                Author.first_name.ilike(f"%{query}%"),
                Author.last_name.ilike(f"%{query}%")
            ))
        return base_query.order_by(Author.last_name, Author.first_name).limit(limit).all()

    def get_authors_by_book(self, book_id: int) -> List[Author]:
        """Get all authors for a specific book"""
        return (
            self.session.query(Author)
            .join(BookAuthor, BookAuthor.author_id == Author.author_id)
            .filter(BookAuthor.book_id == book_id)
            .order_by(Author.author_id)
            .all()
        )

    def create_author(
        self,
        first_name: str,
        last_name: str,
        email: Optional[str] = None,
        birth_date: Optional[date] = None
    ) -> Author:
        """Create an author; the engine rejects malformed or duplicate emails"""
        author = Author(
            first_name=first_name,
            last_name=last_name,
            email=email,
            birth_date=birth_date
        )
        self.session.add(author)
        self._commit()
        return author
