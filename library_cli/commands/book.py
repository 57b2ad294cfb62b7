# library_cli/commands/book.py
import click
from library_core.repositories import BookRepository, ReportRepository
from ..utils import session_scope, print_table

@click.group()
def book():
    """Book catalogue commands"""
    pass

@book.command()
@click.option('--title', default=None, help='Only show the book with this exact title')
@click.pass_context
def details(ctx: click.Context, title: str):
    """Books with category and authors (SELECT * FROM book_details)

    Example:
        library-db book details --title 1984
    """
    with session_scope(ctx) as session:
        rows = ReportRepository(session).get_book_details(title=title)
        print_table(
            ['book_id', 'title', 'isbn', 'year', 'available', 'total', 'category', 'authors'],
            rows,
            empty_message="\nNo books with linked authors found."
        )

@book.command()
@click.argument('query', required=False, default='')
@click.option('--category', default=None, help='Only books in this category')
@click.option('--limit', default=20, type=int, help='Maximum number of books to show')
@click.pass_context
def search(ctx: click.Context, query: str, category: str, limit: int):
    """Search books by title

    QUERY is matched case-insensitively anywhere in the title.
    """
    with session_scope(ctx) as session:
        books = BookRepository(session).search_books(query=query, category=category, limit=limit)
        print_table(
            ['book_id', 'title', 'isbn', 'category', 'available', 'total', 'authors'],
            [
                (
                    b.book_id, b.title, b.isbn, b.category.category_name,
                    b.available_copies, b.total_copies,
                    ", ".join(ba.author.full_name for ba in b.book_authors)
                )
                for b in books
            ],
            empty_message=f"\nNo books matching '{query}'."
        )

@book.command()
@click.pass_context
def available(ctx: click.Context):
    """Books with at least one copy on the shelf"""
    with session_scope(ctx) as session:
        books = BookRepository(session).get_available_books()
        print_table(
            ['book_id', 'title', 'available', 'total'],
            [(b.book_id, b.title, b.available_copies, b.total_copies) for b in books],
            empty_message="\nNo copies available."
        )
