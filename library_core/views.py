# library_core/views.py
"""Read-only reporting views.

``book_details`` and ``active_loans`` are declared as SQLAlchemy selects and
compiled to ``CREATE VIEW`` DDL for whichever dialect the schema is created
on. They are attached to ``Base.metadata`` so ``create_all``/``drop_all`` keep
tables and views in step.
"""
import logging
from sqlalchemy import Integer, String, Date, SmallInteger, event, literal, select, table, column
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement

from library_core.models import Base, Book, Category, BookAuthor, Author, Loan, Member, LoanStatus

logger = logging.getLogger(__name__)

class group_concat(FunctionElement):
    """String aggregate: group_concat(expr, separator)"""
    type = String()
    name = 'group_concat'
    inherit_cache = True

@compiles(group_concat)
def _group_concat_sqlite(element, compiler, **kw):
    expr, separator = list(element.clauses)
    return f"group_concat({compiler.process(expr, **kw)}, {compiler.process(separator, **kw)})"

@compiles(group_concat, 'mysql')
def _group_concat_mysql(element, compiler, **kw):
    expr, separator = list(element.clauses)
    return f"GROUP_CONCAT({compiler.process(expr, **kw)} SEPARATOR {compiler.process(separator, **kw)})"

@compiles(group_concat, 'postgresql')
def _group_concat_postgresql(element, compiler, **kw):
    expr, separator = list(element.clauses)
    return f"string_agg({compiler.process(expr, **kw)}, {compiler.process(separator, **kw)})"

class days_since(FunctionElement):
    """Whole days from a date column to the current date"""
    type = Integer()
    name = 'days_since'
    inherit_cache = True

@compiles(days_since)
def _days_since_sqlite(element, compiler, **kw):
    (expr,) = list(element.clauses)
    return f"CAST(julianday(CURRENT_DATE) - julianday({compiler.process(expr, **kw)}) AS INTEGER)"

@compiles(days_since, 'mysql')
def _days_since_mysql(element, compiler, **kw):
    (expr,) = list(element.clauses)
    return f"DATEDIFF(CURRENT_DATE, {compiler.process(expr, **kw)})"

@compiles(days_since, 'postgresql')
def _days_since_postgresql(element, compiler, **kw):
    (expr,) = list(element.clauses)
    return f"(CURRENT_DATE - {compiler.process(expr, **kw)})"

# Books with category and concatenated author names.
# Inner joins: books without a linked author do not appear.
book_details_query = (
    select(
        Book.book_id,
        Book.title,
        Book.isbn,
        Book.publication_year,
        Book.available_copies,
        Book.total_copies,
        Category.category_name,
        group_concat(Author.first_name + ' ' + Author.last_name, literal(', ')).label('authors')
    )
    .select_from(Book)
    .join(Category, Book.category_id == Category.category_id)
    .join(BookAuthor, Book.book_id == BookAuthor.book_id)
    .join(Author, BookAuthor.author_id == Author.author_id)
    .group_by(Book.book_id, Category.category_name)
)

# Active loans with member and book names; days_overdue < 0 means not yet due
active_loans_query = (
    select(
        Loan.loan_id,
        (Member.first_name + ' ' + Member.last_name).label('member_name'),
        Book.title.label('book_title'),
        Loan.loan_date,
        Loan.due_date,
        days_since(Loan.due_date).label('days_overdue')
    )
    .select_from(Loan)
    .join(Member, Loan.member_id == Member.member_id)
    .join(Book, Loan.book_id == Book.book_id)
    .where(Loan.status == LoanStatus.ACTIVE)
)

VIEWS = {
    'book_details': book_details_query,
    'active_loans': active_loans_query,
}

# Lightweight table clauses for reading the views back
book_details = table(
    'book_details',
    column('book_id', Integer),
    column('title', String),
    column('isbn', String),
    column('publication_year', SmallInteger),
    column('available_copies', Integer),
    column('total_copies', Integer),
    column('category_name', String),
    column('authors', String),
)

active_loans = table(
    'active_loans',
    column('loan_id', Integer),
    column('member_name', String),
    column('book_title', String),
    column('loan_date', Date),
    column('due_date', Date),
    column('days_overdue', Integer),
)

def view_sql(name: str, dialect) -> str:
    """Compile the SELECT behind a view for the given dialect"""
    compiled = VIEWS[name].compile(dialect=dialect, compile_kwargs={"literal_binds": True})
    return str(compiled)

def create_views(connection) -> None:
    """Create every view, replacing any existing definition"""
    for name in VIEWS:
        body = view_sql(name, connection.dialect)
        if connection.dialect.name == 'sqlite':
            connection.exec_driver_sql(f"DROP VIEW IF EXISTS {name}")
            connection.exec_driver_sql(f"CREATE VIEW {name} AS {body}")
        else:
            connection.exec_driver_sql(f"CREATE OR REPLACE VIEW {name} AS {body}")
        logger.info(f"Created view {name}")

def drop_views(connection) -> None:
    for name in reversed(list(VIEWS)):
        connection.exec_driver_sql(f"DROP VIEW IF EXISTS {name}")
        logger.info(f"Dropped view {name}")

@event.listens_for(Base.metadata, 'after_create')
def _after_create(target, connection, **kw):
    create_views(connection)

@event.listens_for(Base.metadata, 'before_drop')
def _before_drop(target, connection, **kw):
    drop_views(connection)
