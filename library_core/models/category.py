# library_core/models/category.py
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class Category(Base):
    __tablename__ = 'categories'

    category_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Books keep the category alive (ON DELETE RESTRICT), so never touch them from here
    books = relationship('Book', back_populates='category', passive_deletes='all')

    def __repr__(self) -> str:
        return f"<Category {self.category_id} {self.category_name!r}>"
