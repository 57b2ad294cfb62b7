# library_core/repositories/category.py
from typing import List, Optional
from library_core.models import Category
from .base import BaseRepository

class CategoryRepository(BaseRepository[Category]):
    """Repository for managing Category entities."""

    model = Category

    def get_by_name(self, name: str) -> Optional[Category]:
        """Get a category by its name.

        Args:
            name: The name of the category to retrieve

        Returns:
            The Category object if found, None otherwise
        """
        return self.session.query(Category).filter(Category.category_name == name).first()

    def list_categories(self) -> List[Category]:
        """Get all categories ordered by name."""
        return self.session.query(Category).order_by(Category.category_name).all()

    def create_category(self, name: str, description: Optional[str] = None) -> Category:
        """Create a new category.

        Args:
            name: Unique category name
            description: Optional free-text description

        Returns:
            The created Category object

        Raises:
            IntegrityError: If the name is already taken
        """
        category = Category(category_name=name, description=description)
        self.session.add(category)
        self._commit()
        return category

    def delete_category(self, category_id: int) -> bool:
        """Delete a category.

        Args:
            category_id: The ID of the category to delete

        Returns:
            True if the category was deleted, False if not found

        Raises:
            IntegrityError: If books still reference the category
        """
        category = self.get_by_id(category_id)
        if not category:
            return False

        self.session.delete(category)
        self._commit()
        return True
