"""Category service for database operations."""

from typing import List, Optional
from models.category import Category


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db_manager):
        """Initialize the category service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all(self) -> List[Category]:
        """Get all categories from the database.

        Returns:
            List of Category objects, in the store's natural order.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute("SELECT * FROM categories")
            return [Category.from_row(row) for row in cursor.fetchall()]

    def create(self, name: Optional[str], type: Optional[str] = None) -> Category:
        """Create a new category.

        Args:
            name: Category name (must be unique).
            type: 'income' or 'expense' by convention.

        Returns:
            The created Category object with id populated.

        Raises:
            sqlite3.IntegrityError: If a category with this name already exists.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "INSERT INTO categories (name, type) VALUES (?, ?)",
                (name, type),
            )
            conn.commit()

            return Category(id=cursor.lastrowid, name=name, type=type)

    def delete(self, name: str) -> bool:
        """Delete a category and every transaction filed under it.

        The transactions are deleted and committed before the category row, as
        two separate statements. If the second statement fails, the
        transactions stay deleted while the category remains.

        Args:
            name: The category name to delete.

        Returns:
            True if the category row was deleted, False if not found.
        """
        with self.db_manager.connect() as conn:
            conn.execute("DELETE FROM transactions WHERE category = ?", (name,))
            conn.commit()

            cursor = conn.execute("DELETE FROM categories WHERE name = ?", (name,))
            conn.commit()
            return cursor.rowcount > 0
