"""Transaction service for database operations."""

from typing import List, Optional
from models.summary import Summary
from models.transaction import Transaction

_SUMMARY_QUERY = """
    SELECT
        COALESCE(SUM(CASE WHEN type = 'income' THEN amount ELSE 0 END), 0) AS total_income,
        COALESCE(SUM(CASE WHEN type = 'expense' THEN amount ELSE 0 END), 0) AS total_expenses
    FROM transactions
"""


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db_manager):
        """Initialize the transaction service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def create(
        self,
        type: Optional[str],
        category: Optional[str],
        amount,
        date: Optional[str],
        description: Optional[str] = None,
    ) -> Transaction:
        """Create a new transaction.

        No field is validated; missing values are stored as NULL.

        Returns:
            The created Transaction object with id populated.

        Raises:
            sqlite3.Error: If the insert fails.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                """
                INSERT INTO transactions (type, category, amount, date, description)
                VALUES (?, ?, ?, ?, ?)
                """,
                (type, category, amount, date, description),
            )
            conn.commit()

            return Transaction(
                id=cursor.lastrowid,
                type=type,
                category=category,
                amount=amount,
                date=date,
                description=description,
            )

    def find_all(self) -> List[Transaction]:
        """Get all transactions in the store's natural order."""
        with self.db_manager.connect() as conn:
            cursor = conn.execute("SELECT * FROM transactions")
            return [Transaction.from_row(row) for row in cursor.fetchall()]

    def find(self, transaction_id) -> Optional[Transaction]:
        """Get a single transaction by ID.

        Args:
            transaction_id: The transaction ID, as an int or a numeric string.

        Returns:
            Transaction object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT * FROM transactions WHERE id = ?", (transaction_id,)
            )
            row = cursor.fetchone()

            if row:
                return Transaction.from_row(row)
            return None

    def update(
        self,
        transaction_id,
        type: Optional[str],
        category: Optional[str],
        amount,
        date: Optional[str],
        description: Optional[str] = None,
    ) -> bool:
        """Replace all mutable fields of a transaction.

        Returns:
            True if a row was changed, False if not found.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                """
                UPDATE transactions
                SET type = ?, category = ?, amount = ?, date = ?, description = ?
                WHERE id = ?
                """,
                (type, category, amount, date, description, transaction_id),
            )
            conn.commit()
            return cursor.rowcount > 0

    def delete(self, transaction_id) -> bool:
        """Delete a transaction by ID.

        Returns:
            True if transaction was deleted, False if not found.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "DELETE FROM transactions WHERE id = ?", (transaction_id,)
            )
            conn.commit()
            return cursor.rowcount > 0

    def summarize(self) -> Summary:
        """Compute income, expense and balance totals over all transactions."""
        with self.db_manager.connect() as conn:
            row = conn.execute(_SUMMARY_QUERY).fetchone()
            return Summary(
                total_income=row["total_income"],
                total_expenses=row["total_expenses"],
            )
