"""Income/expense summary model."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Summary:
    """Aggregate totals over every transaction.

    Attributes:
        total_income: Sum of amounts with type 'income' (0 when there are none).
        total_expenses: Sum of amounts with type 'expense' (0 when there are none).
    """

    total_income: Any = 0
    total_expenses: Any = 0

    @property
    def balance(self):
        return self.total_income - self.total_expenses

    def to_dict(self) -> dict:
        """Convert summary to its JSON representation."""
        return {
            "totalIncome": self.total_income,
            "totalExpenses": self.total_expenses,
            "balance": self.balance,
        }
