"""Category model for transaction grouping."""

from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class Category:
    """Represents a named grouping for transactions.

    Attributes:
        id: Unique identifier (auto-generated).
        name: Category name (unique). Transactions refer to it by this name.
        type: 'income' or 'expense' by convention.
    """

    id: int
    name: Optional[str]
    type: Optional[str] = None

    @classmethod
    def from_row(cls, row) -> "Category":
        return cls(id=row["id"], name=row["name"], type=row["type"])

    def to_dict(self) -> dict:
        return asdict(self)
