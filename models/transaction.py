from dataclasses import dataclass, asdict
from typing import Any, Optional


@dataclass
class Transaction:
    id: int
    type: Optional[str]  # 'income' or 'expense' by convention, not enforced
    category: Optional[str]  # category name, no foreign key
    amount: Any  # whatever numeric value the store holds
    date: Optional[str]  # caller-supplied, unvalidated
    description: Optional[str] = None

    @classmethod
    def from_row(cls, row) -> "Transaction":
        """Build a Transaction from a transactions table row."""
        return cls(
            id=row["id"],
            type=row["type"],
            category=row["category"],
            amount=row["amount"],
            date=row["date"],
            description=row["description"],
        )

    def to_dict(self) -> dict:
        """Convert transaction to its JSON representation."""
        return asdict(self)
