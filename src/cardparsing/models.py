"""
Data models for statement parsing.
"""

from collections.abc import Iterator
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation, localcontext

MONEY_Q = Decimal("0.01")


def normalize_amount(raw: str) -> str:
    """Normalize a statement amount to a signed two-fraction-digit string.

    Currency symbols and thousands separators are dropped, so ``-$1,234.5``
    becomes ``-1234.50`` and a bare ``12`` becomes ``12.00``.
    """
    cleaned = raw.replace("$", "").replace(",", "").replace(" ", "").strip()
    try:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(cleaned) + 2)
            return str(Decimal(cleaned).quantize(MONEY_Q))
    except InvalidOperation as e:
        raise ValueError(f"Not a monetary amount: {raw!r}") from e


@dataclass(frozen=True)
class Transaction:
    """Represents a single statement line item."""

    date: str
    description: str
    amount: str
    points: str | None = None
    order_num: str | None = None

    @classmethod
    def create(
        cls,
        date: str,
        description: str,
        amount: str,
        points: str | None = None,
        order_num: str | None = None,
    ) -> "Transaction":
        """Create Transaction from raw matched statement text."""
        if order_num:
            description = f"{description} #{order_num}"
        return cls(
            date=date,
            description=description,
            amount=normalize_amount(amount),
            points=points or None,
            order_num=order_num or None,
        )

    @property
    def is_rewards(self) -> bool:
        """Rewards lines carry a points figure instead of money."""
        return self.points is not None

    def with_order_number(self, order_num: str) -> "Transaction":
        """Return a copy with an order number attached to the description."""
        return replace(
            self,
            description=f"{self.description} #{order_num}",
            order_num=order_num,
        )

    def to_row(self) -> list[str]:
        return [self.date, self.description, self.amount]


@dataclass(frozen=True)
class Statement:
    """Line items recognized in one statement document, in source order."""

    path: str
    issuer: str
    line_items: tuple[Transaction, ...] = ()

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.line_items)

    def __len__(self) -> int:
        return len(self.line_items)

    @property
    def ledger_items(self) -> list[Transaction]:
        """Monetary line items, i.e. everything except rewards lines."""
        return [t for t in self.line_items if not t.is_rewards]

    @property
    def rewards_items(self) -> list[Transaction]:
        return [t for t in self.line_items if t.is_rewards]
