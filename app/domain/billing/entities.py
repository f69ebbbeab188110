"""
Domain entities for the billing bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Payment:
    """A monetary amount applied against the invoice it references."""

    reference: Optional[str]
    amount: Decimal = Decimal("0")


@dataclass
class Invoice:
    """A billing record with its payment history.

    Mutable: the payment service updates amounts and history in place.
    ``payments`` may be None for invoices whose history was never
    initialized by the storage layer.
    """

    reference: str
    amount: Decimal
    amount_paid: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")
    payments: Optional[list[Payment]] = field(default_factory=list)

    @property
    def has_payments(self) -> bool:
        """True if at least one payment has been recorded."""
        return bool(self.payments)

    @property
    def total_payments(self) -> Decimal:
        """Sum of all recorded payment amounts."""
        return sum((p.amount for p in self.payments or []), Decimal("0"))

    @property
    def amount_remaining(self) -> Decimal:
        return self.amount - self.amount_paid
