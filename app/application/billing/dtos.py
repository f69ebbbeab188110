"""
Data Transfer Objects for the billing application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RegisterInvoiceCommand:
    """Input DTO for registering a new invoice.

    Attributes:
        reference: Lookup key that payments will quote.
        amount: Total billable amount.
    """

    reference: str
    amount: Decimal


@dataclass(frozen=True)
class GetInvoiceQuery:
    """Input DTO for reading an invoice."""

    reference: str


@dataclass(frozen=True)
class PaymentItem:
    """A single recorded payment in an invoice snapshot."""

    reference: str | None
    amount: Decimal


@dataclass(frozen=True)
class InvoiceResult:
    """Output DTO for an invoice snapshot.

    Attributes:
        reference: Invoice lookup key.
        amount: Total billable amount.
        amount_paid: Cumulative amount applied so far.
        tax_amount: Tax derived from the latest payment.
        payments: Recorded payments in the order they were applied.
    """

    reference: str
    amount: Decimal
    amount_paid: Decimal
    tax_amount: Decimal
    payments: list[PaymentItem]
