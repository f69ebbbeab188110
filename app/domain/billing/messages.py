"""
Fixed outcome messages and rates for payment processing.

Callers match on these strings, so their wording must not change.
"""

from decimal import Decimal
from enum import Enum

TAX_RATE = Decimal("0.14")

NO_INVOICE_MATCHING_PAYMENT = "There is no invoice matching this payment"
INVOICE_INVALID_ZERO_AMOUNT_WITH_PAYMENTS = (
    "The invoice is in an invalid state, it has an amount of 0 and it has payments."
)


class PaymentOutcome(Enum):
    """Informational result of applying a payment to an invoice."""

    NO_PAYMENT_NEEDED = "no payment needed"
    INVOICE_ALREADY_FULLY_PAID = "invoice was already fully paid"
    PAYMENT_GREATER_PARTIAL_AMOUNT_REMAINING = (
        "the payment is greater than the partial amount remaining"
    )
    PAYMENT_GREATER_INVOICE_AMOUNT = "the payment is greater than the invoice amount"
    FINAL_PARTIAL_PAYMENT_RECEIVED_INVOICE_FULLY_PAID = (
        "final partial payment received, invoice is now fully paid"
    )
    ANOTHER_PARTIAL_PAYMENT_RECEIVED_INVOICE_NOT_FULLY_PAID = (
        "another partial payment received, still not fully paid"
    )
    INVOICE_NOW_PARTIALLY_PAID = "invoice is now partially paid"

    @property
    def applied(self) -> bool:
        """True if the payment was recorded on the invoice."""
        return self in _APPLIED_OUTCOMES


_APPLIED_OUTCOMES = frozenset(
    {
        PaymentOutcome.FINAL_PARTIAL_PAYMENT_RECEIVED_INVOICE_FULLY_PAID,
        PaymentOutcome.ANOTHER_PARTIAL_PAYMENT_RECEIVED_INVOICE_NOT_FULLY_PAID,
        PaymentOutcome.INVOICE_NOW_PARTIALLY_PAID,
    }
)
