"""
Domain-specific errors for the billing bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from app.domain.billing.messages import (
    INVOICE_INVALID_ZERO_AMOUNT_WITH_PAYMENTS,
    NO_INVOICE_MATCHING_PAYMENT,
)


class BillingDomainError(Exception):
    """Base error for all billing domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NoInvoiceMatchingPaymentError(BillingDomainError):
    """Raised when a payment reference is blank or matches no invoice."""

    def __init__(self, reference: str | None) -> None:
        super().__init__(NO_INVOICE_MATCHING_PAYMENT)
        self.reference = reference


class InvoiceInvalidZeroAmountWithPaymentsError(BillingDomainError):
    """Raised when a zero or negative amount invoice carries payments."""

    def __init__(self, reference: str) -> None:
        super().__init__(INVOICE_INVALID_ZERO_AMOUNT_WITH_PAYMENTS)
        self.reference = reference


class InvoiceNotFoundError(BillingDomainError):
    """Raised when an invoice cannot be found."""

    def __init__(self, reference: str) -> None:
        super().__init__(f"Invoice not found: {reference}")
        self.reference = reference


class InvoiceAlreadyExistsError(BillingDomainError):
    """Raised when registering an invoice under a reference already in use."""

    def __init__(self, reference: str) -> None:
        super().__init__(f"Invoice already exists: {reference}")
        self.reference = reference


class InvalidArgumentError(BillingDomainError, ValueError):
    """Raised when a use case receives a missing or malformed argument."""

    def __init__(self, argument: str, reason: str) -> None:
        super().__init__(f"Invalid {argument}: {reason}")
        self.argument = argument
        self.reason = reason
