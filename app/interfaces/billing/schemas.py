"""
Pydantic schemas for billing API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here: a blank reference or an out-of-range
amount is still passed through and judged by the use case.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

REFERENCE_DESCRIPTION = "Invoice reference quoted by payments"
REFERENCE_MAX_LEN = 255


class RegisterInvoiceRequest(BaseModel):
    """Request schema for registering an invoice.

    Attributes:
        reference: Invoice lookup key.
        amount: Total billable amount.
    """

    reference: str = Field(
        ..., max_length=REFERENCE_MAX_LEN, description=REFERENCE_DESCRIPTION
    )
    amount: Decimal = Field(..., description="Total billable amount")


class ProcessPaymentRequest(BaseModel):
    """Request schema for applying a payment to an invoice."""

    reference: str = Field(
        ..., max_length=REFERENCE_MAX_LEN, description=REFERENCE_DESCRIPTION
    )
    amount: Decimal = Field(..., description="Amount being paid")


class ProcessPaymentResponse(BaseModel):
    """Response schema carrying the payment outcome message."""

    reference: str
    message: str


class PaymentItem(BaseModel):
    """A single recorded payment in the invoice response."""

    reference: str | None
    amount: Decimal


class InvoiceResponse(BaseModel):
    """Response schema for an invoice snapshot."""

    reference: str
    amount: Decimal
    amount_paid: Decimal
    tax_amount: Decimal
    payments: list[PaymentItem]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    storage: str
    cache_enabled: bool


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
