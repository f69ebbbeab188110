"""
Centralized error handlers for FastAPI.

Maps billing domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.billing.errors import (
    BillingDomainError,
    InvalidArgumentError,
    InvoiceAlreadyExistsError,
    InvoiceInvalidZeroAmountWithPaymentsError,
    InvoiceNotFoundError,
    NoInvoiceMatchingPaymentError,
)

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_409 = 409
HTTP_422 = 422
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(NoInvoiceMatchingPaymentError)
    async def handle_no_matching_invoice(
        _request: Request, exc: NoInvoiceMatchingPaymentError
    ) -> JSONResponse:
        """Handle payments whose reference matches no invoice."""
        logger.warning("No invoice matching payment: %r", exc.reference)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(InvoiceInvalidZeroAmountWithPaymentsError)
    async def handle_invalid_zero_amount(
        _request: Request, exc: InvoiceInvalidZeroAmountWithPaymentsError
    ) -> JSONResponse:
        """Handle invoices stored in the zero-amount-with-payments state."""
        logger.error("Invoice in invalid state: %s", exc.reference)
        return _error_response(HTTP_409, exc.message)

    @app.exception_handler(InvoiceNotFoundError)
    async def handle_invoice_not_found(
        _request: Request, exc: InvoiceNotFoundError
    ) -> JSONResponse:
        logger.warning("Invoice not found: %s", exc.reference)
        return _error_response(HTTP_404, "Invoice not found")

    @app.exception_handler(InvoiceAlreadyExistsError)
    async def handle_invoice_exists(
        _request: Request, exc: InvoiceAlreadyExistsError
    ) -> JSONResponse:
        logger.warning("Invoice already exists: %s", exc.reference)
        return _error_response(HTTP_409, "Invoice already exists")

    @app.exception_handler(InvalidArgumentError)
    async def handle_invalid_argument(
        _request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        """Handle invalid arguments rejected by use cases."""
        logger.warning("Invalid argument: %s", exc.argument)
        return _error_response(HTTP_422, "Invalid argument", exc.message)

    @app.exception_handler(BillingDomainError)
    async def handle_billing_domain(
        _request: Request, exc: BillingDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled billing domain errors."""
        logger.error("Unhandled billing domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
