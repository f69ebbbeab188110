"""
Use case: Process a payment against an invoice.

Input: Payment (reference, amount)
Output: outcome message string
Side effects: Persists the invoice once when the payment is applied.
Failure cases: InvalidArgumentError, NoInvoiceMatchingPaymentError,
InvoiceInvalidZeroAmountWithPaymentsError.
"""

import logging
from typing import Optional

from app.domain.billing.entities import Payment
from app.domain.billing.errors import (
    InvalidArgumentError,
    NoInvoiceMatchingPaymentError,
)
from app.domain.billing.payment_service import PaymentService
from app.domain.billing.ports import InvoiceRepository

logger = logging.getLogger(__name__)


class ProcessPaymentUseCase:
    """Orchestrates payment application for the invoice a payment references.

    Looks the invoice up through the repository port, delegates the
    decision to the PaymentService and saves the invoice when the
    payment was accepted.
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        payment_service: Optional[PaymentService] = None,
    ) -> None:
        self._invoice_repo = invoice_repo
        self._payment_service = payment_service or PaymentService()

    def execute(self, payment: Optional[Payment]) -> str:
        """Run the process payment use case.

        Args:
            payment: The payment to apply.

        Returns:
            The outcome message describing the invoice's new state.

        Raises:
            InvalidArgumentError: If no payment is given.
            NoInvoiceMatchingPaymentError: If the reference is blank or
                no invoice matches it.
        """
        if payment is None:
            raise InvalidArgumentError("payment", "must not be None")

        if payment.reference is None or not payment.reference.strip():
            logger.warning("Payment rejected: blank invoice reference")
            raise NoInvoiceMatchingPaymentError(payment.reference)

        logger.info(
            "Processing payment for reference=%s amount=%s",
            payment.reference,
            payment.amount,
        )

        invoice = self._invoice_repo.get_invoice(payment.reference)
        if invoice is None:
            logger.warning("No invoice matching reference=%s", payment.reference)
            raise NoInvoiceMatchingPaymentError(payment.reference)

        outcome = self._payment_service.apply(invoice, payment)

        if outcome.applied:
            self._invoice_repo.save_invoice(invoice)

        logger.info(
            "Payment processed: reference=%s outcome=%s",
            payment.reference,
            outcome.name,
        )
        return outcome.value
