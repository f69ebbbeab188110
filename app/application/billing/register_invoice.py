"""
Use case: Register a new invoice.

Input: RegisterInvoiceCommand (reference, amount)
Output: InvoiceResult
Side effects: Adds the invoice to the repository.
Failure cases: InvalidArgumentError, InvoiceAlreadyExistsError.
"""

import logging

from app.application.billing.dtos import InvoiceResult, RegisterInvoiceCommand
from app.application.billing.get_invoice import to_invoice_result
from app.domain.billing.entities import Invoice
from app.domain.billing.errors import InvalidArgumentError, InvoiceAlreadyExistsError
from app.domain.billing.ports import InvoiceRepository

logger = logging.getLogger(__name__)


class RegisterInvoiceUseCase:
    """Application service for registering invoices."""

    def __init__(self, invoice_repo: InvoiceRepository) -> None:
        self._invoice_repo = invoice_repo

    def execute(self, command: RegisterInvoiceCommand) -> InvoiceResult:
        """Register an unpaid invoice under the given reference.

        The reference is stored verbatim; payments and lookups match
        it exactly.

        Args:
            command: Input DTO with reference and amount.

        Returns:
            Snapshot of the registered invoice.
        """
        reference = command.reference
        if not reference.strip():
            raise InvalidArgumentError("reference", "must not be blank")

        if self._invoice_repo.get_invoice(reference) is not None:
            raise InvoiceAlreadyExistsError(reference)

        invoice = Invoice(reference=reference, amount=command.amount)
        self._invoice_repo.add(invoice)
        logger.info("Registered invoice reference=%s amount=%s", reference, command.amount)
        return to_invoice_result(invoice)
