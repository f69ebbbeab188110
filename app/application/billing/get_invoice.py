"""
Use case: Read an invoice snapshot.

Input: GetInvoiceQuery (reference)
Output: InvoiceResult
Side effects: None.
Failure cases: InvoiceNotFoundError.
"""

from app.application.billing.dtos import GetInvoiceQuery, InvoiceResult, PaymentItem
from app.domain.billing.entities import Invoice
from app.domain.billing.errors import InvoiceNotFoundError
from app.domain.billing.ports import InvoiceRepository


def to_invoice_result(invoice: Invoice) -> InvoiceResult:
    """Map an Invoice entity to its output DTO."""
    return InvoiceResult(
        reference=invoice.reference,
        amount=invoice.amount,
        amount_paid=invoice.amount_paid,
        tax_amount=invoice.tax_amount,
        payments=[
            PaymentItem(reference=p.reference, amount=p.amount)
            for p in invoice.payments or []
        ],
    )


class GetInvoiceUseCase:
    """Application service for reading invoices."""

    def __init__(self, invoice_repo: InvoiceRepository) -> None:
        self._invoice_repo = invoice_repo

    def execute(self, query: GetInvoiceQuery) -> InvoiceResult:
        invoice = self._invoice_repo.get_invoice(query.reference)
        if invoice is None:
            raise InvoiceNotFoundError(query.reference)
        return to_invoice_result(invoice)
