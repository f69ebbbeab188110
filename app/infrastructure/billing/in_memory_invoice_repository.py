"""
Adapter: In-memory invoice repository.

Implements InvoiceRepository port.
Keeps invoices in a dict keyed by reference. Used as the default
backend when no database is configured, and as a fake in tests.
"""

import logging
from typing import Iterable, Optional

from app.domain.billing.entities import Invoice
from app.domain.billing.ports import InvoiceRepository

logger = logging.getLogger(__name__)


class InMemoryInvoiceRepository(InvoiceRepository):
    """Process-local invoice storage.

    Returns the stored objects themselves, so in-place changes made by
    the payment service are visible before save_invoice is called.
    """

    def __init__(self, invoices: Optional[Iterable[Invoice]] = None) -> None:
        self._invoices: dict[str, Invoice] = {}
        for invoice in invoices or []:
            self.add(invoice)

    def get_invoice(self, reference: str) -> Optional[Invoice]:
        return self._invoices.get(reference)

    def save_invoice(self, invoice: Invoice) -> None:
        self._invoices[invoice.reference] = invoice
        logger.debug("Saved invoice reference=%s", invoice.reference)

    def add(self, invoice: Invoice) -> None:
        self._invoices[invoice.reference] = invoice
