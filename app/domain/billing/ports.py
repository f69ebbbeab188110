"""
Port interfaces (ABCs) for the billing bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.billing.entities import Invoice


class InvoiceRepository(ABC):
    """Port for retrieving and persisting invoices."""

    @abstractmethod
    def get_invoice(self, reference: str) -> Optional[Invoice]:
        """Return the invoice for a reference, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def save_invoice(self, invoice: Invoice) -> None:
        """Persist the current state of an invoice.

        Storage failures propagate to the caller unchanged.
        """
        raise NotImplementedError

    @abstractmethod
    def add(self, invoice: Invoice) -> None:
        """Store a new invoice under its reference."""
        raise NotImplementedError
