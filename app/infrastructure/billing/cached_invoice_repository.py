"""
Adapter: Read-through cache in front of an invoice repository.

Implements InvoiceRepository port by decorating another implementation.
Found invoices are kept per reference for a fixed time window; misses
are never cached. Writes go to the wrapped repository first and then
refresh the cached entry; a failed write drops it.
"""

import logging
import threading
import time
from typing import Callable, Optional

from app.domain.billing.entities import Invoice
from app.domain.billing.ports import InvoiceRepository

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 600


class CachedInvoiceRepository(InvoiceRepository):
    """TTL cache decorator for any InvoiceRepository."""

    def __init__(
        self,
        inner: InvoiceRepository,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Wrap a repository with a read-through cache.

        Args:
            inner: The repository that owns the invoices.
            ttl_seconds: How long a looked-up invoice stays cached.
            clock: Monotonic time source, in seconds.
        """
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._inner = inner
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[Invoice, float]] = {}
        self._lock = threading.Lock()

    def get_invoice(self, reference: str) -> Optional[Invoice]:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(reference)
            if entry is not None:
                invoice, expires_at = entry
                if expires_at > now:
                    logger.debug("Invoice cache hit: reference=%s", reference)
                    return invoice
                self._entries.pop(reference, None)

        logger.debug("Invoice cache miss: reference=%s", reference)
        invoice = self._inner.get_invoice(reference)
        if invoice is not None:
            self._store(reference, invoice)
        return invoice

    def save_invoice(self, invoice: Invoice) -> None:
        """Write through to the wrapped repository, then refresh the entry.

        The cached object is the one callers mutate before saving, so a
        failed write leaves it ahead of storage. It is dropped and the
        next lookup reloads what storage actually holds.
        """
        try:
            self._inner.save_invoice(invoice)
        except Exception:
            logger.warning(
                "Invoice save failed, dropping cache entry: reference=%s",
                invoice.reference,
            )
            self.invalidate(invoice.reference)
            raise
        self._store(invoice.reference, invoice)

    @property
    def inner(self) -> InvoiceRepository:
        """The repository this cache decorates."""
        return self._inner

    def add(self, invoice: Invoice) -> None:
        self._inner.add(invoice)
        self._store(invoice.reference, invoice)

    def invalidate(self, reference: str) -> None:
        """Drop the cached entry for a reference, if any."""
        with self._lock:
            self._entries.pop(reference, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _store(self, reference: str, invoice: Invoice) -> None:
        expires_at = self._clock() + self._ttl_seconds
        with self._lock:
            self._entries[reference] = (invoice, expires_at)
