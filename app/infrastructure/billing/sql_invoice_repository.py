"""
Adapter: SQL invoice repository.

Implements InvoiceRepository port.
Reads/writes the invoices and invoice_payments tables through a
SQLAlchemy engine. Amounts are stored as text so decimals round-trip
exactly.
"""

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

from app.domain.billing.entities import Invoice, Payment
from app.domain.billing.ports import InvoiceRepository

logger = logging.getLogger(__name__)

_CREATE_INVOICES = """
CREATE TABLE IF NOT EXISTS invoices (
    reference VARCHAR(255) PRIMARY KEY,
    amount VARCHAR(64) NOT NULL,
    amount_paid VARCHAR(64) NOT NULL,
    tax_amount VARCHAR(64) NOT NULL
)
"""

_CREATE_INVOICE_PAYMENTS = """
CREATE TABLE IF NOT EXISTS invoice_payments (
    invoice_reference VARCHAR(255) NOT NULL REFERENCES invoices (reference),
    payment_index INTEGER NOT NULL,
    payment_reference VARCHAR(255),
    amount VARCHAR(64) NOT NULL,
    PRIMARY KEY (invoice_reference, payment_index)
)
"""


class SqlInvoiceRepositoryAdapter(InvoiceRepository):
    """SQL adapter for invoices and their payment history."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create_schema(self) -> None:
        """Create the invoice tables if they do not exist yet."""
        with self._engine.begin() as conn:
            conn.execute(text(_CREATE_INVOICES))
            conn.execute(text(_CREATE_INVOICE_PAYMENTS))

    def get_invoice(self, reference: str) -> Optional[Invoice]:
        """Return the invoice with its payments in applied order, or None."""
        with self._engine.connect() as conn:
            row = conn.execute(
                text(
                    """
                    SELECT reference, amount, amount_paid, tax_amount
                    FROM invoices
                    WHERE reference = :reference
                    """
                ),
                {"reference": reference},
            ).fetchone()

            if not row:
                return None

            payment_rows = conn.execute(
                text(
                    """
                    SELECT payment_reference, amount
                    FROM invoice_payments
                    WHERE invoice_reference = :reference
                    ORDER BY payment_index ASC
                    """
                ),
                {"reference": reference},
            ).fetchall()

        return Invoice(
            reference=row[0],
            amount=Decimal(row[1]),
            amount_paid=Decimal(row[2]),
            tax_amount=Decimal(row[3]),
            payments=[
                Payment(reference=p[0], amount=Decimal(p[1])) for p in payment_rows
            ],
        )

    def save_invoice(self, invoice: Invoice) -> None:
        """Upsert the invoice row and rewrite its payment rows atomically."""
        with self._engine.begin() as conn:
            conn.execute(
                text(
                    """
                    INSERT INTO invoices (reference, amount, amount_paid, tax_amount)
                    VALUES (:reference, :amount, :amount_paid, :tax_amount)
                    ON CONFLICT (reference)
                    DO UPDATE SET
                        amount = EXCLUDED.amount,
                        amount_paid = EXCLUDED.amount_paid,
                        tax_amount = EXCLUDED.tax_amount
                    """
                ),
                _invoice_params(invoice),
            )
            conn.execute(
                text("DELETE FROM invoice_payments WHERE invoice_reference = :reference"),
                {"reference": invoice.reference},
            )
            self._insert_payments(conn, invoice)
        logger.debug(
            "Saved invoice: reference=%s amount_paid=%s payments=%d",
            invoice.reference,
            invoice.amount_paid,
            len(invoice.payments or []),
        )

    def add(self, invoice: Invoice) -> None:
        """Insert a new invoice. Duplicate references raise IntegrityError."""
        with self._engine.begin() as conn:
            conn.execute(
                text(
                    """
                    INSERT INTO invoices (reference, amount, amount_paid, tax_amount)
                    VALUES (:reference, :amount, :amount_paid, :tax_amount)
                    """
                ),
                _invoice_params(invoice),
            )
            self._insert_payments(conn, invoice)

    def _insert_payments(self, conn: Connection, invoice: Invoice) -> None:
        if not invoice.payments:
            return
        conn.execute(
            text(
                """
                INSERT INTO invoice_payments
                    (invoice_reference, payment_index, payment_reference, amount)
                VALUES (:invoice_reference, :payment_index, :payment_reference, :amount)
                """
            ),
            [
                {
                    "invoice_reference": invoice.reference,
                    "payment_index": payment_index,
                    "payment_reference": payment.reference,
                    "amount": str(payment.amount),
                }
                for payment_index, payment in enumerate(invoice.payments)
            ],
        )


def _invoice_params(invoice: Invoice) -> dict[str, str]:
    return {
        "reference": invoice.reference,
        "amount": str(invoice.amount),
        "amount_paid": str(invoice.amount_paid),
        "tax_amount": str(invoice.tax_amount),
    }
