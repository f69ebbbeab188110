"""
Domain service: Payment application rules.

Pure business logic for applying a payment to an invoice.
No framework imports. No IO. The invoice is mutated in place only
when the payment is accepted; persisting it is the caller's job.

Amount comparisons use exact Decimal equality, with no tolerance.
"""

from decimal import Decimal

from app.domain.billing.entities import Invoice, Payment
from app.domain.billing.errors import InvoiceInvalidZeroAmountWithPaymentsError
from app.domain.billing.messages import TAX_RATE, PaymentOutcome


class PaymentService:
    """Domain service deciding how a payment changes an invoice."""

    def __init__(self, tax_rate: Decimal = TAX_RATE) -> None:
        """Initialize the payment service.

        Args:
            tax_rate: Multiplier applied to the latest payment amount
                to derive the invoice tax amount.
        """
        self._tax_rate = tax_rate

    def apply(self, invoice: Invoice, payment: Payment) -> PaymentOutcome:
        """Validate a payment against an invoice and apply it if accepted.

        Args:
            invoice: The invoice the payment targets. Mutated on acceptance.
            payment: The incoming payment.

        Returns:
            The outcome describing the invoice's new state. Rejections that
            leave the invoice untouched are outcomes too, not errors.

        Raises:
            InvoiceInvalidZeroAmountWithPaymentsError: If the invoice has a
                zero or negative amount but already carries payments.
        """
        if invoice.amount <= 0:
            if not invoice.has_payments:
                return PaymentOutcome.NO_PAYMENT_NEEDED
            raise InvoiceInvalidZeroAmountWithPaymentsError(invoice.reference)

        if invoice.payments is None:
            invoice.payments = []

        total_payments = invoice.total_payments
        amount_remaining = invoice.amount_remaining

        if invoice.has_payments:
            if total_payments != 0 and invoice.amount == total_payments:
                return PaymentOutcome.INVOICE_ALREADY_FULLY_PAID

            if total_payments != 0 and payment.amount > amount_remaining:
                return PaymentOutcome.PAYMENT_GREATER_PARTIAL_AMOUNT_REMAINING

            invoice.amount_paid += payment.amount
            self._record(invoice, payment)
            if amount_remaining == payment.amount:
                return PaymentOutcome.FINAL_PARTIAL_PAYMENT_RECEIVED_INVOICE_FULLY_PAID
            return PaymentOutcome.ANOTHER_PARTIAL_PAYMENT_RECEIVED_INVOICE_NOT_FULLY_PAID

        if payment.amount > invoice.amount:
            return PaymentOutcome.PAYMENT_GREATER_INVOICE_AMOUNT

        # First payment overwrites whatever amount_paid held before.
        invoice.amount_paid = payment.amount
        self._record(invoice, payment)
        if invoice.amount == payment.amount:
            return PaymentOutcome.FINAL_PARTIAL_PAYMENT_RECEIVED_INVOICE_FULLY_PAID
        return PaymentOutcome.INVOICE_NOW_PARTIALLY_PAID

    def _record(self, invoice: Invoice, payment: Payment) -> None:
        invoice.tax_amount = payment.amount * self._tax_rate
        invoice.payments.append(payment)
