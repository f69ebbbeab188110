"""
Tests for the billing domain layer.

Tests entities, error classes and the payment application rules
in isolation. No external dependencies or IO required.
"""

from decimal import Decimal

import pytest

from app.domain.billing.entities import Invoice, Payment
from app.domain.billing.errors import (
    BillingDomainError,
    InvalidArgumentError,
    InvoiceInvalidZeroAmountWithPaymentsError,
    NoInvoiceMatchingPaymentError,
)
from app.domain.billing.messages import PaymentOutcome
from app.domain.billing.payment_service import PaymentService


def _invoice(amount: str, amount_paid: str = "0", payments=None) -> Invoice:
    """Build an invoice with reference INV-1."""
    return Invoice(
        reference="INV-1",
        amount=Decimal(amount),
        amount_paid=Decimal(amount_paid),
        payments=payments,
    )


def _payment(amount: str) -> Payment:
    return Payment(reference="INV-1", amount=Decimal(amount))


@pytest.fixture
def service() -> PaymentService:
    return PaymentService()


class TestInvoiceEntity:
    """Tests for the Invoice entity helpers."""

    def test_defaults(self) -> None:
        """A new invoice starts unpaid with an empty history."""
        invoice = Invoice(reference="INV-1", amount=Decimal("10"))
        assert invoice.amount_paid == Decimal("0")
        assert invoice.tax_amount == Decimal("0")
        assert invoice.payments == []
        assert not invoice.has_payments

    def test_total_payments_with_absent_history(self) -> None:
        """An uninitialized history sums to zero."""
        invoice = _invoice("10", payments=None)
        assert invoice.total_payments == Decimal("0")
        assert not invoice.has_payments

    def test_total_payments_and_remaining(self) -> None:
        """Totals sum the history; remaining is amount minus amount paid."""
        invoice = _invoice("10", "7", payments=[_payment("3"), _payment("4")])
        assert invoice.total_payments == Decimal("7")
        assert invoice.amount_remaining == Decimal("3")


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_no_matching_invoice_message(self) -> None:
        """NoInvoiceMatchingPaymentError carries the fixed message and reference."""
        err = NoInvoiceMatchingPaymentError("INV-404")
        assert err.message == "There is no invoice matching this payment"
        assert err.reference == "INV-404"

    def test_invalid_zero_amount_message(self) -> None:
        """InvoiceInvalidZeroAmountWithPaymentsError carries the fixed message."""
        err = InvoiceInvalidZeroAmountWithPaymentsError("INV-1")
        assert err.message == (
            "The invoice is in an invalid state, it has an amount of 0 "
            "and it has payments."
        )

    def test_invalid_argument_is_value_error(self) -> None:
        """InvalidArgumentError is both a domain error and a ValueError."""
        err = InvalidArgumentError("payment", "must not be None")
        assert isinstance(err, BillingDomainError)
        assert isinstance(err, ValueError)
        assert err.message == "Invalid payment: must not be None"


class TestPaymentOutcome:
    """Tests for the outcome enum."""

    def test_applied_outcomes(self) -> None:
        """Outcomes that record the payment report applied."""
        assert PaymentOutcome.INVOICE_NOW_PARTIALLY_PAID.applied
        assert PaymentOutcome.FINAL_PARTIAL_PAYMENT_RECEIVED_INVOICE_FULLY_PAID.applied
        assert PaymentOutcome.ANOTHER_PARTIAL_PAYMENT_RECEIVED_INVOICE_NOT_FULLY_PAID.applied

    def test_rejections_are_not_applied(self) -> None:
        """Informational rejections leave the invoice alone."""
        assert not PaymentOutcome.NO_PAYMENT_NEEDED.applied
        assert not PaymentOutcome.INVOICE_ALREADY_FULLY_PAID.applied
        assert not PaymentOutcome.PAYMENT_GREATER_INVOICE_AMOUNT.applied
        assert not PaymentOutcome.PAYMENT_GREATER_PARTIAL_AMOUNT_REMAINING.applied


class TestZeroAmountInvoices:
    """Invoices with amount <= 0."""

    @pytest.mark.parametrize("amount", ["0", "-5"])
    @pytest.mark.parametrize("payments", [None, []])
    def test_no_payment_needed(self, service, amount, payments) -> None:
        """No history on a zero or negative invoice means no payment needed."""
        invoice = _invoice(amount, payments=payments)

        outcome = service.apply(invoice, _payment("3"))

        assert outcome is PaymentOutcome.NO_PAYMENT_NEEDED
        assert invoice.amount_paid == Decimal("0")
        assert invoice.tax_amount == Decimal("0")
        assert invoice.payments == payments

    @pytest.mark.parametrize("amount", ["0", "-5"])
    def test_payments_on_zero_amount_invoice_rejected(self, service, amount) -> None:
        """A zero or negative invoice with payments is an invalid state."""
        invoice = _invoice(amount, payments=[_payment("1")])

        with pytest.raises(InvoiceInvalidZeroAmountWithPaymentsError):
            service.apply(invoice, _payment("3"))


class TestFirstPayment:
    """Invoices with no recorded payments yet."""

    def test_partial_first_payment(self, service) -> None:
        """A first payment below the amount leaves the invoice partially paid."""
        invoice = _invoice("10")

        outcome = service.apply(invoice, _payment("4"))

        assert outcome is PaymentOutcome.INVOICE_NOW_PARTIALLY_PAID
        assert invoice.amount_paid == Decimal("4")
        assert invoice.tax_amount == Decimal("0.56")
        assert invoice.payments == [_payment("4")]

    def test_full_first_payment(self, service) -> None:
        """A first payment equal to the amount pays the invoice in full."""
        invoice = _invoice("10")

        outcome = service.apply(invoice, _payment("10"))

        assert outcome is PaymentOutcome.FINAL_PARTIAL_PAYMENT_RECEIVED_INVOICE_FULLY_PAID
        assert invoice.amount_paid == Decimal("10")
        assert invoice.tax_amount == Decimal("1.40")

    def test_overpayment_leaves_invoice_untouched(self, service) -> None:
        """A first payment above the amount is rejected without mutation."""
        invoice = _invoice("5")

        outcome = service.apply(invoice, _payment("6"))

        assert outcome is PaymentOutcome.PAYMENT_GREATER_INVOICE_AMOUNT
        assert invoice.amount_paid == Decimal("0")
        assert invoice.payments == []

    def test_absent_history_is_initialized(self, service) -> None:
        """An uninitialized history becomes a list holding the payment."""
        invoice = _invoice("10", payments=None)

        outcome = service.apply(invoice, _payment("4"))

        assert outcome is PaymentOutcome.INVOICE_NOW_PARTIALLY_PAID
        assert invoice.payments == [_payment("4")]

    def test_first_payment_overwrites_amount_paid(self, service) -> None:
        """The first payment replaces amount_paid instead of adding to it."""
        invoice = _invoice("10", amount_paid="3")

        service.apply(invoice, _payment("4"))

        assert invoice.amount_paid == Decimal("4")

    def test_zero_payment_is_accepted(self, service) -> None:
        """A zero payment goes through the normal arithmetic."""
        invoice = _invoice("10")

        outcome = service.apply(invoice, _payment("0"))

        assert outcome is PaymentOutcome.INVOICE_NOW_PARTIALLY_PAID
        assert invoice.payments == [_payment("0")]

    def test_negative_payment_is_accepted(self, service) -> None:
        """A negative payment is not range-checked."""
        invoice = _invoice("10")

        outcome = service.apply(invoice, _payment("-2"))

        assert outcome is PaymentOutcome.INVOICE_NOW_PARTIALLY_PAID
        assert invoice.amount_paid == Decimal("-2")


class TestPartialPayments:
    """Invoices that already carry payments."""

    def test_already_fully_paid(self, service) -> None:
        """A history summing to the amount rejects further payments."""
        invoice = _invoice("10", "10", payments=[_payment("10")])

        outcome = service.apply(invoice, _payment("1"))

        assert outcome is PaymentOutcome.INVOICE_ALREADY_FULLY_PAID
        assert invoice.amount_paid == Decimal("10")
        assert len(invoice.payments) == 1

    def test_already_fully_paid_is_stable(self, service) -> None:
        """Repeated payments on a paid invoice keep returning the same outcome."""
        invoice = _invoice("10", "10", payments=[_payment("10")])

        for _ in range(3):
            assert (
                service.apply(invoice, _payment("5"))
                is PaymentOutcome.INVOICE_ALREADY_FULLY_PAID
            )
        assert len(invoice.payments) == 1

    def test_payment_greater_than_remaining(self, service) -> None:
        """A payment above the remaining balance is rejected without mutation."""
        invoice = _invoice("10", "5", payments=[_payment("5")])

        outcome = service.apply(invoice, _payment("6"))

        assert outcome is PaymentOutcome.PAYMENT_GREATER_PARTIAL_AMOUNT_REMAINING
        assert invoice.amount_paid == Decimal("5")
        assert len(invoice.payments) == 1

    def test_final_partial_payment(self, service) -> None:
        """A payment equal to the remaining balance completes the invoice."""
        invoice = _invoice("10", "5", payments=[_payment("5")])

        outcome = service.apply(invoice, _payment("5"))

        assert outcome is PaymentOutcome.FINAL_PARTIAL_PAYMENT_RECEIVED_INVOICE_FULLY_PAID
        assert invoice.amount_paid == Decimal("10")
        assert invoice.tax_amount == Decimal("0.70")
        assert len(invoice.payments) == 2

    def test_another_partial_payment(self, service) -> None:
        """A payment below the remaining balance accumulates amount_paid."""
        invoice = _invoice("10", "5", payments=[_payment("5")])

        outcome = service.apply(invoice, _payment("1"))

        assert outcome is PaymentOutcome.ANOTHER_PARTIAL_PAYMENT_RECEIVED_INVOICE_NOT_FULLY_PAID
        assert invoice.amount_paid == Decimal("6")
        assert invoice.tax_amount == Decimal("0.14")

    def test_tax_is_overwritten_not_accumulated(self, service) -> None:
        """Tax reflects only the latest payment."""
        invoice = _invoice("10")

        service.apply(invoice, _payment("4"))
        service.apply(invoice, _payment("2"))

        assert invoice.tax_amount == Decimal("0.28")

    def test_zero_total_history_skips_remaining_check(self, service) -> None:
        """A history summing to zero skips both rejection checks."""
        invoice = _invoice("10", payments=[_payment("0")])

        outcome = service.apply(invoice, _payment("20"))

        assert outcome is PaymentOutcome.ANOTHER_PARTIAL_PAYMENT_RECEIVED_INVOICE_NOT_FULLY_PAID
        assert invoice.amount_paid == Decimal("20")

    def test_custom_tax_rate(self) -> None:
        """The tax rate can be injected."""
        invoice = _invoice("10")

        PaymentService(tax_rate=Decimal("0.2")).apply(invoice, _payment("5"))

        assert invoice.tax_amount == Decimal("1.0")

    def test_equality_is_exact(self, service) -> None:
        """Decimal amounts compare exactly, with no tolerance."""
        invoice = _invoice("0.3", "0.1", payments=[_payment("0.1")])

        outcome = service.apply(invoice, _payment("0.2"))

        assert outcome is PaymentOutcome.FINAL_PARTIAL_PAYMENT_RECEIVED_INVOICE_FULLY_PAID
