"""
FastAPI router for the billing bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, status

from app.application.billing.dtos import (
    GetInvoiceQuery,
    InvoiceResult,
    RegisterInvoiceCommand,
)
from app.application.billing.get_invoice import GetInvoiceUseCase
from app.application.billing.process_payment import ProcessPaymentUseCase
from app.application.billing.register_invoice import RegisterInvoiceUseCase
from app.domain.billing.entities import Payment
from app.interfaces.billing.dependencies import (
    get_invoice_use_case,
    get_process_payment_use_case,
    get_register_invoice_use_case,
)
from app.interfaces.billing.schemas import (
    ErrorResponse,
    InvoiceResponse,
    PaymentItem,
    ProcessPaymentRequest,
    ProcessPaymentResponse,
    RegisterInvoiceRequest,
)

router = APIRouter(prefix="/billing", tags=["billing"])


def _to_response(result: InvoiceResult) -> InvoiceResponse:
    return InvoiceResponse(
        reference=result.reference,
        amount=result.amount,
        amount_paid=result.amount_paid,
        tax_amount=result.tax_amount,
        payments=[
            PaymentItem(reference=p.reference, amount=p.amount)
            for p in result.payments
        ],
    )


@router.post(
    "/invoices",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Register an invoice",
)
def register_invoice(
    request: RegisterInvoiceRequest,
    use_case: RegisterInvoiceUseCase = Depends(get_register_invoice_use_case),
) -> InvoiceResponse:
    """Register a new unpaid invoice."""
    command = RegisterInvoiceCommand(reference=request.reference, amount=request.amount)
    return _to_response(use_case.execute(command))


@router.get(
    "/invoices/{reference}",
    response_model=InvoiceResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get an invoice",
)
def get_invoice(
    reference: str,
    use_case: GetInvoiceUseCase = Depends(get_invoice_use_case),
) -> InvoiceResponse:
    """Return the current state of an invoice."""
    return _to_response(use_case.execute(GetInvoiceQuery(reference=reference)))


@router.post(
    "/payments",
    response_model=ProcessPaymentResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Apply a payment",
    description=(
        "Apply a payment to the invoice it references. Rejections such as "
        "over-payment are reported in the message with HTTP 200."
    ),
)
def process_payment(
    request: ProcessPaymentRequest,
    use_case: ProcessPaymentUseCase = Depends(get_process_payment_use_case),
) -> ProcessPaymentResponse:
    """Apply a payment and return the outcome message."""
    payment = Payment(reference=request.reference, amount=request.amount)
    message = use_case.execute(payment)
    return ProcessPaymentResponse(reference=request.reference, message=message)
