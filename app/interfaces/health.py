"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Reports the application version and which invoice storage backend
the billing context is wired to.
"""

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.domain.billing.ports import InvoiceRepository
from app.interfaces.billing.dependencies import (
    describe_invoice_storage,
    get_invoice_repository,
)
from app.interfaces.billing.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application status, version and invoice storage backend.",
)
def health_check(
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
) -> HealthResponse:
    """Return current application health status."""
    storage, cache_enabled = describe_invoice_storage(invoice_repo)
    return HealthResponse(
        status="ok",
        version=settings.version,
        storage=storage,
        cache_enabled=cache_enabled,
    )
