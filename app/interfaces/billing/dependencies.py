"""
Dependency injection for the billing bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the billing context.
"""

import logging
from functools import lru_cache

from fastapi import Depends
from sqlalchemy import create_engine

from app.application.billing.get_invoice import GetInvoiceUseCase
from app.application.billing.process_payment import ProcessPaymentUseCase
from app.application.billing.register_invoice import RegisterInvoiceUseCase
from app.core.config import settings
from app.domain.billing.payment_service import PaymentService
from app.domain.billing.ports import InvoiceRepository
from app.infrastructure.billing.cached_invoice_repository import (
    CachedInvoiceRepository,
)
from app.infrastructure.billing.in_memory_invoice_repository import (
    InMemoryInvoiceRepository,
)
from app.infrastructure.billing.sql_invoice_repository import (
    SqlInvoiceRepositoryAdapter,
)

logger = logging.getLogger(__name__)


def _build_storage() -> InvoiceRepository:
    """Pick the storage adapter from application settings."""
    if not settings.database_url:
        logger.info("DATABASE_URL not set, using in-memory invoice storage")
        return InMemoryInvoiceRepository()

    engine = create_engine(settings.database_url, pool_pre_ping=True)
    repo = SqlInvoiceRepositoryAdapter(engine=engine)
    repo.create_schema()
    return repo


@lru_cache
def get_invoice_repository() -> InvoiceRepository:
    """Return the process-wide invoice repository, cached if enabled."""
    repo = _build_storage()
    if settings.invoice_cache_enabled:
        return CachedInvoiceRepository(
            repo, ttl_seconds=settings.invoice_cache_ttl_seconds
        )
    return repo


def get_process_payment_use_case(
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
) -> ProcessPaymentUseCase:
    """Build ProcessPaymentUseCase with its infrastructure dependencies."""
    return ProcessPaymentUseCase(
        invoice_repo=invoice_repo,
        payment_service=PaymentService(tax_rate=settings.tax_rate),
    )


def get_register_invoice_use_case(
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
) -> RegisterInvoiceUseCase:
    """Build RegisterInvoiceUseCase with its infrastructure dependencies."""
    return RegisterInvoiceUseCase(invoice_repo=invoice_repo)


def get_invoice_use_case(
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
) -> GetInvoiceUseCase:
    """Build GetInvoiceUseCase with its infrastructure dependencies."""
    return GetInvoiceUseCase(invoice_repo=invoice_repo)


def describe_invoice_storage(repo: InvoiceRepository) -> tuple[str, bool]:
    """Return the storage backend name and whether a cache fronts it."""
    cached = isinstance(repo, CachedInvoiceRepository)
    backend = repo.inner if cached else repo
    if isinstance(backend, SqlInvoiceRepositoryAdapter):
        return "sql", cached
    if isinstance(backend, InMemoryInvoiceRepository):
        return "memory", cached
    return type(backend).__name__, cached
