"""
Customer Management - Application Entry Point

Wires logging, the in-memory repository and the customer service for an
embedding UI or script.
"""

import structlog

from customer_management import __version__
from customer_management.application.services import CustomerService
from customer_management.core.config import Settings, settings as default_settings
from customer_management.core.logging import setup_logging
from customer_management.domain.interfaces import CustomerRepository
from customer_management.infrastructure.repositories import InMemoryCustomerRepository


def create_customer_service(
    repository: CustomerRepository | None = None,
    settings: Settings = default_settings,
    load_samples: bool = False,
) -> CustomerService:
    """
    Build a ready-to-use CustomerService.

    Args:
        repository: Storage to use (a fresh in-memory repository by default)
        settings: Application settings for logging
        load_samples: Whether to pre-populate one demo customer per tier

    Returns:
        Configured CustomerService
    """
    setup_logging(settings)

    if repository is None:
        repository = InMemoryCustomerRepository()

    service = CustomerService(customer_repository=repository)

    logger = structlog.get_logger(__name__)
    logger.info("application_started", app=settings.app_name, version=__version__)

    if load_samples:
        service.load_sample_customers()

    return service
