"""
Fixtures for integration tests.

Provides:
- A fresh in-memory customer repository
- A CustomerService wired through the application entry point
- Registered customers of each tier with an active contract
"""

from datetime import datetime

import pytest

from customer_management.application.dto import RegisterCustomerRequest
from customer_management.application.services import CustomerService
from customer_management.infrastructure.repositories import InMemoryCustomerRepository
from customer_management.main import create_customer_service


SIGN_DATE = datetime(2026, 1, 10)


@pytest.fixture
def repository() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


@pytest.fixture
def service(repository: InMemoryCustomerRepository) -> CustomerService:
    return create_customer_service(repository=repository)


def _register(service: CustomerService, tier: str, **extra) -> str:
    summary = service.register_customer(
        RegisterCustomerRequest(
            tier=tier,
            full_name=f"{tier.title()} Customer",
            email=f"{tier}@example.com",
            phone="+375 29 000-00-00",
            **extra,
        )
    )
    service.sign_contract(summary.customer_id, f"C-{tier}", SIGN_DATE)
    return summary.customer_id


@pytest.fixture
def regular_id(service: CustomerService) -> str:
    return _register(service, "regular")


@pytest.fixture
def wholesale_id(service: CustomerService) -> str:
    return _register(service, "wholesale", minimum_order_amount=15000)


@pytest.fixture
def vip_id(service: CustomerService) -> str:
    return _register(service, "vip", personal_manager="Sergey Sidorov")
