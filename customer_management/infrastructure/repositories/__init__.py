"""Repository implementations."""

from .memory_customer_repository import InMemoryCustomerRepository

__all__ = [
    "InMemoryCustomerRepository",
]
