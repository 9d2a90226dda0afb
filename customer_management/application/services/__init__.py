"""Application services."""

from .customer_service import CustomerService

__all__ = [
    "CustomerService",
]
