"""Data Transfer Objects for application layer."""

from .customer import CustomerSummary, PurchaseItem, RegisterCustomerRequest

__all__ = [
    "CustomerSummary",
    "PurchaseItem",
    "RegisterCustomerRequest",
]
