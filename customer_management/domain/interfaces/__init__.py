"""Domain Interfaces - Abstract contracts for infrastructure."""

from .repositories import CustomerRepository

__all__ = [
    "CustomerRepository",
]
