"""Repository interfaces for customer storage."""

from abc import ABC, abstractmethod
from typing import List, Optional

from customer_management.domain.entities import Customer
from customer_management.domain.value_objects import CustomerTier


class CustomerRepository(ABC):
    """
    Abstract repository for Customer storage.

    Implementations must make every operation mutually exclusive with the
    others under concurrent callers, and list results must be snapshots
    that callers can mutate freely.
    """

    @abstractmethod
    def add(self, customer: Customer) -> None:
        """
        Store a new customer.

        Args:
            customer: The customer to store

        Raises:
            CustomerAlreadyExistsException: If the identifier is already stored
        """
        ...

    @abstractmethod
    def remove(self, customer_id: str) -> bool:
        """
        Remove a customer by ID.

        Returns:
            True if a customer was removed
        """
        ...

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        """
        Retrieve a customer by ID.

        Returns:
            The customer if found, None otherwise
        """
        ...

    @abstractmethod
    def get_all(self) -> List[Customer]:
        """Retrieve all customers in insertion order."""
        ...

    @abstractmethod
    def update(self, customer: Customer) -> bool:
        """
        Replace the stored customer that has the same ID.

        Returns:
            True if a stored customer was replaced
        """
        ...

    @abstractmethod
    def exists(self, customer_id: str) -> bool:
        ...

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def get_by_tier(self, tier: CustomerTier) -> List[Customer]:
        """Retrieve customers of one tier."""
        ...

    @abstractmethod
    def get_with_active_contracts(self) -> List[Customer]:
        """Retrieve customers whose contract is currently active."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove all customers."""
        ...
