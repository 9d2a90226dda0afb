"""In-memory repository implementation for customers."""

import threading
from typing import List, Optional

from customer_management.domain.entities import Customer
from customer_management.domain.exceptions import (
    CustomerAlreadyExistsException,
    InvalidCustomerDataException,
)
from customer_management.domain.interfaces import CustomerRepository
from customer_management.domain.value_objects import CustomerTier, is_blank


class InMemoryCustomerRepository(CustomerRepository):
    """Lock-guarded flat list of customers."""

    def __init__(self):
        self._customers: List[Customer] = []
        self._lock = threading.RLock()

    def add(self, customer: Customer) -> None:
        if customer is None:
            raise InvalidCustomerDataException("Customer must not be None")

        with self._lock:
            if self._index_of(customer.id) is not None:
                raise CustomerAlreadyExistsException(customer.id)
            self._customers.append(customer)

    def remove(self, customer_id: str) -> bool:
        if is_blank(customer_id):
            return False

        with self._lock:
            index = self._index_of(customer_id)
            if index is None:
                return False
            del self._customers[index]
            return True

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        if is_blank(customer_id):
            return None

        with self._lock:
            index = self._index_of(customer_id)
            return None if index is None else self._customers[index]

    def get_all(self) -> List[Customer]:
        with self._lock:
            return list(self._customers)

    def update(self, customer: Customer) -> bool:
        if customer is None:
            return False

        with self._lock:
            index = self._index_of(customer.id)
            if index is None:
                return False
            self._customers[index] = customer
            return True

    def exists(self, customer_id: str) -> bool:
        if is_blank(customer_id):
            return False

        with self._lock:
            return self._index_of(customer_id) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._customers)

    def get_by_tier(self, tier: CustomerTier) -> List[Customer]:
        tier = CustomerTier(tier)
        with self._lock:
            return [c for c in self._customers if c.tier == tier]

    def get_with_active_contracts(self) -> List[Customer]:
        with self._lock:
            return [c for c in self._customers if c.has_active_contract]

    def clear(self) -> None:
        with self._lock:
            self._customers.clear()

    def _index_of(self, customer_id: str) -> Optional[int]:
        # Caller must hold the lock
        for index, customer in enumerate(self._customers):
            if customer.id == customer_id:
                return index
        return None
