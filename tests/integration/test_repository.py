"""
Integration tests for the in-memory customer repository.

These tests verify:
1. Add/get/update/remove semantics
2. Snapshot isolation of list results
3. Tier and active-contract queries
4. Mutual exclusion under concurrent writers
"""

import threading
from datetime import datetime

import pytest

from customer_management.domain.exceptions import (
    CustomerAlreadyExistsException,
    InvalidCustomerDataException,
)
from customer_management.domain.value_objects import CustomerTier
from customer_management.service.factory import create_customer


def make(tier=CustomerTier.REGULAR, name="Ivan"):
    return create_customer(tier, name, f"{name.lower()}@example.com", "123")


class TestAddAndGet:
    """Tests for add(), get_by_id() and exists()."""

    def test_add_and_get(self, repository):
        customer = make()

        repository.add(customer)

        assert repository.get_by_id(customer.id) is customer
        assert repository.exists(customer.id)
        assert repository.count() == 1

    def test_add_duplicate_id(self, repository):
        customer = make()
        repository.add(customer)

        with pytest.raises(CustomerAlreadyExistsException):
            repository.add(customer)

        assert repository.count() == 1

    def test_add_none(self, repository):
        with pytest.raises(InvalidCustomerDataException):
            repository.add(None)

    @pytest.mark.parametrize("customer_id", ["", "  ", None, "missing"])
    def test_lookups_of_unknown_ids(self, repository, customer_id):
        assert repository.get_by_id(customer_id) is None
        assert repository.exists(customer_id) is False
        assert repository.remove(customer_id) is False


class TestUpdateAndRemove:
    """Tests for update(), remove() and clear()."""

    def test_update_replaces_by_id(self, repository):
        original = make()
        repository.add(original)
        replacement = make(name="Petr")
        replacement.id = original.id

        assert repository.update(replacement) is True

        assert repository.get_by_id(original.id) is replacement
        assert repository.count() == 1

    def test_update_unknown(self, repository):
        assert repository.update(make()) is False
        assert repository.update(None) is False

    def test_remove(self, repository):
        customer = make()
        repository.add(customer)

        assert repository.remove(customer.id) is True

        assert repository.count() == 0
        assert repository.remove(customer.id) is False

    def test_clear(self, repository):
        repository.add(make())
        repository.add(make())

        repository.clear()

        assert repository.count() == 0


class TestQueries:
    """Tests for list-style accessors."""

    def test_get_all_is_snapshot(self, repository):
        repository.add(make())

        snapshot = repository.get_all()
        snapshot.clear()

        assert repository.count() == 1

    def test_get_all_keeps_insertion_order(self, repository):
        first, second = make(name="First"), make(name="Second")
        repository.add(first)
        repository.add(second)

        assert [c.full_name for c in repository.get_all()] == ["First", "Second"]

    def test_get_by_tier(self, repository):
        repository.add(make(CustomerTier.REGULAR))
        repository.add(make(CustomerTier.VIP))
        repository.add(make(CustomerTier.VIP))

        assert len(repository.get_by_tier(CustomerTier.VIP)) == 2
        assert len(repository.get_by_tier("wholesale")) == 0

    def test_get_with_active_contracts(self, repository):
        active, terminated, unsigned = make(), make(), make()
        active.sign_contract("C-1", datetime(2026, 1, 1))
        terminated.sign_contract("C-2", datetime(2026, 1, 1))
        terminated.terminate_contract()
        for customer in (active, terminated, unsigned):
            repository.add(customer)

        assert repository.get_with_active_contracts() == [active]


def test_concurrent_adds_are_all_stored(repository):
    """Concurrent writers never lose or duplicate customers."""
    customers = [make(name=f"C{i}") for i in range(200)]
    chunks = [customers[i::4] for i in range(4)]

    def add_all(chunk):
        for customer in chunk:
            repository.add(customer)

    threads = [threading.Thread(target=add_all, args=(chunk,)) for chunk in chunks]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert repository.count() == 200
    assert {c.id for c in repository.get_all()} == {c.id for c in customers}


def test_concurrent_duplicate_adds_store_once(repository):
    customer = make()
    errors = []

    def add():
        try:
            repository.add(customer)
        except CustomerAlreadyExistsException as e:
            errors.append(e)

    threads = [threading.Thread(target=add) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert repository.count() == 1
    assert len(errors) == 7
