"""
Unit Tests for the customer factory.

These tests verify:
1. Each tier is wired with its matching discount strategy
2. Required-field validation
3. Tier-specific constructors (wholesale minimum, VIP manager)
4. Unknown tier handling
"""

from decimal import Decimal

import pytest

from customer_management.domain.discounts import (
    StandardDiscountStrategy,
    VIPDiscountStrategy,
    WholesaleDiscountStrategy,
)
from customer_management.domain.exceptions import (
    InvalidCustomerDataException,
    UnknownCustomerTierException,
)
from customer_management.domain.value_objects import CustomerTier
from customer_management.service.factory import (
    create_customer,
    create_discount_strategy,
    create_sample_customer,
    create_vip_customer,
    create_wholesale_customer,
    resolve_tier,
    validate_customer_data,
)


class TestCreateCustomer:
    """Tests for create_customer()."""

    @pytest.mark.parametrize(
        "tier,strategy_type,strategy_name",
        [
            (CustomerTier.REGULAR, StandardDiscountStrategy, "Standard discount"),
            (CustomerTier.WHOLESALE, WholesaleDiscountStrategy, "Wholesale discount"),
            (CustomerTier.VIP, VIPDiscountStrategy, "VIP discount"),
        ],
    )
    def test_strategy_matches_tier(self, tier, strategy_type, strategy_name):
        customer = create_customer(tier, "Ivan", "ivan@example.com", "123")

        assert customer.tier == tier
        assert isinstance(customer.discount_strategy, strategy_type)
        assert customer.discount_strategy.strategy_name == strategy_name

    def test_sets_personal_data(self):
        customer = create_customer(
            CustomerTier.REGULAR, "Ivan", "ivan@example.com", "123", "Minsk"
        )

        assert customer.full_name == "Ivan"
        assert customer.email == "ivan@example.com"
        assert customer.phone == "123"
        assert customer.address == "Minsk"

    def test_accepts_tier_string(self):
        assert create_customer("wholesale").tier == CustomerTier.WHOLESALE

    def test_blank_customer_without_personal_data(self):
        customer = create_customer(CustomerTier.VIP)

        assert customer.full_name == ""
        assert isinstance(customer.discount_strategy, VIPDiscountStrategy)

    @pytest.mark.parametrize(
        "full_name,email,phone",
        [
            ("", "ivan@example.com", "123"),
            ("Ivan", "ivan.example.com", "123"),
            ("Ivan", "ivan@example.com", " "),
            ("Ivan", None, None),
        ],
    )
    def test_rejects_invalid_personal_data(self, full_name, email, phone):
        with pytest.raises(InvalidCustomerDataException):
            create_customer(CustomerTier.REGULAR, full_name, email, phone)

    @pytest.mark.parametrize("tier", ["gold", 3, None])
    def test_unknown_tier(self, tier):
        with pytest.raises(UnknownCustomerTierException):
            create_customer(tier)


class TestTierSpecificConstructors:
    """Tests for create_wholesale_customer() and create_vip_customer()."""

    def test_wholesale_minimum_order(self):
        customer = create_wholesale_customer(
            "Opttorg", "opt@example.com", "123", Decimal("25000")
        )

        assert customer.minimum_order_amount == Decimal("25000")
        assert customer.discount_strategy.minimum_order_amount == Decimal("25000")

    def test_wholesale_negative_minimum(self):
        with pytest.raises(InvalidCustomerDataException):
            create_wholesale_customer("Opttorg", "opt@example.com", "123", -1)

    def test_vip_personal_manager(self):
        customer = create_vip_customer("Petr", "petr@example.com", "123", "Sergey")

        assert customer.personal_manager == "Sergey"
        assert customer.bonus_points == 0

    def test_vip_base_percentage_is_clamped(self):
        customer = create_vip_customer(
            "Petr", "petr@example.com", "123", "Sergey", base_percentage=50
        )
        assert customer.discount_strategy.base_percentage == Decimal("35")

    def test_vip_blank_manager(self):
        with pytest.raises(InvalidCustomerDataException):
            create_vip_customer("Petr", "petr@example.com", "123", "")

    def test_validation_applies(self):
        with pytest.raises(InvalidCustomerDataException):
            create_vip_customer("Petr", "no-at-sign", "123", "Sergey")


class TestHelpers:
    """Tests for the remaining factory helpers."""

    @pytest.mark.parametrize(
        "full_name,email,phone,expected",
        [
            ("Ivan", "ivan@example.com", "123", True),
            ("", "ivan@example.com", "123", False),
            ("Ivan", "", "123", False),
            ("Ivan", "ivan@example.com", "", False),
            ("Ivan", "ivan.example.com", "123", False),
        ],
    )
    def test_validate_customer_data(self, full_name, email, phone, expected):
        assert validate_customer_data(full_name, email, phone) is expected

    def test_create_discount_strategy_returns_fresh_instances(self):
        first = create_discount_strategy(CustomerTier.WHOLESALE)
        second = create_discount_strategy(CustomerTier.WHOLESALE)

        first.minimum_order_amount = Decimal("1")

        assert second.minimum_order_amount == Decimal("10000")

    def test_resolve_tier(self):
        assert resolve_tier("vip") is CustomerTier.VIP
        assert resolve_tier(CustomerTier.REGULAR) is CustomerTier.REGULAR

    @pytest.mark.parametrize("tier", list(CustomerTier))
    def test_sample_customers_are_valid(self, tier):
        customer = create_sample_customer(tier)

        assert customer.tier == tier
        assert customer.get_personal_data().is_valid()
        assert customer.discount_strategy.tier == tier

    def test_sample_wholesale_minimum(self):
        customer = create_sample_customer(CustomerTier.WHOLESALE)
        assert customer.minimum_order_amount == Decimal("15000")
