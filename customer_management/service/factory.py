"""
Customer Factory.

Builds customers of a given tier with the matching discount strategy wired
in a single construction step, so that no customer ever exists with a
tier/strategy mismatch.
"""

from typing import Optional

from customer_management.domain.discounts import (
    DiscountSettings,
    DiscountStrategy,
    StandardDiscountStrategy,
    VIPDiscountStrategy,
    WholesaleDiscountStrategy,
    discount_settings,
)
from customer_management.domain.entities import Customer, VipTerms
from customer_management.domain.exceptions import (
    InvalidCustomerDataException,
    UnknownCustomerTierException,
)
from customer_management.domain.value_objects import CustomerTier, Money, is_blank


def resolve_tier(tier: object) -> CustomerTier:
    """
    Convert a tier value ("vip", CustomerTier.VIP, ...) to CustomerTier.

    Raises:
        UnknownCustomerTierException: If the value names no tier
    """
    try:
        return CustomerTier(tier)
    except ValueError:
        raise UnknownCustomerTierException(tier) from None


def validate_customer_data(full_name: str, email: str, phone: str) -> bool:
    """
    Check the required fields for creating a customer.

    Returns:
        True if name, email and phone are non-blank and email contains '@'
    """
    return (
        not is_blank(full_name)
        and not is_blank(email)
        and not is_blank(phone)
        and "@" in email
    )


def _require_valid_data(full_name: str, email: str, phone: str) -> None:
    if not validate_customer_data(full_name, email, phone):
        raise InvalidCustomerDataException(
            "Full name, phone and a valid email address are required"
        )


def create_discount_strategy(
    tier: object,
    settings: DiscountSettings = discount_settings,
) -> DiscountStrategy:
    """Create the default discount strategy for a tier."""
    tier = resolve_tier(tier)

    if tier == CustomerTier.REGULAR:
        return StandardDiscountStrategy(settings=settings)
    elif tier == CustomerTier.WHOLESALE:
        return WholesaleDiscountStrategy(settings=settings)
    else:
        return VIPDiscountStrategy(settings=settings)


def create_customer(
    tier: object,
    full_name: Optional[str] = None,
    email: Optional[str] = None,
    phone: Optional[str] = None,
    address: str = "",
) -> Customer:
    """
    Create a customer of the given tier with its discount strategy.

    Without personal data a blank customer is returned (to be filled in
    later through ``update_personal_data``). When any personal field is
    given, name, email and phone must all pass ``validate_customer_data``.

    Raises:
        UnknownCustomerTierException: If the tier is not recognised
        InvalidCustomerDataException: If personal data is incomplete
    """
    tier = resolve_tier(tier)

    if full_name is None and email is None and phone is None:
        return Customer(tier=tier, discount_strategy=create_discount_strategy(tier))

    _require_valid_data(full_name, email, phone)

    return Customer(
        full_name=full_name,
        email=email,
        phone=phone,
        address=address or "",
        tier=tier,
        discount_strategy=create_discount_strategy(tier),
    )


def create_wholesale_customer(
    full_name: str,
    email: str,
    phone: str,
    minimum_order_amount: Money,
    address: str = "",
) -> Customer:
    """Create a wholesale customer with a custom minimum order amount."""
    _require_valid_data(full_name, email, phone)
    strategy = WholesaleDiscountStrategy(minimum_order_amount)
    if strategy.minimum_order_amount < 0:
        raise InvalidCustomerDataException("Minimum order amount cannot be negative")

    return Customer(
        full_name=full_name,
        email=email,
        phone=phone,
        address=address,
        tier=CustomerTier.WHOLESALE,
        discount_strategy=strategy,
    )


def create_vip_customer(
    full_name: str,
    email: str,
    phone: str,
    personal_manager: str,
    address: str = "",
    base_percentage: Optional[Money] = None,
) -> Customer:
    """Create a VIP customer with an assigned personal manager."""
    _require_valid_data(full_name, email, phone)
    if is_blank(personal_manager):
        raise InvalidCustomerDataException("Manager name must not be empty")

    return Customer(
        full_name=full_name,
        email=email,
        phone=phone,
        address=address,
        tier=CustomerTier.VIP,
        discount_strategy=VIPDiscountStrategy(base_percentage),
        terms=VipTerms(personal_manager=personal_manager),
    )


def create_sample_customer(tier: object) -> Customer:
    """Create a customer with demo data, one per tier."""
    tier = resolve_tier(tier)

    if tier == CustomerTier.REGULAR:
        return create_customer(
            CustomerTier.REGULAR,
            "Ivan Ivanov",
            "ivanov@example.com",
            "+375 (44) 123-45-67",
            "Mogilev, Lenina st. 1",
        )
    elif tier == CustomerTier.WHOLESALE:
        return create_wholesale_customer(
            "Opttorg LLC",
            "opttorg@example.com",
            "+375 (29) 987-65-43",
            15000,
        )
    else:
        return create_vip_customer(
            "Petr Petrov",
            "petrov@example.com",
            "+7 (999) 555-55-55",
            "Sergey Sidorov",
        )
