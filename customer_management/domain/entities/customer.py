"""Customer aggregate with tier-specific terms."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Union
from uuid import uuid4

from customer_management.domain.discounts import (
    DiscountStrategy,
    WholesaleDiscountStrategy,
    discount_settings,
)
from customer_management.domain.exceptions import (
    ContractNotSignedException,
    ContractStateException,
    InvalidAmountException,
    InvalidContractNumberException,
    InvalidCustomerDataException,
    InvalidPurchaseException,
    NoActiveContractException,
    TierOperationException,
)
from customer_management.domain.value_objects import (
    CustomerTier,
    Money,
    is_blank,
    to_money,
)

from .contract import Contract
from .customer_data import CustomerData
from .payment import PaymentResult
from .purchase import Purchase


@dataclass
class WholesaleTerms:
    """
    Wholesale-only state.

    The minimum order amount is not stored here: it lives on the
    customer's WholesaleDiscountStrategy.
    """

    payment_deferral_days: int = 0
    discount_percent: Decimal = field(
        default_factory=lambda: discount_settings.wholesale_display_percent
    )


@dataclass
class VipTerms:
    """VIP-only state: bonus ledger and personal manager."""

    personal_manager: str = field(
        default_factory=lambda: discount_settings.vip_unassigned_manager
    )
    bonus_points: Decimal = Decimal("0")
    bonus_accrual_rate: Decimal = field(
        default_factory=lambda: discount_settings.vip_bonus_accrual_rate
    )
    discount_percent: Decimal = field(
        default_factory=lambda: discount_settings.vip_base_percentage
    )


TierTerms = Union[WholesaleTerms, VipTerms, None]

_TERMS_BY_TIER = {
    CustomerTier.REGULAR: None,
    CustomerTier.WHOLESALE: WholesaleTerms,
    CustomerTier.VIP: VipTerms,
}


@dataclass(eq=False)
class Customer:
    """
    A buyer together with its contract, purchases and discount strategy.

    Tier-specific behaviour is selected by ``tier`` and its matching
    ``terms`` payload (WholesaleTerms, VipTerms or None for regular
    customers). A strategy, when present, always belongs to the same tier.
    """

    full_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    tier: CustomerTier = CustomerTier.REGULAR
    discount_strategy: Optional[DiscountStrategy] = None
    terms: TierTerms = None
    contract: Optional[Contract] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    _purchases: List[Purchase] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.tier = CustomerTier(self.tier)

        strategy = self.discount_strategy
        if strategy is not None and strategy.tier != self.tier:
            raise InvalidCustomerDataException(
                f"{strategy.strategy_name} cannot be used for {self.tier.value} customers"
            )
        if self.tier == CustomerTier.WHOLESALE and not isinstance(
            strategy, WholesaleDiscountStrategy
        ):
            raise InvalidCustomerDataException(
                "Wholesale customers require a wholesale discount strategy"
            )

        terms_type = _TERMS_BY_TIER[self.tier]
        if self.terms is None and terms_type is not None:
            self.terms = terms_type()
        elif terms_type is None and self.terms is not None:
            raise InvalidCustomerDataException(
                f"{self.tier.value} customers carry no tier terms"
            )
        elif terms_type is not None and not isinstance(self.terms, terms_type):
            raise InvalidCustomerDataException(
                f"{self.tier.value} customers require {terms_type.__name__}"
            )

    # -------------------------------------------------------------------------
    # Purchases
    # -------------------------------------------------------------------------

    @property
    def purchases(self) -> List[Purchase]:
        """Snapshot of the purchases in insertion order."""
        return list(self._purchases)

    @property
    def total_amount(self) -> Decimal:
        """Sum of gross purchase totals."""
        return sum((p.total_price for p in self._purchases), Decimal("0"))

    def add_purchase(self, purchase: Purchase) -> None:
        """
        Append a purchase.

        VIP customers are credited bonus points for the purchase as part
        of the same call.

        Raises:
            InvalidPurchaseException: If the purchase is missing or invalid
            NoActiveContractException: If there is no active contract
        """
        if purchase is None:
            raise InvalidPurchaseException("Purchase must not be None")
        if not purchase.is_valid():
            raise InvalidPurchaseException()
        if not self.has_active_contract:
            raise NoActiveContractException(
                "Cannot add a purchase without an active contract"
            )

        self._purchases.append(purchase)

        if self.tier == CustomerTier.VIP:
            self.add_bonus_points(purchase.total_price)

    def clear_purchases(self) -> None:
        self._purchases.clear()

    # -------------------------------------------------------------------------
    # Contract
    # -------------------------------------------------------------------------

    @property
    def has_active_contract(self) -> bool:
        return self.contract is not None and self.contract.is_active

    def sign_contract(self, contract_number: str, sign_date: datetime) -> None:
        """
        Sign a new active contract.

        Raises:
            InvalidContractNumberException: If the number is blank
            ContractStateException: If an active contract already exists
        """
        if is_blank(contract_number):
            raise InvalidContractNumberException()
        if self.has_active_contract:
            raise ContractStateException("Customer already has an active contract")

        self.contract = Contract(contract_number=contract_number, sign_date=sign_date)

    def terminate_contract(self) -> None:
        if self.contract is None:
            raise ContractNotSignedException()
        self.contract.terminate()

    def renew_contract(self, new_sign_date: datetime) -> None:
        if self.contract is None:
            raise ContractNotSignedException()
        self.contract.renew(new_sign_date)

    # -------------------------------------------------------------------------
    # Personal data
    # -------------------------------------------------------------------------

    def get_personal_data(self) -> CustomerData:
        return CustomerData(
            full_name=self.full_name,
            email=self.email,
            phone=self.phone,
            address=self.address,
        )

    def update_personal_data(self, data: CustomerData) -> None:
        """
        Overwrite name, email, phone and address.

        Raises:
            InvalidCustomerDataException: If data is missing or invalid
        """
        if data is None:
            raise InvalidCustomerDataException("Customer data must not be None")
        errors = data.validate()
        if errors:
            raise InvalidCustomerDataException("; ".join(errors))

        self.full_name = data.full_name
        self.email = data.email
        self.phone = data.phone
        self.address = data.address

    # -------------------------------------------------------------------------
    # Discounts and payment
    # -------------------------------------------------------------------------

    def apply_discount(self) -> Decimal:
        """
        Discount on the current total according to the strategy.

        For wholesale and VIP customers this also refreshes the displayed
        discount percent in their terms.
        """
        if self.discount_strategy is None:
            return Decimal("0")

        total = self.total_amount
        discount = self.discount_strategy.calculate_discount(total)

        if self.terms is not None:
            self.terms.discount_percent = (
                self.discount_strategy.get_discount_percentage(total)
            )

        return discount

    def get_total_with_discount(self) -> Decimal:
        return self.total_amount - self.apply_discount()

    def process_payment(self, amount: Money) -> PaymentResult:
        """
        Attempt to pay against the discounted total.

        Never raises for business rejections; inspect ``result.success``.
        """
        amount = to_money(amount)
        if amount <= 0:
            return PaymentResult.failed("Payment amount must be greater than zero")

        if not self.has_active_contract:
            return PaymentResult.failed(
                "Cannot accept a payment without an active contract"
            )

        total_with_discount = self.get_total_with_discount()
        if amount > total_with_discount:
            return PaymentResult.failed(
                f"Payment amount ({amount:.2f}) exceeds the amount due "
                f"({total_with_discount:.2f})"
            )

        return PaymentResult.succeeded(amount, total_with_discount - amount)

    # -------------------------------------------------------------------------
    # Wholesale
    # -------------------------------------------------------------------------

    def _wholesale_terms(self, operation: str) -> WholesaleTerms:
        if self.tier != CustomerTier.WHOLESALE:
            raise TierOperationException(operation, self.tier.value)
        return self.terms

    @property
    def minimum_order_amount(self) -> Decimal:
        self._wholesale_terms("minimum_order_amount")
        return self.discount_strategy.minimum_order_amount

    def set_minimum_order_amount(self, amount: Money) -> None:
        self._wholesale_terms("set_minimum_order_amount")
        amount = to_money(amount)
        if amount < 0:
            raise InvalidAmountException("Minimum order amount cannot be negative")
        self.discount_strategy.minimum_order_amount = amount

    @property
    def payment_deferral_days(self) -> int:
        return self._wholesale_terms("payment_deferral_days").payment_deferral_days

    def request_payment_deferral(self, days: int) -> bool:
        """
        Request a payment deferral of 1 to the configured maximum days.

        Returns:
            True if granted, False if outside policy or no active contract
        """
        terms = self._wholesale_terms("request_payment_deferral")
        if days <= 0 or days > discount_settings.max_payment_deferral_days:
            return False
        if not self.has_active_contract:
            return False

        terms.payment_deferral_days = days
        return True

    def cancel_payment_deferral(self) -> None:
        self._wholesale_terms("cancel_payment_deferral").payment_deferral_days = 0

    def validate_minimum_order(self) -> bool:
        self._wholesale_terms("validate_minimum_order")
        return self.total_amount >= self.discount_strategy.minimum_order_amount

    def get_wholesale_discount(self, order_amount: Money) -> Decimal:
        """Discount the wholesale strategy would grant on an order amount."""
        self._wholesale_terms("get_wholesale_discount")
        return self.discount_strategy.calculate_discount(order_amount)

    # -------------------------------------------------------------------------
    # VIP
    # -------------------------------------------------------------------------

    def _vip_terms(self, operation: str) -> VipTerms:
        if self.tier != CustomerTier.VIP:
            raise TierOperationException(operation, self.tier.value)
        return self.terms

    @property
    def bonus_points(self) -> Decimal:
        return self._vip_terms("bonus_points").bonus_points

    @property
    def personal_manager(self) -> str:
        return self._vip_terms("personal_manager").personal_manager

    def add_bonus_points(self, purchase_amount: Money) -> None:
        """
        Credit bonus points for a purchase amount at the accrual rate.

        Raises:
            InvalidAmountException: If the amount is not positive
        """
        terms = self._vip_terms("add_bonus_points")
        purchase_amount = to_money(purchase_amount)
        if purchase_amount <= 0:
            raise InvalidAmountException("Purchase amount must be greater than zero")

        terms.bonus_points += purchase_amount * terms.bonus_accrual_rate / Decimal("100")

    def can_use_bonus_points(self, amount: Money) -> bool:
        terms = self._vip_terms("can_use_bonus_points")
        amount = to_money(amount)
        return 0 < amount <= terms.bonus_points

    def use_bonus_points(self, amount: Money) -> bool:
        """
        Redeem bonus points.

        Returns:
            True if debited, False if the amount is not positive or
            exceeds the balance
        """
        if not self.can_use_bonus_points(amount):
            return False

        self.terms.bonus_points -= to_money(amount)
        return True

    def assign_personal_manager(self, manager_name: str) -> None:
        terms = self._vip_terms("assign_personal_manager")
        if is_blank(manager_name):
            raise InvalidCustomerDataException("Manager name must not be empty")
        terms.personal_manager = manager_name

    def get_vip_discount(self) -> Decimal:
        self._vip_terms("get_vip_discount")
        if self.discount_strategy is None:
            return Decimal("0")
        return self.discount_strategy.calculate_discount(self.total_amount)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        prefix = f"[{self.tier.tag}] {self.full_name} | {self.email}"

        if self.tier == CustomerTier.WHOLESALE:
            days = self.terms.payment_deferral_days
            deferral = f"Deferral: {days} days" if days > 0 else "No deferral"
            return (
                f"{prefix} | Min. order: {self.minimum_order_amount:.2f} | {deferral}"
            )

        if self.tier == CustomerTier.VIP:
            return (
                f"{prefix} | Manager: {self.terms.personal_manager} "
                f"| Bonus: {self.terms.bonus_points:.2f}"
            )

        contract_status = "Contract active" if self.has_active_contract else "No contract"
        return f"{prefix} | Purchases: {len(self._purchases)} | {contract_status}"
