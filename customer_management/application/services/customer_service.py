"""Customer service - orchestrates the customer management use cases."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Sequence

import structlog

from customer_management.core import metrics
from customer_management.domain.entities import Customer, CustomerData, PaymentResult, Purchase
from customer_management.domain.exceptions import (
    CustomerNotFoundException,
    InvalidCustomerDataException,
    InvalidPurchaseException,
)
from customer_management.domain.interfaces import CustomerRepository
from customer_management.domain.value_objects import CustomerTier, Money, to_money
from customer_management.application.dto import (
    CustomerSummary,
    PurchaseItem,
    RegisterCustomerRequest,
)
from customer_management.service import (
    PurchaseQuote,
    create_customer,
    create_sample_customer,
    create_vip_customer,
    create_wholesale_customer,
    quote_purchases,
    resolve_tier,
)

logger = structlog.get_logger(__name__)


class CustomerService:
    """
    Application service for customer use cases.

    Loads customers from the repository, applies the domain operation and
    stores the result back. Precondition faults from the domain propagate
    to the caller; payment and bonus outcomes are returned as values.
    """

    def __init__(self, customer_repository: CustomerRepository):
        self._repo = customer_repository

    # -------------------------------------------------------------------------
    # Registration and lookup
    # -------------------------------------------------------------------------

    def register_customer(self, request: RegisterCustomerRequest) -> CustomerSummary:
        """
        Create and store a new customer.

        Raises:
            InvalidCustomerDataException: If request validation fails
        """
        errors = request.validate()
        if errors:
            raise InvalidCustomerDataException("; ".join(errors))

        tier = resolve_tier(request.tier)

        if tier == CustomerTier.WHOLESALE and request.minimum_order_amount is not None:
            customer = create_wholesale_customer(
                request.full_name,
                request.email,
                request.phone,
                request.minimum_order_amount,
                address=request.address,
            )
        elif tier == CustomerTier.VIP and request.personal_manager is not None:
            customer = create_vip_customer(
                request.full_name,
                request.email,
                request.phone,
                request.personal_manager,
                address=request.address,
            )
        else:
            customer = create_customer(
                tier,
                request.full_name,
                request.email,
                request.phone,
                request.address,
            )

        self._repo.add(customer)
        metrics.record_customer_registered(tier.value)

        logger.info(
            "customer_registered",
            customer_id=customer.id,
            tier=tier.value,
            strategy=customer.discount_strategy.strategy_name,
        )

        return CustomerSummary.from_entity(customer)

    def get_customer(self, customer_id: str) -> Customer:
        """
        Retrieve a customer by ID.

        Raises:
            CustomerNotFoundException: If customer not found
        """
        customer = self._repo.get_by_id(customer_id)

        if customer is None:
            logger.warning("customer_not_found", customer_id=customer_id)
            raise CustomerNotFoundException(customer_id)

        return customer

    def list_customers(self, tier: Optional[str] = None) -> List[CustomerSummary]:
        if tier is None:
            customers = self._repo.get_all()
        else:
            customers = self._repo.get_by_tier(resolve_tier(tier))

        logger.info("customers_listed", tier=tier, count=len(customers))

        return [CustomerSummary.from_entity(c) for c in customers]

    def update_personal_data(self, customer_id: str, data: CustomerData) -> CustomerSummary:
        customer = self.get_customer(customer_id)
        customer.update_personal_data(data)
        self._repo.update(customer)

        logger.info("customer_updated", customer_id=customer_id)

        return CustomerSummary.from_entity(customer)

    def remove_customer(self, customer_id: str) -> None:
        if not self._repo.remove(customer_id):
            logger.warning("customer_not_found", customer_id=customer_id)
            raise CustomerNotFoundException(customer_id)

        logger.info("customer_removed", customer_id=customer_id)

    def load_sample_customers(self) -> List[CustomerSummary]:
        """Store one demo customer per tier."""
        customers = [create_sample_customer(tier) for tier in CustomerTier]

        for customer in customers:
            self._repo.add(customer)
            metrics.record_customer_registered(customer.tier.value)

        logger.info("sample_customers_loaded", count=len(customers))

        return [CustomerSummary.from_entity(c) for c in customers]

    # -------------------------------------------------------------------------
    # Contract lifecycle
    # -------------------------------------------------------------------------

    def sign_contract(
        self,
        customer_id: str,
        contract_number: str,
        sign_date: datetime,
    ) -> None:
        customer = self.get_customer(customer_id)
        customer.sign_contract(contract_number, sign_date)
        self._repo.update(customer)
        metrics.record_contract_event("signed")

        logger.info(
            "contract_signed",
            customer_id=customer_id,
            contract_number=contract_number,
        )

    def terminate_contract(self, customer_id: str) -> None:
        customer = self.get_customer(customer_id)
        customer.terminate_contract()
        self._repo.update(customer)
        metrics.record_contract_event("terminated")

        logger.info("contract_terminated", customer_id=customer_id)

    def renew_contract(self, customer_id: str, new_sign_date: datetime) -> None:
        customer = self.get_customer(customer_id)
        customer.renew_contract(new_sign_date)
        self._repo.update(customer)
        metrics.record_contract_event("renewed")

        logger.info("contract_renewed", customer_id=customer_id)

    # -------------------------------------------------------------------------
    # Purchases and payment
    # -------------------------------------------------------------------------

    def add_purchases(
        self,
        customer_id: str,
        items: Sequence[PurchaseItem],
    ) -> PurchaseQuote:
        """
        Price a basket with the customer's strategy and add every line.

        The whole basket is validated before any line is added, so a bad
        line leaves the customer unchanged.

        Raises:
            InvalidPurchaseException: If the basket is empty or a line is invalid
            NoActiveContractException: If the customer has no active contract
        """
        customer = self.get_customer(customer_id)

        if not items:
            raise InvalidPurchaseException("At least one item is required")

        purchases = [
            Purchase(
                product_name=item.product_name,
                quantity=item.quantity,
                price=to_money(item.price),
            )
            for item in items
        ]
        if not all(p.is_valid() for p in purchases):
            raise InvalidPurchaseException()

        quote = quote_purchases(purchases, customer.discount_strategy)

        for purchase in quote.items:
            customer.add_purchase(purchase)

        self._repo.update(customer)
        metrics.record_purchases_added(customer.tier.value, quote.total_items)

        logger.info(
            "purchases_added",
            customer_id=customer_id,
            count=quote.total_items,
            total_before_discount=str(quote.total_before_discount),
            discount_percent=str(quote.discount_percent),
        )

        return quote

    def process_payment(self, customer_id: str, amount: Money) -> PaymentResult:
        customer = self.get_customer(customer_id)

        log = logger.bind(customer_id=customer_id, amount=str(amount))

        result = customer.process_payment(amount)

        if result.success:
            metrics.record_payment(True, customer.apply_discount())
            log.info(
                "payment_processed",
                paid=str(result.paid_amount),
                remaining=str(result.remaining_amount),
            )
        else:
            metrics.record_payment(False)
            log.info("payment_rejected", reason=result.message)

        return result

    # -------------------------------------------------------------------------
    # Tier-specific use cases
    # -------------------------------------------------------------------------

    def request_payment_deferral(self, customer_id: str, days: int) -> bool:
        customer = self.get_customer(customer_id)
        granted = customer.request_payment_deferral(days)
        if granted:
            self._repo.update(customer)

        logger.info(
            "payment_deferral_requested",
            customer_id=customer_id,
            days=days,
            granted=granted,
        )

        return granted

    def cancel_payment_deferral(self, customer_id: str) -> None:
        customer = self.get_customer(customer_id)
        customer.cancel_payment_deferral()
        self._repo.update(customer)

        logger.info("payment_deferral_cancelled", customer_id=customer_id)

    def redeem_bonus_points(self, customer_id: str, amount: Money) -> bool:
        customer = self.get_customer(customer_id)
        redeemed = customer.use_bonus_points(amount)
        if redeemed:
            self._repo.update(customer)
        metrics.record_bonus_redemption(redeemed)

        logger.info(
            "bonus_points_redeemed" if redeemed else "bonus_redemption_rejected",
            customer_id=customer_id,
            amount=str(amount),
            balance=str(customer.bonus_points),
        )

        return redeemed

    def get_total_with_discount(self, customer_id: str) -> Decimal:
        return self.get_customer(customer_id).get_total_with_discount()
