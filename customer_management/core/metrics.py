"""Prometheus metrics for the customer management core.

Business Metrics:
- crm_customers_registered_total: Customers registered by tier
- crm_purchases_added_total: Purchases added by tier
- crm_payments_total: Payment attempts by outcome
- crm_contract_events_total: Contract lifecycle events by action
- crm_discount_amount: Distribution of discounts granted on payment
- crm_bonus_redemptions_total: VIP bonus redemptions by outcome
"""

from decimal import Decimal

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest

from customer_management.core.config import settings


# =============================================================================
# Business Metrics
# =============================================================================

customers_registered_total = Counter(
    "crm_customers_registered_total",
    "Total number of customers registered",
    ["tier"],  # regular, wholesale, vip
)

purchases_added_total = Counter(
    "crm_purchases_added_total",
    "Total number of purchases added to customers",
    ["tier"],
)

payments_total = Counter(
    "crm_payments_total",
    "Total number of payment attempts",
    ["outcome"],  # success, rejected
)

contract_events_total = Counter(
    "crm_contract_events_total",
    "Contract lifecycle events",
    ["action"],  # signed, terminated, renewed
)

bonus_redemptions_total = Counter(
    "crm_bonus_redemptions_total",
    "VIP bonus point redemption attempts",
    ["outcome"],  # success, rejected
)

discount_amount = Histogram(
    "crm_discount_amount",
    "Discount amount applied when a payment is accepted",
    buckets=[0, 50, 100, 500, 1000, 5000, 10000, 50000],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_customer_registered(tier: str) -> None:
    """Record a newly registered customer."""
    if settings.metrics_enabled:
        customers_registered_total.labels(tier=tier).inc()


def record_purchases_added(tier: str, count: int = 1) -> None:
    """Record purchases added to a customer of the given tier."""
    if settings.metrics_enabled and count > 0:
        purchases_added_total.labels(tier=tier).inc(count)


def record_payment(success: bool, discount: Decimal = Decimal("0")) -> None:
    """Record a payment attempt and, when accepted, its discount."""
    if not settings.metrics_enabled:
        return

    outcome = "success" if success else "rejected"
    payments_total.labels(outcome=outcome).inc()

    if success:
        discount_amount.observe(float(discount))


def record_contract_event(action: str) -> None:
    """Record a contract lifecycle transition."""
    if settings.metrics_enabled:
        contract_events_total.labels(action=action).inc()


def record_bonus_redemption(success: bool) -> None:
    """Record a VIP bonus redemption attempt."""
    if settings.metrics_enabled:
        outcome = "success" if success else "rejected"
        bonus_redemptions_total.labels(outcome=outcome).inc()


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)
