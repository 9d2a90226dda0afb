"""
Discount Settings for the customer tier strategies.

This module contains the tier tables and defaults used by the discount
strategies. They can be adjusted via environment variables, e.g. to run a
seasonal promotion without a code change.

Environment variables use the DISCOUNT_ prefix:
    DISCOUNT_WHOLESALE_MINIMUM_ORDER=15000
    DISCOUNT_VIP_BASE_PERCENTAGE=30
    DISCOUNT_STANDARD_TIERS_JSON='[[0,0],[1000,2],[5000,3],[10000,4],[20000,5]]'

Usage:
    from customer_management.domain.discounts.settings import discount_settings

    # Use default settings (loaded from env)
    minimum = discount_settings.wholesale_minimum_order

    # Or create custom settings for testing
    custom = DiscountSettings(vip_base_percentage=30)
"""

import json
from decimal import Decimal
from functools import lru_cache
from typing import List, Tuple

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Tier = Tuple[Decimal, Decimal]


def _parse_tiers(raw: str) -> List[Tier]:
    tiers = json.loads(raw, parse_float=Decimal, parse_int=Decimal)
    return [(tier[0], tier[1]) for tier in tiers]


class DiscountSettings(BaseSettings):
    """
    Configurable parameters for the discount strategies.

    Tier tables are JSON arrays of ``[lower_bound, percent]`` pairs. Each
    lower bound is inclusive and the next bound is the exclusive upper edge.
    All monetary values are in the store currency, percents are 0-100.
    """

    model_config = SettingsConfigDict(
        env_prefix="DISCOUNT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Standard (regular customers) ===
    standard_tiers_json: str = Field(
        default="[[0,0],[1000,2],[5000,3],[10000,4],[20000,5]]",
        description="Standard tiers as JSON array: [[lower_bound, percent], ...]",
    )

    # === Wholesale ===
    wholesale_minimum_order: Decimal = Field(
        default=Decimal("10000"),
        ge=0,
        description="Default minimum order amount below which no wholesale discount applies",
    )
    wholesale_tiers_json: str = Field(
        default="[[0,10],[30000,12],[50000,15],[100000,18],[200000,20]]",
        description="Wholesale tiers applied once the minimum order is met",
    )
    max_payment_deferral_days: int = Field(
        default=30,
        ge=1,
        description="Longest payment deferral a wholesale customer may request",
    )
    wholesale_display_percent: Decimal = Field(
        default=Decimal("10"),
        ge=0,
        le=100,
        description="Discount percent shown for wholesale customers before any calculation",
    )

    # === VIP ===
    vip_base_percentage: Decimal = Field(
        default=Decimal("25"),
        description="Base VIP percent used below the first VIP tier",
    )
    vip_min_base_percentage: Decimal = Field(
        default=Decimal("20"),
        ge=0,
        le=100,
        description="Lower clamp for the configured VIP base percent",
    )
    vip_max_base_percentage: Decimal = Field(
        default=Decimal("35"),
        ge=0,
        le=100,
        description="Upper clamp for the configured VIP base percent",
    )
    vip_tiers_json: str = Field(
        default="[[5000,26],[20000,27],[50000,28],[100000,29],[200000,30]]",
        description="VIP tiers above the base band as JSON array",
    )
    vip_bonus_accrual_rate: Decimal = Field(
        default=Decimal("5"),
        ge=0,
        le=100,
        description="Percent of each purchase credited to VIP bonus points",
    )
    vip_unassigned_manager: str = Field(
        default="Not assigned",
        description="Personal manager label for VIP customers without a manager",
    )

    @field_validator("standard_tiers_json", "wholesale_tiers_json", "vip_tiers_json")
    @classmethod
    def validate_tiers_json(cls, v: str) -> str:
        """Validate that tiers JSON is parseable and well-formed."""
        try:
            tiers = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")

        if not isinstance(tiers, list) or not tiers:
            raise ValueError("Tiers must be a non-empty list")

        previous = None
        for tier in tiers:
            if not isinstance(tier, list) or len(tier) != 2:
                raise ValueError("Each tier must be [lower_bound, percent]")
            lower_bound, percent = tier
            if not all(isinstance(x, (int, float)) for x in tier):
                raise ValueError("Tier values must be numbers")
            if lower_bound < 0:
                raise ValueError(f"lower_bound cannot be negative: {lower_bound}")
            if not 0 <= percent <= 100:
                raise ValueError(f"percent must be within 0-100: {percent}")
            if previous is not None and lower_bound <= previous:
                raise ValueError("Tier lower bounds must be strictly increasing")
            previous = lower_bound
        return v

    @model_validator(mode="after")
    def validate_vip_clamp(self) -> "DiscountSettings":
        if self.vip_min_base_percentage > self.vip_max_base_percentage:
            raise ValueError(
                f"vip_min_base_percentage ({self.vip_min_base_percentage}) > "
                f"vip_max_base_percentage ({self.vip_max_base_percentage})"
            )
        return self

    @property
    def standard_tiers(self) -> List[Tier]:
        """Standard tiers as (lower_bound, percent) pairs."""
        return _parse_tiers(self.standard_tiers_json)

    @property
    def wholesale_tiers(self) -> List[Tier]:
        """Wholesale tiers as (lower_bound, percent) pairs."""
        return _parse_tiers(self.wholesale_tiers_json)

    @property
    def vip_tiers(self) -> List[Tier]:
        """VIP tiers as (lower_bound, percent) pairs."""
        return _parse_tiers(self.vip_tiers_json)


@lru_cache
def get_discount_settings() -> DiscountSettings:
    """Get cached discount settings instance."""
    return DiscountSettings()


discount_settings = get_discount_settings()
