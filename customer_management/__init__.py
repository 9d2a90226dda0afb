"""
Customer Management - Customer Tiers, Contracts & Discounts

A domain core for managing regular, wholesale and VIP customers,
their contracts, purchases, tier discounts and payments.
"""

__version__ = "0.1.0"
