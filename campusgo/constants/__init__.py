"""Shared constants for the application."""

from campusgo.constants.orders import (
    ORDER_TYPES,
    OrderStatus,
    ROLES,
    TRANSITIONS,
    validate_order_type,
)

__all__ = [
    'ORDER_TYPES',
    'OrderStatus',
    'ROLES',
    'TRANSITIONS',
    'validate_order_type',
]
