"""Order constants: task types, statuses and the allowed transitions.

Must stay in sync with the frontend's order type picker.
"""

ORDER_TYPES = {
    'takeout',
    'express',
    'send',
    'errand',
    'other',
}

# Role of the user being reviewed
ROLES = {'requester', 'runner'}


class OrderStatus:
    PENDING = 'pending'
    ACCEPTED = 'accepted'
    COMPLETED_BY_RUNNER = 'completed_by_runner'
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'

    ALL = {PENDING, ACCEPTED, COMPLETED_BY_RUNNER, CONFIRMED, CANCELLED}
    TERMINAL = {CONFIRMED, CANCELLED}


# target status -> statuses it may be entered from
TRANSITIONS = {
    OrderStatus.ACCEPTED: {OrderStatus.PENDING},
    OrderStatus.COMPLETED_BY_RUNNER: {OrderStatus.ACCEPTED},
    OrderStatus.CONFIRMED: {OrderStatus.COMPLETED_BY_RUNNER},
    OrderStatus.CANCELLED: {OrderStatus.PENDING, OrderStatus.ACCEPTED},
}


def validate_order_type(order_type) -> tuple[str | None, str | None]:
    """Validate and normalize an order type.

    Returns:
        (normalized_key, error_message)
        error_message is None when valid.
    """
    if not isinstance(order_type, str):
        return None, 'Order type is required'
    key = order_type.lower().strip()
    if key not in ORDER_TYPES:
        return key, (
            f"Invalid order type '{order_type}'. "
            f"Valid types: {', '.join(sorted(ORDER_TYPES))}"
        )
    return key, None
