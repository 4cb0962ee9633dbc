"""
Order lifecycle rules.

Status moves pending -> confirmed -> preparing -> ready -> delivered, with
cancelled reachable from any non-terminal state. Updates are not checked
against that order: any known status can be written over any other.
``next_status`` and ``is_terminal`` only drive display.
"""

from collections import Counter
from collections.abc import Iterable

from apps.common.constants import (
    MAX_INTEGER,
    MIN_DELIVERY_ADDRESS_LENGTH,
    OrderStatus,
    PaymentMethod,
    ServiceType,
)
from apps.common.exceptions import ValidationError
from apps.orders.domain import OrderDraft, OrderLine


def compute_total(items: Iterable[OrderLine]) -> int:
    return sum(line.subtotal for line in items)


def is_terminal(status: str) -> bool:
    return status in OrderStatus.terminal()


def next_status(status: str) -> str | None:
    progression = OrderStatus.progression()
    if status not in progression or is_terminal(status):
        return None
    return progression[progression.index(status) + 1]


def validate_status(status) -> str:
    if not status or not isinstance(status, str):
        raise ValidationError("Status is required", {"status": ["This field is required."]})
    if status not in OrderStatus.values:
        raise ValidationError("Invalid status", {"status": [f'"{status}" is not a valid status.']})
    return status


def validate_order_draft(draft: OrderDraft) -> OrderDraft:
    errors = {}

    if not (draft.customer_name or "").strip():
        errors["customerName"] = ["Customer name is required."]
    if not (draft.customer_phone or "").strip():
        errors["customerPhone"] = ["Customer phone is required."]

    if draft.service_type not in ServiceType.values:
        errors["serviceType"] = ["Choose one of: " + ", ".join(ServiceType.values) + "."]
    elif draft.service_type == ServiceType.DELIVERY:
        address = (draft.customer_address or "").strip()
        if len(address) < MIN_DELIVERY_ADDRESS_LENGTH:
            errors["customerAddress"] = ["A full delivery address is required for delivered orders."]

    if draft.payment_method not in PaymentMethod.values:
        errors["paymentMethod"] = ["Choose one of: " + ", ".join(PaymentMethod.values) + "."]

    if not draft.items:
        errors["items"] = ["Order must contain at least one item."]
    else:
        line_errors = {}
        for index, line in enumerate(draft.items):
            if not (1 <= line.price <= MAX_INTEGER and 1 <= line.quantity <= MAX_INTEGER):
                line_errors[index] = [f"Price and quantity must be between 1 and {MAX_INTEGER}."]
        if line_errors:
            errors["items"] = line_errors
        elif compute_total(draft.items) > MAX_INTEGER:
            errors["totalAmount"] = [f"Total cannot exceed {MAX_INTEGER}."]
        elif draft.total_amount != compute_total(draft.items):
            errors["totalAmount"] = [f"Total does not match items (expected {compute_total(draft.items)})."]

    if errors:
        raise ValidationError("Invalid order data", errors)
    return draft


def count_by_status(orders: Iterable) -> dict:
    counts = Counter(order.status for order in orders)
    return {
        "total": sum(counts.values()),
        **{status: counts.get(status, 0) for status in OrderStatus.values},
    }
