import logging

from apps.cart.cart import Cart
from apps.orders.domain import Order, OrderDraft

logger = logging.getLogger(__name__)


def checkout(cart: Cart, storage, customer: dict) -> Order:
    """
    Turn the cart into an order.

    ``customer`` holds the snake_case contact fields (customer_name,
    customer_phone, customer_address, service_type, payment_method, notes).
    The cart is only cleared once the provider has accepted the order, so a
    rejected checkout leaves the selection intact.
    """
    draft = OrderDraft(
        customer_name=customer.get("customer_name", ""),
        customer_phone=customer.get("customer_phone", ""),
        customer_address=customer.get("customer_address") or "",
        service_type=customer.get("service_type", ""),
        payment_method=customer.get("payment_method", ""),
        notes=customer.get("notes") or None,
        items=cart.to_order_lines(),
        total_amount=cart.get_total_price(),
    )
    order = storage.create_order(draft)
    cart.clear_cart()
    cart.close_cart()
    logger.info(f"Checkout produced order {order.id} with {len(order.items)} line(s)")
    return order
