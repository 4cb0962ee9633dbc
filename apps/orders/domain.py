from dataclasses import dataclass, field
from datetime import datetime

from apps.common.constants import OrderStatus


@dataclass(frozen=True)
class OrderLine:
    id: int | str
    name: str
    price: int
    quantity: int

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity

    def as_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "price": self.price, "quantity": self.quantity}


@dataclass(frozen=True)
class OrderDraft:
    customer_name: str
    customer_phone: str
    service_type: str
    payment_method: str
    items: tuple[OrderLine, ...]
    total_amount: int
    customer_address: str = ""
    notes: str | None = None


@dataclass(frozen=True)
class Order:
    id: int
    customer_name: str
    customer_phone: str
    customer_address: str
    service_type: str
    payment_method: str
    items: tuple[OrderLine, ...]
    total_amount: int
    created_at: datetime
    status: str = OrderStatus.PENDING.value
    notes: str | None = field(default=None)

