from dataclasses import asdict, dataclass

from apps.common.constants import CART_SESSION_KEY
from apps.orders.domain import OrderLine


@dataclass
class CartItem:
    id: str
    name: str
    price: int
    image: str
    quantity: int = 1

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity


class Cart:
    """
    A customer's in-progress selection.

    The cart is optimistic: adding an item never checks or reserves stock.
    Entries are keyed by the string form of the menu item id, so the same
    item is never listed twice.
    """

    def __init__(self, items=None, is_open: bool = False):
        self._items: dict[str, CartItem] = {}
        for item in items or []:
            self._items[item.id] = item
        self.is_open = is_open

    @property
    def items(self) -> list[CartItem]:
        return list(self._items.values())

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self.items)

    def __contains__(self, item_id):
        return str(item_id) in self._items

    def get(self, item_id) -> CartItem | None:
        return self._items.get(str(item_id))

    def add_item(self, item) -> CartItem:
        """Accepts anything with ``id``, ``name``, ``price`` and ``image`` (e.g. a MenuItem)."""
        item_id = str(item.id)
        existing = self._items.get(item_id)
        if existing:
            existing.quantity += 1
            return existing

        entry = CartItem(id=item_id, name=item.name, price=item.price, image=item.image)
        self._items[item_id] = entry
        return entry

    def remove_item(self, item_id) -> None:
        self._items.pop(str(item_id), None)

    def update_quantity(self, item_id, quantity: int) -> None:
        if quantity <= 0:
            self.remove_item(item_id)
            return

        entry = self._items.get(str(item_id))
        if entry:
            entry.quantity = quantity

    def clear_cart(self) -> None:
        self._items.clear()

    def open_cart(self) -> None:
        self.is_open = True

    def close_cart(self) -> None:
        self.is_open = False

    def get_total_items(self) -> int:
        return sum(entry.quantity for entry in self._items.values())

    def get_total_price(self) -> int:
        return sum(entry.subtotal for entry in self._items.values())

    def to_order_lines(self) -> tuple[OrderLine, ...]:
        return tuple(
            OrderLine(id=entry.id, name=entry.name, price=entry.price, quantity=entry.quantity)
            for entry in self._items.values()
        )

    # --- Session persistence ---
    @classmethod
    def from_session(cls, session) -> "Cart":
        state = session.get(CART_SESSION_KEY) or {}
        items = [CartItem(**data) for data in state.get("items", [])]
        return cls(items=items, is_open=state.get("isOpen", False))

    def save(self, session) -> None:
        session[CART_SESSION_KEY] = {
            "items": [asdict(entry) for entry in self._items.values()],
            "isOpen": self.is_open,
        }
        session.modified = True
