from abc import ABC, abstractmethod

from apps.common.constants import DEFAULT_RATING, DEFAULT_REVIEW_COUNT, MAX_INTEGER
from apps.common.exceptions import ValidationError
from apps.menus.domain import MenuItem
from apps.menus.inventory import validate_availability, validate_stock_values
from apps.orders.domain import Order, OrderDraft


class StorageProvider(ABC):
    """
    Persistence contract shared by every backend.

    Lookups and mutations that target an unknown id raise ``NotFoundError``,
    invalid values raise ``ValidationError`` before anything is written, and
    failures of the backend itself raise ``ProviderError``. Each mutation
    touches exactly one entity.
    """

    name = "abstract"

    # --- Menu items ---
    @abstractmethod
    def get_all_menu_items(self) -> list[MenuItem]: ...

    @abstractmethod
    def get_menu_items_by_category(self, category: str) -> list[MenuItem]: ...

    @abstractmethod
    def get_menu_item(self, item_id: int) -> MenuItem: ...

    @abstractmethod
    def create_menu_item(self, data: dict) -> MenuItem: ...

    @abstractmethod
    def update_menu_item_stock(self, item_id: int, stock_quantity: int, low_stock_threshold: int) -> MenuItem: ...

    @abstractmethod
    def update_menu_item_availability(self, item_id: int, is_available: int) -> MenuItem: ...

    # --- Orders ---
    @abstractmethod
    def create_order(self, draft: OrderDraft) -> Order: ...

    @abstractmethod
    def get_order(self, order_id: int) -> Order: ...

    @abstractmethod
    def get_all_orders(self) -> list[Order]:
        """Newest first."""

    @abstractmethod
    def update_order_status(self, order_id: int, status: str) -> Order: ...


def prepare_menu_item(data: dict) -> dict:
    """Fill defaults for a new menu item and check its stock invariants."""
    values = {
        "spicy_level": None,
        "stock_quantity": 0,
        "low_stock_threshold": 10,
        "unit": "porsi",
        "is_available": 1,
        "rating": DEFAULT_RATING,
        "review_count": DEFAULT_REVIEW_COUNT,
        **{key: value for key, value in data.items() if key != "id"},
    }
    if values.get("rating") is None:
        values["rating"] = DEFAULT_RATING
    if values.get("review_count") is None:
        values["review_count"] = DEFAULT_REVIEW_COUNT

    price = values.get("price", 0)
    if price < 1 or price > MAX_INTEGER:
        raise ValidationError("Invalid menu item data", {"price": [f"Price must be between 1 and {MAX_INTEGER}."]})
    for column, api_name in (("rating", "rating"), ("review_count", "reviewCount")):
        if not 0 <= values[column] <= MAX_INTEGER:
            raise ValidationError("Invalid menu item data", {api_name: [f"Must be between 0 and {MAX_INTEGER}."]})
    validate_stock_values(values["stock_quantity"], values["low_stock_threshold"])
    validate_availability(values["is_available"])
    return values
