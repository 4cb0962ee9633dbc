from dataclasses import dataclass

from apps.common.constants import DEFAULT_RATING, DEFAULT_REVIEW_COUNT, StockStatus
from apps.menus.inventory import get_stock_status


@dataclass(frozen=True)
class MenuItem:
    id: int
    name: str
    description: str
    price: int
    category: str
    image: str
    stock_quantity: int
    low_stock_threshold: int
    unit: str
    is_available: int
    spicy_level: str | None = None
    rating: int = DEFAULT_RATING
    review_count: int = DEFAULT_REVIEW_COUNT

    @property
    def stock_status(self) -> StockStatus:
        return get_stock_status(self)
