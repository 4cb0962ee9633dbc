from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "pending", "Menunggu"
    CONFIRMED = "confirmed", "Dikonfirmasi"
    PREPARING = "preparing", "Sedang Dimasak"
    READY = "ready", "Siap"
    DELIVERED = "delivered", "Selesai"
    CANCELLED = "cancelled", "Dibatalkan"

    @classmethod
    def progression(cls):
        return [cls.PENDING, cls.CONFIRMED, cls.PREPARING, cls.READY, cls.DELIVERED]

    @classmethod
    def terminal(cls):
        return [cls.DELIVERED, cls.CANCELLED]


class ServiceType(models.TextChoices):
    DELIVERY = "diantar", "Diantar"
    PICKUP = "diambil", "Diambil"
    DINE_IN = "makan ditempat", "Makan ditempat"


class PaymentMethod(models.TextChoices):
    CASH = "cash", "Tunai"
    BANK_TRANSFER = "bank_transfer", "Transfer Bank"
    GOPAY = "gopay", "GoPay"
    OVO = "ovo", "OVO"
    DANA = "dana", "DANA"


class StockStatus(models.TextChoices):
    IN_STOCK = "in-stock", "Tersedia"
    LOW_STOCK = "low-stock", "Stok Menipis"
    OUT_OF_STOCK = "out-of-stock", "Habis"
    UNAVAILABLE = "unavailable", "Tidak Tersedia"


class MenuCategory(models.TextChoices):
    SEBLAK = "seblak", "Seblak"
    PRASMANAN = "prasmanan", "Prasmanan"
    MAKANAN = "makanan", "Makanan"
    MINUMAN = "minuman", "Minuman"
    CEMILAN = "cemilan", "Cemilan"


DEFAULT_RATING = 45
DEFAULT_REVIEW_COUNT = 0
MIN_PHONE_LENGTH = 10
MIN_DELIVERY_ADDRESS_LENGTH = 10
CART_SESSION_KEY = "seblak-cart"

# Upper bound of the integer columns (PositiveIntegerField) amounts and counts are stored in.
MAX_INTEGER = 2_147_483_647
# Upper bound of BigAutoField primary keys.
MAX_ROW_ID = 2**63 - 1
# Filter value the dashboards send for "no filter".
ALL_FILTER = "all"
