from django.contrib import admin
from unfold.admin import ModelAdmin

from apps.common.constants import StockStatus
from apps.common.utils import format_rupiah
from apps.menus.inventory import get_stock_status
from apps.menus.models import MenuItem

# Staff only restock and toggle items here; new items come in through the inventory API.
EDITABLE_FIELDS = ("stock_quantity", "low_stock_threshold", "is_available")


@admin.register(MenuItem)
class MenuItemAdmin(ModelAdmin):
    list_display = ("name", "category", "display_price", "stock_quantity", "low_stock_threshold", "stock_status")
    list_filter = ("category", "is_available")
    search_fields = ("name", "category")

    def get_readonly_fields(self, request, obj=None):
        return [field.name for field in MenuItem._meta.fields if field.name not in ("id", *EDITABLE_FIELDS)]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def display_price(self, obj):
        return format_rupiah(obj.price)

    display_price.short_description = "Price"
    display_price.admin_order_field = "price"

    def stock_status(self, obj):
        return StockStatus(get_stock_status(obj)).label

    stock_status.short_description = "Stock"
