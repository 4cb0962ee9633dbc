from django.contrib import admin
from unfold.admin import ModelAdmin

from apps.common.utils import format_phone_number, format_rupiah
from apps.orders.models import Order


@admin.register(Order)
class OrderAdmin(ModelAdmin):
    list_display = ("id", "customer_name", "phone", "service_type", "payment_method", "status", "total", "created_at")
    list_filter = ("status", "service_type", "payment_method", "created_at")
    search_fields = ("customer_name", "customer_phone")
    readonly_fields = (
        "customer_name",
        "customer_phone",
        "customer_address",
        "service_type",
        "payment_method",
        "notes",
        "items",
        "total_amount",
        "created_at",
        "updated_at",
    )

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def phone(self, obj):
        return format_phone_number(obj.customer_phone)

    phone.short_description = "Phone"

    def total(self, obj):
        return format_rupiah(obj.total_amount)

    total.short_description = "Total"
    total.admin_order_field = "total_amount"
