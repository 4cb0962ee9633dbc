from django.db import models

from apps.common.constants import OrderStatus, PaymentMethod, ServiceType
from apps.common.models import BaseModel


class Order(BaseModel):
    customer_name = models.CharField(max_length=150)
    customer_phone = models.CharField(max_length=30)
    customer_address = models.TextField(blank=True, default="")
    service_type = models.CharField(max_length=20, choices=ServiceType.choices)
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices)
    notes = models.TextField(null=True, blank=True)
    items = models.JSONField()  # snapshot: [{id, name, price, quantity}]
    total_amount = models.PositiveIntegerField()
    status = models.CharField(max_length=20, choices=OrderStatus.choices, default=OrderStatus.PENDING)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(fields=["created_at"], name="orders_created_at_idx"),
        ]

    def __str__(self):
        return f"#{self.id} • {self.customer_name}"
