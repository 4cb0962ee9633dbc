from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.common.constants import DEFAULT_RATING, DEFAULT_REVIEW_COUNT
from apps.common.models import BaseModel


class MenuItem(BaseModel):
    name = models.CharField(max_length=150)
    description = models.TextField()
    price = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    category = models.CharField(max_length=60)
    image = models.CharField(max_length=500)
    spicy_level = models.CharField(max_length=60, null=True, blank=True)
    stock_quantity = models.PositiveIntegerField(default=0)
    low_stock_threshold = models.PositiveIntegerField(default=10, validators=[MinValueValidator(1)])
    unit = models.CharField(max_length=30, default="porsi")
    is_available = models.PositiveSmallIntegerField(
        default=1,
        validators=[MinValueValidator(0), MaxValueValidator(1)],
    )
    rating = models.IntegerField(default=DEFAULT_RATING)
    review_count = models.IntegerField(default=DEFAULT_REVIEW_COUNT)

    class Meta:
        db_table = "menu_items"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["category"], name="menu_items_category_idx"),
        ]

    def __str__(self):
        return self.name
