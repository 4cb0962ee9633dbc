import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="MenuItem",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=150)),
                ("description", models.TextField()),
                (
                    "price",
                    models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)]),
                ),
                ("category", models.CharField(max_length=60)),
                ("image", models.CharField(max_length=500)),
                ("spicy_level", models.CharField(blank=True, max_length=60, null=True)),
                ("stock_quantity", models.PositiveIntegerField(default=0)),
                (
                    "low_stock_threshold",
                    models.PositiveIntegerField(
                        default=10,
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                ("unit", models.CharField(default="porsi", max_length=30)),
                (
                    "is_available",
                    models.PositiveSmallIntegerField(
                        default=1,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(1),
                        ],
                    ),
                ),
                ("rating", models.IntegerField(default=45)),
                ("review_count", models.IntegerField(default=0)),
            ],
            options={
                "db_table": "menu_items",
                "ordering": ["id"],
                "indexes": [models.Index(fields=["category"], name="menu_items_category_idx")],
            },
        ),
    ]
