from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("customer_name", models.CharField(max_length=150)),
                ("customer_phone", models.CharField(max_length=30)),
                ("customer_address", models.TextField(blank=True, default="")),
                (
                    "service_type",
                    models.CharField(
                        choices=[("diantar", "Diantar"), ("diambil", "Diambil"), ("makan ditempat", "Makan ditempat")],
                        max_length=20,
                    ),
                ),
                (
                    "payment_method",
                    models.CharField(
                        choices=[
                            ("cash", "Tunai"),
                            ("bank_transfer", "Transfer Bank"),
                            ("gopay", "GoPay"),
                            ("ovo", "OVO"),
                            ("dana", "DANA"),
                        ],
                        max_length=20,
                    ),
                ),
                ("notes", models.TextField(blank=True, null=True)),
                ("items", models.JSONField()),
                ("total_amount", models.PositiveIntegerField()),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Menunggu"),
                            ("confirmed", "Dikonfirmasi"),
                            ("preparing", "Sedang Dimasak"),
                            ("ready", "Siap"),
                            ("delivered", "Selesai"),
                            ("cancelled", "Dibatalkan"),
                        ],
                        default="pending",
                        max_length=20,
                    ),
                ),
            ],
            options={
                "db_table": "orders",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["status"], name="orders_status_idx"),
                    models.Index(fields=["created_at"], name="orders_created_at_idx"),
                ],
            },
        ),
    ]
