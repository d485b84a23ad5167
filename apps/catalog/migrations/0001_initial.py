# apps/catalog/migrations/0001_initial.py

import django.core.validators
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Cake",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("image_url", models.URLField(blank=True, max_length=500, null=True)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Customer-facing price",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.01"))],
                    ),
                ),
                (
                    "category",
                    models.CharField(
                        db_index=True,
                        help_text="Free-text label (e.g. Chocolate, Wedding)",
                        max_length=100,
                    ),
                ),
                ("is_available", models.BooleanField(default=True)),
            ],
            options={
                "ordering": ["id"],
                "indexes": [models.Index(fields=["is_available"], name="cake_is_available_idx")],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("price__gt", 0)), name="cake_price_positive")
                ],
            },
        ),
    ]
