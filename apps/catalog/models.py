# apps/catalog/models.py
from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal

from apps.utils.models import TimestampedModel


class Cake(TimestampedModel):
    """
    A sellable cake.

    NOTE:
    - is_available hides the cake from the storefront and blocks new orders,
      but historical order items keep pointing at it.
    - price is the live price; order items take a snapshot at checkout.
    """
    name = models.CharField(max_length=255)
    description = models.TextField()
    image_url = models.URLField(max_length=500, null=True, blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
        help_text="Customer-facing price",
    )
    category = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Free-text label (e.g. Chocolate, Wedding)",
    )
    is_available = models.BooleanField(default=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["is_available"], name="cake_is_available_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="cake_price_positive",
            )
        ]

    def __str__(self):
        return f"{self.name} ({self.category})"
