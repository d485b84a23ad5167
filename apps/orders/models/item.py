from django.db import models

from .order import Order

__all__ = ["OrderItem"]


class OrderItem(models.Model):
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='items')
    # PROTECT: a cake referenced by an order cannot be hard-deleted
    cake = models.ForeignKey("catalog.Cake", on_delete=models.PROTECT, related_name='order_items')

    quantity = models.PositiveIntegerField()

    # Snapshot fields, do not follow later cake price changes
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    total_price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(condition=models.Q(quantity__gt=0), name="order_item_quantity_positive"),
        ]

    def __str__(self):
        return f"{self.quantity}x cake {self.cake_id}"
