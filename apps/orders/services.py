import logging
from decimal import Decimal

from django.db import transaction

from apps.catalog.models import Cake
from apps.utils.exceptions import (
    BusinessLogicException,
    NotFoundError,
    ReferencedEntityNotFoundError,
    EntityUnavailableError,
)
from .models import Order, OrderItem

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
# Largest value a DecimalField(max_digits=10, decimal_places=2) can hold
MAX_AMOUNT = Decimal("99999999.99")
# BigAutoField upper bound; larger ids can never resolve to a cake
MAX_CAKE_ID = 2**63 - 1


def _with_items(queryset):
    # cake name is joined at read time, never stored on the item
    return queryset.prefetch_related("items__cake")


class OrderService:

    @staticmethod
    def price_items(items: list, cakes: dict) -> tuple:
        """
        Resolve every line against the fetched cakes and price it.

        Returns (priced_lines, total_amount). Raises on the first line whose
        cake is missing or unavailable, in request order, and when a line or
        the order total does not fit the stored money columns.
        """
        priced = []
        total_amount = Decimal("0.00")

        for item in items:
            cake_id = item["cake_id"]
            qty = item["quantity"]

            cake = cakes.get(cake_id)
            if cake is None:
                raise ReferencedEntityNotFoundError(f"Cake with ID {cake_id} not found")
            if not cake.is_available:
                raise EntityUnavailableError(f'Cake "{cake.name}" is not available')

            unit_price = cake.price
            line_total = (unit_price * qty).quantize(CENT)
            if line_total > MAX_AMOUNT:
                raise BusinessLogicException(
                    f"Line total for cake {cake_id} exceeds {MAX_AMOUNT}", code="validation_error"
                )
            total_amount += line_total

            priced.append({
                "cake": cake,
                "quantity": qty,
                "unit_price": unit_price,
                "total_price": line_total,
            })

        if total_amount > MAX_AMOUNT:
            raise BusinessLogicException(
                f"Order total exceeds {MAX_AMOUNT}", code="validation_error"
            )

        return priced, total_amount

    @staticmethod
    def create_order(
        customer_name: str,
        customer_email: str,
        customer_phone: str,
        delivery_address: str,
        items: list,
        notes: str | None = None,
    ) -> Order:
        """
        1. Batch-fetch the referenced cakes
        2. Validate and price every line (server-side prices only)
        3. Write header + items in one transaction
        """
        with transaction.atomic():
            cake_ids = {item["cake_id"] for item in items if 0 < item["cake_id"] <= MAX_CAKE_ID}
            cakes = Cake.objects.in_bulk(cake_ids)

            try:
                priced, total_amount = OrderService.price_items(items, cakes)
            except BusinessLogicException as e:
                logger.warning(f"Order rejected: {e.message}")
                raise

            order = Order.objects.create(
                customer_name=customer_name,
                customer_email=customer_email,
                customer_phone=customer_phone,
                delivery_address=delivery_address,
                notes=notes,
                total_amount=total_amount,
                status=Order.Status.PENDING,
            )

            OrderItem.objects.bulk_create([
                OrderItem(
                    order=order,
                    cake=line["cake"],
                    quantity=line["quantity"],
                    unit_price=line["unit_price"],
                    total_price=line["total_price"],
                ) for line in priced
            ])

        logger.info(
            f"Order {order.pk} created with {len(priced)} item(s), total {total_amount}",
            extra={"order_id": order.pk},
        )
        return _with_items(Order.objects.all()).get(pk=order.pk)

    @staticmethod
    def list_orders():
        return _with_items(Order.objects.all())

    @staticmethod
    def get_order(order_id):
        return _with_items(Order.objects.filter(pk=order_id)).first()

    @staticmethod
    @transaction.atomic
    def update_status(order_id, new_status: str) -> Order:
        """
        Any status may follow any other; no transition graph is enforced.
        """
        order = Order.objects.select_for_update().filter(pk=order_id).first()
        if order is None:
            raise NotFoundError(f"Order with id {order_id} not found")

        previous = order.status
        order.status = new_status
        order.save(update_fields=["status", "updated_at"])

        logger.info(
            f"Order {order.pk} status {previous} -> {new_status}",
            extra={"order_id": order.pk},
        )
        return _with_items(Order.objects.all()).get(pk=order.pk)
