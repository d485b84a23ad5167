# apps/orders/tests.py
from decimal import Decimal
from unittest import mock

from django.db import DatabaseError
from django.test import TestCase
from django.urls import reverse

from rest_framework.test import APITestCase, APIClient
from rest_framework import status

from apps.catalog.models import Cake
from apps.utils.exceptions import (
    BusinessLogicException,
    NotFoundError,
    ReferencedEntityNotFoundError,
    EntityUnavailableError,
)
from .models import Order, OrderItem
from .services import OrderService


CUSTOMER = {
    "customer_name": "Jane Doe",
    "customer_email": "jane@example.com",
    "customer_phone": "555-1234",
    "delivery_address": "12 Flour Lane",
}


class OrderServiceTests(TestCase):
    def setUp(self):
        self.choc = Cake.objects.create(
            name="Choc", description="Chocolate", price=Decimal("25.99"), category="Chocolate"
        )
        self.lemon = Cake.objects.create(
            name="Lemon", description="Lemon drizzle", price=Decimal("22.50"), category="Fruit"
        )
        self.retired = Cake.objects.create(
            name="Retired", description="Gone", price=Decimal("10.00"),
            category="Classic", is_available=False,
        )

    def test_create_order_computes_totals(self):
        order = OrderService.create_order(
            **CUSTOMER,
            items=[
                {"cake_id": self.choc.id, "quantity": 1},
                {"cake_id": self.lemon.id, "quantity": 3},
            ],
        )

        self.assertEqual(order.total_amount, Decimal("93.49"))
        self.assertEqual(order.status, Order.Status.PENDING)

        items = list(order.items.all())
        self.assertEqual(len(items), 2)
        lemon_line = next(i for i in items if i.cake_id == self.lemon.id)
        self.assertEqual(lemon_line.unit_price, Decimal("22.50"))
        self.assertEqual(lemon_line.total_price, Decimal("67.50"))
        self.assertEqual(sum(i.total_price for i in items), order.total_amount)

    def test_repeated_cake_lines_are_kept_separately(self):
        order = OrderService.create_order(
            **CUSTOMER,
            items=[
                {"cake_id": self.choc.id, "quantity": 1},
                {"cake_id": self.choc.id, "quantity": 2},
            ],
        )
        self.assertEqual(order.items.count(), 2)
        self.assertEqual(order.total_amount, Decimal("77.97"))

    def test_unknown_cake_aborts_without_writes(self):
        with self.assertRaises(ReferencedEntityNotFoundError):
            OrderService.create_order(
                **CUSTOMER,
                items=[
                    {"cake_id": self.choc.id, "quantity": 1},
                    {"cake_id": 999, "quantity": 1},
                ],
            )
        self.assertEqual(Order.objects.count(), 0)
        self.assertEqual(OrderItem.objects.count(), 0)

    def test_unavailable_cake_aborts_without_writes(self):
        with self.assertRaises(EntityUnavailableError):
            OrderService.create_order(
                **CUSTOMER,
                items=[{"cake_id": self.retired.id, "quantity": 1}],
            )
        self.assertEqual(Order.objects.count(), 0)
        self.assertEqual(OrderItem.objects.count(), 0)

    def test_failed_item_write_rolls_back_header(self):
        with mock.patch.object(OrderItem.objects, "bulk_create", side_effect=DatabaseError("boom")):
            with self.assertRaises(DatabaseError):
                OrderService.create_order(
                    **CUSTOMER,
                    items=[{"cake_id": self.choc.id, "quantity": 1}],
                )
        self.assertEqual(Order.objects.count(), 0)

    def test_unit_price_is_a_snapshot(self):
        order = OrderService.create_order(
            **CUSTOMER,
            items=[{"cake_id": self.choc.id, "quantity": 2}],
        )
        self.choc.price = Decimal("40.00")
        self.choc.save()

        fetched = OrderService.get_order(order.id)
        item = fetched.items.get()
        self.assertEqual(item.unit_price, Decimal("25.99"))
        self.assertEqual(fetched.total_amount, Decimal("51.98"))

    def test_amounts_beyond_money_column_are_rejected(self):
        pricey = Cake.objects.create(
            name="Palace", description="Gold leaf", price=Decimal("60000000.00"), category="Luxury"
        )
        line_overflow = [{"cake_id": pricey.id, "quantity": 2}]
        total_overflow = [
            {"cake_id": pricey.id, "quantity": 1},
            {"cake_id": pricey.id, "quantity": 1},
        ]
        for items in (line_overflow, total_overflow, [{"cake_id": self.choc.id, "quantity": 10**7}]):
            with self.assertRaises(BusinessLogicException) as ctx:
                OrderService.create_order(**CUSTOMER, items=items)
            self.assertEqual(ctx.exception.code, "validation_error")

        self.assertEqual(Order.objects.count(), 0)
        self.assertEqual(OrderItem.objects.count(), 0)

    def test_out_of_range_cake_id_is_unknown_cake(self):
        for cake_id in (2**70, 0, -1):
            with self.assertRaises(ReferencedEntityNotFoundError):
                OrderService.create_order(**CUSTOMER, items=[{"cake_id": cake_id, "quantity": 1}])
        self.assertEqual(Order.objects.count(), 0)

    def test_update_status_allows_any_transition(self):
        order = OrderService.create_order(
            **CUSTOMER,
            items=[{"cake_id": self.choc.id, "quantity": 1}],
        )
        OrderService.update_status(order.id, Order.Status.DELIVERED)
        updated = OrderService.update_status(order.id, Order.Status.PENDING)
        self.assertEqual(updated.status, Order.Status.PENDING)

    def test_update_status_missing_order(self):
        with self.assertRaises(NotFoundError):
            OrderService.update_status(999, Order.Status.CONFIRMED)

    def test_get_order_missing_returns_none(self):
        self.assertIsNone(OrderService.get_order(999))


class OrderAPITests(APITestCase):
    def setUp(self):
        self.client = APIClient()
        self.choc = Cake.objects.create(
            name="Choc", description="Chocolate", price=Decimal("25.99"), category="Chocolate"
        )
        self.lemon = Cake.objects.create(
            name="Lemon", description="Lemon drizzle", price=Decimal("22.50"), category="Fruit"
        )
        self.retired = Cake.objects.create(
            name="Retired", description="Gone", price=Decimal("10.00"),
            category="Classic", is_available=False,
        )

    def _payload(self, items, **extra):
        payload = {**CUSTOMER, "notes": None, "items": items}
        payload.update(extra)
        return payload

    def test_create_order(self):
        payload = self._payload([
            {"cake_id": self.choc.id, "quantity": 1},
            {"cake_id": self.lemon.id, "quantity": 3},
        ], notes="Ring the bell")
        resp = self.client.post(reverse("order-list"), payload, format="json")

        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        body = resp.json()
        self.assertEqual(body["total_amount"], 93.49)
        self.assertEqual(body["status"], "pending")
        self.assertEqual(body["notes"], "Ring the bell")
        self.assertEqual(len(body["items"]), 2)

        by_cake = {i["cake_id"]: i for i in body["items"]}
        self.assertEqual(by_cake[self.choc.id]["cake_name"], "Choc")
        self.assertEqual(by_cake[self.choc.id]["unit_price"], 25.99)
        self.assertEqual(by_cake[self.lemon.id]["quantity"], 3)
        self.assertEqual(by_cake[self.lemon.id]["total_price"], 67.5)

    def test_create_order_unknown_cake(self):
        payload = self._payload([{"cake_id": 999, "quantity": 1}])
        resp = self.client.post(reverse("order-list"), payload, format="json")

        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.json()["code"], "referenced_entity_not_found")
        self.assertEqual(Order.objects.count(), 0)

    def test_create_order_unavailable_cake(self):
        payload = self._payload([
            {"cake_id": self.choc.id, "quantity": 1},
            {"cake_id": self.retired.id, "quantity": 1},
        ])
        resp = self.client.post(reverse("order-list"), payload, format="json")

        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(resp.json()["code"], "entity_unavailable")
        self.assertEqual(Order.objects.count(), 0)
        self.assertEqual(OrderItem.objects.count(), 0)

    def test_create_order_validation(self):
        bad_payloads = [
            self._payload([]),
            self._payload([{"cake_id": self.choc.id, "quantity": 0}]),
            self._payload([{"cake_id": self.choc.id, "quantity": 1}], customer_email="not-an-email"),
            self._payload([{"cake_id": self.choc.id, "quantity": 1}], delivery_address=""),
        ]
        for payload in bad_payloads:
            resp = self.client.post(reverse("order-list"), payload, format="json")
            self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(resp.json()["code"], "validation_error")

        self.assertEqual(Order.objects.count(), 0)

    def test_client_supplied_prices_are_ignored(self):
        payload = self._payload([{"cake_id": self.choc.id, "quantity": 1}], total_amount=1)
        resp = self.client.post(reverse("order-list"), payload, format="json")

        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.json()["total_amount"], 25.99)

    def test_list_orders_includes_items_and_empty_orders(self):
        OrderService.create_order(**CUSTOMER, items=[{"cake_id": self.choc.id, "quantity": 2}])
        Order.objects.create(**CUSTOMER, total_amount=Decimal("0.00"))

        resp = self.client.get(reverse("order-list"))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        body = resp.json()
        self.assertEqual(len(body), 2)

        item_counts = sorted(len(o["items"]) for o in body)
        self.assertEqual(item_counts, [0, 1])

    def test_get_order(self):
        order = OrderService.create_order(**CUSTOMER, items=[{"cake_id": self.lemon.id, "quantity": 1}])

        resp = self.client.get(reverse("order-detail", kwargs={"pk": order.id}))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json()["items"][0]["cake_name"], "Lemon")

    def test_get_missing_order_is_404(self):
        resp = self.client.get(reverse("order-detail", kwargs={"pk": 999}))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_status(self):
        order = OrderService.create_order(**CUSTOMER, items=[{"cake_id": self.choc.id, "quantity": 1}])

        url = reverse("order-update-status", kwargs={"pk": order.id})
        resp = self.client.patch(url, {"status": "preparing"}, format="json")

        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json()["status"], "preparing")
        order.refresh_from_db()
        self.assertEqual(order.status, Order.Status.PREPARING)

    def test_update_status_rejects_unknown_value(self):
        order = OrderService.create_order(**CUSTOMER, items=[{"cake_id": self.choc.id, "quantity": 1}])

        url = reverse("order-update-status", kwargs={"pk": order.id})
        resp = self.client.patch(url, {"status": "shipped"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_status_missing_order_is_404(self):
        url = reverse("order-update-status", kwargs={"pk": 999})
        resp = self.client.patch(url, {"status": "confirmed"}, format="json")

        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.json()["code"], "not_found")

    def test_create_order_rejects_oversized_quantity(self):
        for quantity in (1001, 10**7, 2**64):
            payload = self._payload([{"cake_id": self.choc.id, "quantity": quantity}])
            resp = self.client.post(reverse("order-list"), payload, format="json")

            self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(resp.json()["code"], "validation_error")

        self.assertEqual(Order.objects.count(), 0)

    def test_create_order_rejects_total_beyond_money_column(self):
        pricey = Cake.objects.create(
            name="Palace", description="Gold leaf", price=Decimal("60000000.00"), category="Luxury"
        )
        payload = self._payload([
            {"cake_id": pricey.id, "quantity": 1},
            {"cake_id": pricey.id, "quantity": 1},
        ])
        resp = self.client.post(reverse("order-list"), payload, format="json")

        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.json()["code"], "validation_error")
        self.assertEqual(Order.objects.count(), 0)
        self.assertEqual(OrderItem.objects.count(), 0)

    def test_create_order_with_huge_cake_id(self):
        payload = self._payload([{"cake_id": 2**70, "quantity": 1}])
        resp = self.client.post(reverse("order-list"), payload, format="json")

        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.json()["code"], "referenced_entity_not_found")
        self.assertEqual(Order.objects.count(), 0)
