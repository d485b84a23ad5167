# apps/catalog/tests.py
from datetime import timedelta
from decimal import Decimal
from io import StringIO

from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from rest_framework.test import APITestCase, APIClient
from rest_framework import status

from apps.orders.models import Order, OrderItem
from apps.utils.exceptions import NotFoundError
from .models import Cake
from .services import CakeService


def make_cake(**overrides):
    data = {
        "name": "Chocolate Fudge",
        "description": "Rich chocolate layers",
        "price": Decimal("25.99"),
        "category": "Chocolate",
        "is_available": True,
    }
    data.update(overrides)
    return Cake.objects.create(**data)


class CakeServiceTests(TestCase):
    def test_empty_store_returns_empty_lists(self):
        self.assertEqual(list(CakeService.list_cakes()), [])
        self.assertEqual(list(CakeService.list_available_cakes()), [])
        self.assertEqual(CakeService.list_categories(), [])

    def test_get_cake_returns_none_when_missing(self):
        self.assertIsNone(CakeService.get_cake(999))

    def test_categories_distinct_sorted_and_include_unavailable(self):
        make_cake(category="Fruit")
        make_cake(category="Chocolate")
        make_cake(category="Chocolate")
        make_cake(category="Birthday", is_available=False)

        self.assertEqual(CakeService.list_categories(), ["Birthday", "Chocolate", "Fruit"])

    def test_category_match_is_exact_and_case_sensitive(self):
        choc = make_cake(category="Chocolate")
        make_cake(category="chocolate")
        make_cake(category="Chocolate Mousse")

        result = list(CakeService.list_cakes_by_category("Chocolate"))
        self.assertEqual(result, [choc])

    def test_update_missing_cake_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            CakeService.update_cake(999, {"name": "Ghost"})

    def test_delete_missing_cake_is_noop(self):
        make_cake()
        CakeService.delete_cake(999)
        self.assertEqual(Cake.objects.count(), 1)


class CakeViewSetTests(APITestCase):
    def setUp(self):
        self.client = APIClient()
        self.available = make_cake(name="Red Velvet", category="Classic", price=Decimal("30.00"))
        self.hidden = make_cake(name="Old Sponge", category="Classic", is_available=False)

    def test_create_cake_returns_exact_price_and_timestamps(self):
        payload = {
            "name": "Choc",
            "description": "Dark chocolate cake",
            "price": 25.99,
            "category": "Chocolate",
            "is_available": True,
        }
        resp = self.client.post(reverse("cake-list"), payload, format="json")

        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        body = resp.json()
        self.assertEqual(body["price"], 25.99)
        self.assertIsNotNone(body["id"])
        self.assertIsNotNone(body["created_at"])
        self.assertIsNotNone(body["updated_at"])
        self.assertIsNone(body["image_url"])

        stored = Cake.objects.get(pk=body["id"])
        self.assertEqual(stored.price, Decimal("25.99"))

    def test_create_cake_defaults_to_available(self):
        payload = {"name": "Plain", "description": "Vanilla", "price": "12.50", "category": "Classic"}
        resp = self.client.post(reverse("cake-list"), payload, format="json")

        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertTrue(resp.json()["is_available"])

    def test_create_cake_rejects_non_positive_price(self):
        for price in (0, -5):
            payload = {"name": "Bad", "description": "Bad price", "price": price, "category": "Classic"}
            resp = self.client.post(reverse("cake-list"), payload, format="json")
            self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(resp.json()["code"], "validation_error")
            self.assertIn("price", resp.json()["error"])

        self.assertEqual(Cake.objects.count(), 2)

    def test_create_cake_rejects_empty_required_text(self):
        payload = {"name": "  ", "description": "", "price": 10, "category": "Classic"}
        resp = self.client.post(reverse("cake-list"), payload, format="json")

        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        errors = resp.json()["error"]
        self.assertIn("name", errors)
        self.assertIn("description", errors)

    def test_list_returns_all_cakes(self):
        resp = self.client.get(reverse("cake-list"))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        names = [c["name"] for c in resp.json()]
        self.assertEqual(names, ["Red Velvet", "Old Sponge"])

    def test_available_lists_only_available_cakes(self):
        resp = self.client.get(reverse("cake-available"))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        ids = [c["id"] for c in resp.json()]
        self.assertIn(self.available.id, ids)
        self.assertNotIn(self.hidden.id, ids)

    def test_filter_by_category(self):
        make_cake(name="Lemon Drizzle", category="Fruit")

        resp = self.client.get(reverse("cake-list"), {"category": "Fruit"})
        self.assertEqual([c["name"] for c in resp.json()], ["Lemon Drizzle"])

        resp = self.client.get(reverse("cake-list"), {"category": "fruit"})
        self.assertEqual(resp.json(), [])

    def test_categories_endpoint(self):
        make_cake(category="Fruit")
        resp = self.client.get(reverse("cake-categories"))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json(), ["Classic", "Fruit"])

    def test_get_cake(self):
        resp = self.client.get(reverse("cake-detail", kwargs={"pk": self.available.pk}))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json()["name"], "Red Velvet")
        self.assertEqual(resp.json()["price"], 30.0)

    def test_get_missing_cake_is_404(self):
        resp = self.client.get(reverse("cake-detail", kwargs={"pk": 999}))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.json()["code"], "not_found")

    def test_partial_update_leaves_other_fields_unchanged(self):
        url = reverse("cake-detail", kwargs={"pk": self.available.pk})
        resp = self.client.patch(url, {"price": 35.5}, format="json")

        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.available.refresh_from_db()
        self.assertEqual(self.available.price, Decimal("35.50"))
        self.assertEqual(self.available.name, "Red Velvet")
        self.assertEqual(self.available.category, "Classic")
        self.assertTrue(self.available.is_available)

    def test_partial_update_can_clear_image_and_toggle_availability(self):
        self.available.image_url = "https://example.com/cake.jpg"
        self.available.save()

        url = reverse("cake-detail", kwargs={"pk": self.available.pk})
        resp = self.client.patch(url, {"image_url": None, "is_available": False}, format="json")

        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.available.refresh_from_db()
        self.assertIsNone(self.available.image_url)
        self.assertFalse(self.available.is_available)

    def test_update_refreshes_updated_at(self):
        past = timezone.now() - timedelta(days=1)
        Cake.objects.filter(pk=self.available.pk).update(updated_at=past)

        url = reverse("cake-detail", kwargs={"pk": self.available.pk})
        self.client.patch(url, {"name": "Red Velvet Deluxe"}, format="json")

        self.available.refresh_from_db()
        self.assertGreater(self.available.updated_at, past)

    def test_update_rejects_non_positive_price(self):
        url = reverse("cake-detail", kwargs={"pk": self.available.pk})
        resp = self.client.patch(url, {"price": 0}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_missing_cake_is_404(self):
        url = reverse("cake-detail", kwargs={"pk": 999})
        resp = self.client.patch(url, {"name": "Ghost"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.json()["code"], "not_found")

    def test_put_is_not_allowed(self):
        url = reverse("cake-detail", kwargs={"pk": self.available.pk})
        resp = self.client.put(url, {"name": "Whole"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)

    def test_delete_cake(self):
        url = reverse("cake-detail", kwargs={"pk": self.hidden.pk})
        resp = self.client.delete(url)
        self.assertEqual(resp.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Cake.objects.filter(pk=self.hidden.pk).exists())
        self.assertTrue(Cake.objects.filter(pk=self.available.pk).exists())

    def test_delete_missing_cake_succeeds(self):
        resp = self.client.delete(reverse("cake-detail", kwargs={"pk": 999}))
        self.assertEqual(resp.status_code, status.HTTP_204_NO_CONTENT)

    def test_delete_cake_referenced_by_order_is_conflict(self):
        order = Order.objects.create(
            customer_name="Ann",
            customer_email="ann@example.com",
            customer_phone="555-0100",
            delivery_address="1 Baker St",
            total_amount=Decimal("30.00"),
        )
        OrderItem.objects.create(
            order=order,
            cake=self.available,
            quantity=1,
            unit_price=Decimal("30.00"),
            total_price=Decimal("30.00"),
        )

        resp = self.client.delete(reverse("cake-detail", kwargs={"pk": self.available.pk}))
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(resp.json()["code"], "conflict")
        self.assertTrue(Cake.objects.filter(pk=self.available.pk).exists())


class SeedCakesCommandTests(TestCase):
    def test_seed_is_idempotent(self):
        out = StringIO()
        call_command("seed_cakes", stdout=out)
        count = Cake.objects.count()
        self.assertGreater(count, 0)

        call_command("seed_cakes", stdout=out)
        self.assertEqual(Cake.objects.count(), count)
        self.assertIn("Seeded 0 new cake(s)", out.getvalue())

    def test_reset_keeps_cakes_referenced_by_orders(self):
        kept = make_cake(name="Ordered Cake")
        make_cake(name="Stale Cake")
        order = Order.objects.create(
            customer_name="Ann",
            customer_email="ann@example.com",
            customer_phone="555-0100",
            delivery_address="1 Baker St",
            total_amount=Decimal("25.99"),
        )
        OrderItem.objects.create(
            order=order, cake=kept, quantity=1,
            unit_price=Decimal("25.99"), total_price=Decimal("25.99"),
        )

        call_command("seed_cakes", "--reset", stdout=StringIO())

        self.assertTrue(Cake.objects.filter(name="Ordered Cake").exists())
        self.assertFalse(Cake.objects.filter(name="Stale Cake").exists())
        self.assertTrue(Cake.objects.filter(name="Lemon Drizzle").exists())
