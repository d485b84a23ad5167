# apps/custom_requests/tests.py
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse

from rest_framework.test import APITestCase, APIClient
from rest_framework import status

from apps.utils.exceptions import NotFoundError
from .models import CustomCakeRequest
from .services import CustomRequestService


SUBMISSION = {
    "customer_name": "Sam Baker",
    "customer_email": "sam@example.com",
    "customer_phone": "555-0199",
    "cake_description": "Three tier lemon cake with edible flowers",
}


class CustomRequestServiceTests(TestCase):
    def setUp(self):
        self.request = CustomRequestService.create_request(dict(SUBMISSION))

    def test_new_request_is_pending_without_quote(self):
        self.assertEqual(self.request.status, CustomCakeRequest.Status.PENDING)
        self.assertIsNone(self.request.quoted_price)
        self.assertIsNone(self.request.admin_notes)

    def test_status_only_update_keeps_notes_and_quote(self):
        CustomRequestService.update_request(
            self.request.id, "quoted", admin_notes="Needs a stand", quoted_price=Decimal("150.00")
        )
        updated = CustomRequestService.update_request(self.request.id, "approved")

        self.assertEqual(updated.status, "approved")
        self.assertEqual(updated.admin_notes, "Needs a stand")
        self.assertEqual(updated.quoted_price, Decimal("150.00"))

    def test_explicit_none_clears_quote(self):
        CustomRequestService.update_request(self.request.id, "quoted", quoted_price=Decimal("99.00"))
        updated = CustomRequestService.update_request(self.request.id, "reviewed", quoted_price=None)

        updated.refresh_from_db()
        self.assertIsNone(updated.quoted_price)

    def test_update_missing_request(self):
        with self.assertRaises(NotFoundError):
            CustomRequestService.update_request(999, "reviewed")

    def test_list_is_newest_first(self):
        second = CustomRequestService.create_request(dict(SUBMISSION, customer_name="Second"))
        third = CustomRequestService.create_request(dict(SUBMISSION, customer_name="Third"))

        ids = [r.id for r in CustomRequestService.list_requests()]
        self.assertEqual(ids, [third.id, second.id, self.request.id])


class CustomRequestAPITests(APITestCase):
    def setUp(self):
        self.client = APIClient()

    def _create(self, **extra):
        return self.client.post(reverse("custom-request-list"), {**SUBMISSION, **extra}, format="json")

    def test_submit_request(self):
        resp = self._create(
            occasion="Wedding",
            size="3 tiers",
            budget_range="$200-$300",
            required_date="2026-12-01T10:00:00Z",
        )

        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        body = resp.json()
        self.assertEqual(body["status"], "pending")
        self.assertIsNone(body["quoted_price"])
        self.assertIsNone(body["admin_notes"])
        self.assertIsNone(body["flavor_preferences"])
        self.assertEqual(body["occasion"], "Wedding")
        self.assertIsNotNone(body["required_date"])

    def test_submit_ignores_admin_fields(self):
        resp = self._create(status="approved", quoted_price=10, admin_notes="sneaky")

        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.json()["status"], "pending")
        self.assertIsNone(resp.json()["quoted_price"])
        self.assertIsNone(resp.json()["admin_notes"])

    def test_description_must_be_at_least_ten_characters(self):
        resp = self._create(cake_description="too short")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("cake_description", resp.json()["error"])

        resp = self._create(cake_description="just right")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)

    def test_invalid_email_rejected(self):
        resp = self._create(customer_email="nope")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(CustomCakeRequest.objects.count(), 0)

    def test_list_requests(self):
        self._create(customer_name="First")
        self._create(customer_name="Second")

        resp = self.client.get(reverse("custom-request-list"))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual([r["customer_name"] for r in resp.json()], ["Second", "First"])

    def test_get_request(self):
        created = self._create().json()
        resp = self.client.get(reverse("custom-request-detail", kwargs={"pk": created["id"]}))

        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json()["customer_email"], "sam@example.com")

    def test_get_missing_request_is_404(self):
        resp = self.client.get(reverse("custom-request-detail", kwargs={"pk": 999}))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.json()["code"], "not_found")

    def test_quote_request(self):
        created = self._create().json()
        url = reverse("custom-request-detail", kwargs={"pk": created["id"]})

        resp = self.client.patch(
            url, {"status": "quoted", "admin_notes": "Fondant extra", "quoted_price": 185.5}, format="json"
        )
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        body = resp.json()
        self.assertEqual(body["status"], "quoted")
        self.assertEqual(body["admin_notes"], "Fondant extra")
        self.assertEqual(body["quoted_price"], 185.5)

        resp = self.client.patch(url, {"status": "approved"}, format="json")
        self.assertEqual(resp.json()["quoted_price"], 185.5)
        self.assertEqual(resp.json()["admin_notes"], "Fondant extra")

        resp = self.client.patch(url, {"status": "reviewed", "quoted_price": None}, format="json")
        self.assertIsNone(resp.json()["quoted_price"])

    def test_update_requires_valid_status(self):
        created = self._create().json()
        url = reverse("custom-request-detail", kwargs={"pk": created["id"]})

        self.assertEqual(
            self.client.patch(url, {"admin_notes": "no status"}, format="json").status_code,
            status.HTTP_400_BAD_REQUEST,
        )
        self.assertEqual(
            self.client.patch(url, {"status": "baking"}, format="json").status_code,
            status.HTTP_400_BAD_REQUEST,
        )

    def test_update_rejects_non_positive_quote(self):
        created = self._create().json()
        url = reverse("custom-request-detail", kwargs={"pk": created["id"]})

        resp = self.client.patch(url, {"status": "quoted", "quoted_price": 0}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_missing_request_is_404(self):
        url = reverse("custom-request-detail", kwargs={"pk": 999})
        resp = self.client.patch(url, {"status": "reviewed"}, format="json")

        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.json()["code"], "not_found")
