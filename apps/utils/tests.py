# apps/utils/tests.py
import json
import logging
from decimal import Decimal
from unittest import mock

from django.db import DatabaseError, IntegrityError
from django.http import Http404
from django.test import TestCase, SimpleTestCase
from django.urls import reverse
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIClient

from .exceptions import (
    custom_exception_handler,
    NotFoundError,
    ReferencedEntityNotFoundError,
    EntityUnavailableError,
)
from .logging import JSONFormatter
from .validators import validate_positive_amount, validate_not_blank


class ValidatorTests(SimpleTestCase):
    def test_positive_amount_validator(self):
        self.assertEqual(validate_positive_amount(Decimal("0.01")), Decimal("0.01"))
        self.assertIsNone(validate_positive_amount(None))
        with self.assertRaises(ValidationError):
            validate_positive_amount(Decimal("0"))
        with self.assertRaises(ValidationError):
            validate_positive_amount(Decimal("-3.50"))

    def test_not_blank_validator(self):
        self.assertEqual(validate_not_blank("Cake"), "Cake")
        with self.assertRaises(ValidationError):
            validate_not_blank("   ")


class ExceptionHandlerTests(SimpleTestCase):
    def test_domain_errors_map_to_status_and_code(self):
        cases = [
            (NotFoundError("gone"), 404, "not_found"),
            (ReferencedEntityNotFoundError("Cake with ID 9 not found"), 400, "referenced_entity_not_found"),
            (EntityUnavailableError('Cake "X" is not available'), 409, "entity_unavailable"),
        ]
        for exc, status_code, code in cases:
            response = custom_exception_handler(exc, {})
            self.assertEqual(response.status_code, status_code)
            self.assertEqual(response.data["code"], code)
            self.assertEqual(response.data["error"], exc.message)

    def test_validation_error_is_wrapped(self):
        response = custom_exception_handler(ValidationError({"price": ["bad"]}), {})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["code"], "validation_error")
        self.assertIn("price", response.data["error"])

    def test_http404_is_not_found(self):
        response = custom_exception_handler(Http404(), {})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["code"], "not_found")

    def test_integrity_error_is_conflict(self):
        with self.assertLogs("apps.utils.exceptions", level="WARNING"):
            response = custom_exception_handler(IntegrityError("constraint"), {})
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data["code"], "conflict")

    def test_unexpected_error_is_server_error(self):
        with self.assertLogs("apps.utils.exceptions", level="ERROR"):
            response = custom_exception_handler(RuntimeError("boom"), {})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["code"], "server_error")


class JSONFormatterTests(SimpleTestCase):
    def _record(self, msg, args=None, **extra):
        record = logging.LogRecord("apps.orders", logging.INFO, __file__, 1, msg, args, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_scrubs_customer_contact_details(self):
        record = self._record({"customer_email": "a@b.com", "items": [{"token": "x", "quantity": 2}]})
        payload = json.loads(JSONFormatter().format(record))

        self.assertNotIn("a@b.com", payload["msg"])
        self.assertIn("REDACTED", payload["msg"])
        self.assertIn("'quantity': 2", payload["msg"])

    def test_includes_context_attributes(self):
        record = self._record("Order %s created", (7,), order_id=7, duration_ms=3.2)
        payload = json.loads(JSONFormatter().format(record))

        self.assertEqual(payload["msg"], "Order 7 created")
        self.assertEqual(payload["lvl"], "INFO")
        self.assertEqual(payload["order_id"], 7)
        self.assertEqual(payload["duration_ms"], 3.2)
        self.assertNotIn("cake_id", payload)


class HealthCheckTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_health_ok(self):
        resp = self.client.get(reverse("health-check"))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")
        self.assertEqual(resp.json()["components"]["db"], "ok")

    def test_health_reports_database_failure(self):
        with mock.patch(
            "django.db.backends.base.base.BaseDatabaseWrapper.cursor", side_effect=DatabaseError("down")
        ):
            with self.assertLogs("apps.utils.health", level="ERROR"):
                resp = self.client.get(reverse("health-check"))
        self.assertEqual(resp.status_code, 503)
        self.assertEqual(resp.json()["components"]["db"], "error")

    def test_server_info(self):
        resp = self.client.get(reverse("server-info"))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["app_name"], "Bakery")
        self.assertIn("version", resp.json())
