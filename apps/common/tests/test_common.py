from types import SimpleNamespace

from django.test import SimpleTestCase
from rest_framework import exceptions, serializers
from rest_framework.exceptions import NotAuthenticated

from apps.common.exceptions import NotFoundError, ProviderError, ValidationError, api_exception_handler
from apps.common.fields import SnapshotIdField, StrictIntegerField
from apps.common.utils import format_phone_number, format_rupiah


class FormattingTests(SimpleTestCase):
    def test_format_rupiah(self):
        self.assertEqual(format_rupiah(15000), "Rp 15.000")
        self.assertEqual(format_rupiah(1250000), "Rp 1.250.000")
        self.assertEqual(format_rupiah(500), "Rp 500")
        self.assertEqual(format_rupiah(0), "Rp 0")

    def test_format_phone_number(self):
        self.assertEqual(format_phone_number("081234567890"), "+6281234567890")
        self.assertEqual(format_phone_number("62 812-3456-7890"), "+6281234567890")
        self.assertEqual(format_phone_number("+62 812 3456 7890"), "+6281234567890")
        self.assertEqual(format_phone_number("81234567890"), "+6281234567890")


class StrictIntegerFieldTests(SimpleTestCase):
    def test_accepts_whole_numbers(self):
        field = StrictIntegerField()
        self.assertEqual(field.run_validation(5), 5)
        self.assertEqual(field.run_validation(5.0), 5)

    def test_rejects_other_types(self):
        field = StrictIntegerField()
        for value in (True, "5", 5.5, None, [5]):
            with self.assertRaises(serializers.ValidationError, msg=repr(value)):
                field.run_validation(value)

    def test_bounds_still_apply(self):
        with self.assertRaises(serializers.ValidationError):
            StrictIntegerField(min_value=0).run_validation(-1)


class SnapshotIdFieldTests(SimpleTestCase):
    def test_accepts_ints_and_strings_unchanged(self):
        field = SnapshotIdField()
        self.assertEqual(field.run_validation(3), 3)
        self.assertEqual(field.run_validation("3"), "3")

    def test_rejects_blank_bool_and_other_types(self):
        field = SnapshotIdField()
        for value in ("", "  ", True, 1.5, {"id": 1}):
            with self.assertRaises(serializers.ValidationError, msg=repr(value)):
                field.run_validation(value)


class ExceptionHandlerTests(SimpleTestCase):
    def setUp(self):
        self.context = {
            "view": SimpleNamespace(invalid_message="Invalid menu item data", failure_message="Failed to fetch menu")
        }

    def test_domain_validation_error(self):
        resp = api_exception_handler(ValidationError("Invalid status", {"status": ["bad"]}), self.context)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data, {"message": "Invalid status", "errors": {"status": ["bad"]}})

    def test_domain_validation_error_without_details(self):
        resp = api_exception_handler(ValidationError("Status is required"), self.context)
        self.assertEqual(resp.data, {"message": "Status is required"})

    def test_not_found(self):
        resp = api_exception_handler(NotFoundError("Order not found"), self.context)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.data, {"message": "Order not found"})

    def test_provider_error_hides_details(self):
        with self.assertLogs("apps.common.exceptions", level="ERROR"):
            resp = api_exception_handler(ProviderError("password authentication failed"), self.context)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.data, {"message": "Failed to fetch menu"})

    def test_serializer_validation_error_uses_view_message(self):
        resp = api_exception_handler(exceptions.ValidationError({"price": ["too low"]}), self.context)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["message"], "Invalid menu item data")
        self.assertEqual(resp.data["errors"], {"price": ["too low"]})

    def test_other_api_exceptions_keep_status_with_message_envelope(self):
        resp = api_exception_handler(NotAuthenticated(), self.context)
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.data, {"message": "Authentication credentials were not provided."})

    def test_parse_error_uses_message_envelope(self):
        resp = api_exception_handler(exceptions.ParseError("JSON parse error - Expecting value"), self.context)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data, {"message": "JSON parse error - Expecting value"})

    def test_unexpected_exception_is_500(self):
        with self.assertLogs("apps.common.exceptions", level="ERROR"):
            resp = api_exception_handler(RuntimeError("boom"), self.context)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.data, {"message": "Failed to fetch menu"})
