import unittest

from rest_framework import status
from rest_framework.exceptions import ValidationError

from apps.api.utils import error_response


class ErrorResponseTests(unittest.TestCase):
    def test_default_status_mapping_and_details(self):
        resp = error_response("NOT_FOUND", "Category not found", {"id": "1"})
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["code"], "NOT_FOUND")
        self.assertEqual(resp.data["error"]["status"], status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["details"], {"id": "1"})

    def test_conflict_maps_to_409(self):
        resp = error_response("conflict", "A category with name 'x' already exists")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(resp.data["error"]["code"], "CONFLICT")
        self.assertNotIn("details", resp.data["error"])

    def test_unknown_code_defaults_to_400(self):
        resp = error_response("SOMETHING_ODD", "odd")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_custom_status_override(self):
        resp = error_response("UNKNOWN", "oops", http_status=status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.data["error"]["message"], "oops")

    def test_hint_and_headers(self):
        resp = error_response(
            "VALIDATION_ERROR",
            "Invalid value",
            hint="Send a JSON object",
            headers={"Retry-After": 5},
        )
        self.assertEqual(resp.data["error"]["hint"], "Send a JSON object")
        self.assertEqual(resp["Retry-After"], "5")

    def test_validation_error_details_are_normalized(self):
        resp = error_response(
            "VALIDATION_ERROR", "Validation failed", ValidationError({"name": ["bad"]})
        )
        self.assertEqual(resp.data["error"]["details"], {"name": ["bad"]})

    def test_blank_code_is_rejected(self):
        with self.assertRaises(ValueError):
            error_response("  ", "message")
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "")

    def test_unmapped_service_unavailable_code_defaults_to_400(self):
        resp = error_response("SERVICE_UNAVAILABLE", "down")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
