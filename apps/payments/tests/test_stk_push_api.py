"""Integration tests for the STK push endpoint."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase


def _response(status_code: int, body: dict) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = body
    return response


class StkPushAPITests(APITestCase):
    def setUp(self) -> None:
        self.url = reverse("mpesa-stk-push")

    @patch("apps.payments.gateway.requests.post")
    @patch("apps.payments.gateway.requests.get")
    def test_accepted_push_returns_provider_payload(self, mock_get, mock_post) -> None:
        accepted = {"CheckoutRequestID": "ws_CO_1", "ResponseCode": "0", "CustomerMessage": "Success"}
        mock_get.return_value = _response(200, {"access_token": "tok"})
        mock_post.return_value = _response(200, accepted)

        response = self.client.post(self.url, {"phone": "0712345678", "amount": "250"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, accepted)
        self.assertTrue(mock_get.call_args.args[0].startswith("https://mpesa.test/"))

    @patch("apps.payments.gateway.requests.post")
    @patch("apps.payments.gateway.requests.get")
    def test_rejected_push_surfaces_provider_response(self, mock_get, mock_post) -> None:
        rejection = {"errorCode": "500.001.1001", "errorMessage": "Unable to lock subscriber"}
        mock_get.return_value = _response(200, {"access_token": "tok"})
        mock_post.return_value = _response(500, rejection)

        response = self.client.post(self.url, {"phone": "0712345678", "amount": "250"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data["code"], "push_rejected")
        self.assertEqual(response.data["provider_response"], rejection)

    @patch("apps.payments.gateway.requests.post")
    @patch("apps.payments.gateway.requests.get")
    def test_token_failure_is_a_server_error(self, mock_get, mock_post) -> None:
        mock_get.return_value = _response(401, {"errorMessage": "Invalid Authentication passed"})

        response = self.client.post(self.url, {"phone": "0712345678", "amount": "250"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data["code"], "gateway_auth_error")
        mock_post.assert_not_called()

    @patch("apps.payments.gateway.requests.get")
    def test_invalid_input_is_rejected(self, mock_get) -> None:
        missing = self.client.post(self.url, {"phone": "0712345678"}, format="json")
        self.assertEqual(missing.status_code, status.HTTP_400_BAD_REQUEST)

        bad_phone = self.client.post(self.url, {"phone": "12345", "amount": "10"}, format="json")
        self.assertEqual(bad_phone.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(bad_phone.data["code"], "invalid_phone")

        mock_get.assert_not_called()
