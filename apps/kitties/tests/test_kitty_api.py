"""Integration tests for the kitty registry endpoints."""

from __future__ import annotations

from datetime import timedelta
from smtplib import SMTPException
from unittest.mock import patch

from django.core import mail
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.kitties.models import Kitty


class KittyAPITests(APITestCase):
    def setUp(self) -> None:
        self.list_url = reverse("kitty-list")

    def _payload(self, address: str = "KT-001", **overrides) -> dict:
        payload = {
            "email": "owner@example.com",
            "name": "Chama Savings",
            "description": "Monthly savings for the group",
            "type": "chama",
            "beneficiary_count": 5,
            "maturity_date": (timezone.now() + timedelta(days=365)).isoformat(),
            "address": address,
        }
        payload.update(overrides)
        return payload

    def test_create_kitty_returns_record_and_confirms_by_email(self) -> None:
        response = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["message"], "Kitty created successfully!")
        self.assertEqual(response.data["data"]["address"], "KT-001")
        self.assertEqual(response.data["data"]["type"], "chama")
        self.assertEqual(response.data["data"]["amount"], "0.00")

        kitty = Kitty.objects.get(address="KT-001")
        self.assertEqual(kitty.kitty_type, "chama")
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ["owner@example.com"])
        self.assertIn("KT-001", mail.outbox[0].body)

    def test_duplicate_address_is_rejected_and_first_kitty_kept(self) -> None:
        first = self.client.post(self.list_url, self._payload(), format="json")
        self.assertEqual(first.status_code, status.HTTP_201_CREATED, first.data)

        second = self.client.post(
            self.list_url, self._payload(name="Impostor", email="other@example.com"), format="json"
        )

        self.assertEqual(second.status_code, status.HTTP_400_BAD_REQUEST, second.data)
        self.assertEqual(second.data["error"], "Kitty address already exists.")
        self.assertEqual(second.data["code"], "duplicate_address")
        kitty = Kitty.objects.get(address="KT-001")
        self.assertEqual(kitty.name, "Chama Savings")
        self.assertEqual(kitty.email, "owner@example.com")
        self.assertEqual(Kitty.objects.count(), 1)

    def test_missing_fields_are_rejected(self) -> None:
        for field in ["email", "name", "description", "type", "beneficiary_count", "maturity_date", "address"]:
            payload = self._payload()
            payload.pop(field)
            response = self.client.post(self.list_url, payload, format="json")
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, field)
            self.assertIn(field, response.data)

        self.assertFalse(Kitty.objects.exists())

    def test_beneficiary_count_must_be_positive(self) -> None:
        response = self.client.post(self.list_url, self._payload(beneficiary_count=0), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertFalse(Kitty.objects.exists())

    def test_notification_failure_does_not_undo_creation(self) -> None:
        with patch("apps.notifications.backends.send_mail", side_effect=SMTPException("down")):
            response = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertTrue(Kitty.objects.filter(address="KT-001").exists())

    def test_list_kitties(self) -> None:
        self.client.post(self.list_url, self._payload("KT-001"), format="json")
        self.client.post(self.list_url, self._payload("KT-002"), format="json")

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual({k["address"] for k in response.data}, {"KT-001", "KT-002"})

    def test_find_by_email(self) -> None:
        self.client.post(self.list_url, self._payload("KT-001"), format="json")
        self.client.post(self.list_url, self._payload("KT-002", email="else@example.com"), format="json")
        url = reverse("kitty-by-email")

        response = self.client.get(url, {"email": "owner@example.com"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([k["address"] for k in response.data], ["KT-001"])

        missing = self.client.get(url)
        self.assertEqual(missing.status_code, status.HTTP_400_BAD_REQUEST)

        none_found = self.client.get(url, {"email": "nobody@example.com"})
        self.assertEqual(none_found.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(none_found.data["code"], "no_kitties")

    def test_kitty_exists_before_and_after_creation(self) -> None:
        url = reverse("kitty-exists", kwargs={"address": "KT-777"})

        before = self.client.get(url)
        self.assertEqual(before.status_code, status.HTTP_200_OK)
        self.assertEqual(before.data, {"address": "KT-777", "exists": False})

        self.client.post(self.list_url, self._payload("KT-777"), format="json")

        after = self.client.get(url)
        self.assertTrue(after.data["exists"])
