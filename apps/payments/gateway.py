"""
M-Pesa (Daraja) payment gateway client.

Two sequential calls per push:

1. exchange the consumer key/secret for a short-lived bearer token;
2. submit the STK push request signed with that token.

Tokens are not cached: every push fetches a new one.
"""

from __future__ import annotations

import base64
import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

import requests
from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.module_loading import import_string  # type: ignore

from shared.domain.exceptions import GatewayAuthError, GatewayError, PushRejected, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://sandbox.safaricom.co.ke"
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

_PHONE_RE = re.compile(r"^(?:\+?254|0)?([17]\d{8})$")


def normalize_phone(phone: str) -> str:
    """
    Bring a Kenyan mobile number to the ``2547XXXXXXXX`` form Daraja expects.

    Accepts ``07XXXXXXXX``, ``01XXXXXXXX``, ``+2547XXXXXXXX`` and
    ``2547XXXXXXXX`` (spaces and dashes are ignored).
    """
    cleaned = re.sub(r"[\s-]", "", phone or "")
    match = _PHONE_RE.match(cleaned)
    if not match:
        raise ValidationError(f"Invalid phone number: {phone!r}", code="invalid_phone")
    return f"254{match.group(1)}"


def whole_amount(amount) -> int:
    """Daraja only accepts whole shillings."""
    try:
        value = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError) as e:
        raise ValidationError("Amount must be a number.", code="invalid_amount") from e
    if value < 1:
        raise ValidationError("Amount must be at least 1.", code="invalid_amount")
    return int(value)


def _response_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class GatewayClient(ABC):
    """A mobile-money provider able to push a payment prompt to a phone."""

    @classmethod
    def from_settings(cls) -> "GatewayClient":
        return cls()

    @abstractmethod
    def push(self, phone: str, amount) -> dict:
        """Ask the provider to prompt ``phone`` for ``amount``.

        Returns the provider's response payload; raises GatewayError
        (or a subclass) when the provider refuses.
        """


class MpesaClient(GatewayClient):
    """Client for the Daraja OAuth and STK push endpoints."""

    TOKEN_PATH = "/oauth/v1/generate"
    PUSH_PATH = "/mpesa/stkpush/v1/processrequest"
    TRANSACTION_TYPE = "CustomerPayBillOnline"

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        shortcode: str,
        passkey: str,
        callback_url: str,
        *,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 30,
        account_reference: str = "VaultFund",
        transaction_desc: str = "Kitty contribution",
    ):
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.shortcode = str(shortcode)
        self.passkey = passkey
        self.callback_url = callback_url
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.account_reference = account_reference
        self.transaction_desc = transaction_desc

    @classmethod
    def from_settings(cls) -> "MpesaClient":
        return cls(
            consumer_key=settings.MPESA_CONSUMER_KEY,
            consumer_secret=settings.MPESA_CONSUMER_SECRET,
            shortcode=settings.MPESA_SHORTCODE,
            passkey=settings.MPESA_PASSKEY,
            callback_url=settings.MPESA_CALLBACK_URL,
            base_url=settings.MPESA_API_BASE_URL,
            timeout=settings.MPESA_TIMEOUT,
            account_reference=settings.MPESA_ACCOUNT_REFERENCE,
            transaction_desc=settings.MPESA_TRANSACTION_DESC,
        )

    # ------------------------------------------------------------------
    # Token acquisition
    # ------------------------------------------------------------------

    def basic_auth_header(self) -> str:
        creds = base64.b64encode(f"{self.consumer_key}:{self.consumer_secret}".encode()).decode()
        return f"Basic {creds}"

    def get_access_token(self) -> str:
        if not self.consumer_key or not self.consumer_secret:
            raise GatewayAuthError("Payment gateway credentials are not configured.")

        try:
            response = requests.get(
                f"{self.base_url}{self.TOKEN_PATH}",
                params={"grant_type": "client_credentials"},
                headers={"Authorization": self.basic_auth_header()},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error requesting M-Pesa access token: {e}")
            raise GatewayAuthError(f"Could not reach the payment gateway: {e}") from e

        body = _response_body(response)
        if not response.ok:
            logger.error(f"M-Pesa token request rejected: {response.status_code} - {body}")
            raise GatewayAuthError(payload=body)

        token = body.get("access_token") if isinstance(body, dict) else None
        if not token:
            logger.error(f"M-Pesa token response without access_token: {body}")
            raise GatewayAuthError(payload=body)
        return token

    # ------------------------------------------------------------------
    # STK push
    # ------------------------------------------------------------------

    def password(self, timestamp: str) -> str:
        return base64.b64encode(f"{self.shortcode}{self.passkey}{timestamp}".encode()).decode()

    def build_payload(self, phone: str, amount: int, timestamp: str) -> dict:
        return {
            "BusinessShortCode": self.shortcode,
            "Password": self.password(timestamp),
            "Timestamp": timestamp,
            "TransactionType": self.TRANSACTION_TYPE,
            "Amount": amount,
            "PartyA": phone,
            "PartyB": self.shortcode,
            "PhoneNumber": phone,
            "CallBackURL": self.callback_url,
            "AccountReference": self.account_reference,
            "TransactionDesc": self.transaction_desc,
        }

    def push(self, phone: str, amount, *, now: datetime | None = None) -> dict:
        msisdn = normalize_phone(phone)
        value = whole_amount(amount)
        logger.info(f"Initiating M-Pesa STK push of {value} to {msisdn}")

        token = self.get_access_token()
        timestamp = timezone.localtime(now).strftime(TIMESTAMP_FORMAT)
        payload = self.build_payload(msisdn, value, timestamp)

        try:
            response = requests.post(
                f"{self.base_url}{self.PUSH_PATH}",
                json=payload,
                headers={
                    "Authorization": f"Bearer {token}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error during M-Pesa STK push: {e}")
            raise GatewayError(f"Could not reach the payment gateway: {e}") from e

        body = _response_body(response)
        if not response.ok or not isinstance(body, dict) or str(body.get("ResponseCode")) != "0":
            logger.error(f"M-Pesa STK push rejected: {response.status_code} - {body}")
            raise PushRejected(payload=body)

        logger.info(f"M-Pesa STK push accepted: {body.get('CheckoutRequestID')}")
        return body


def get_gateway_client(path: str | None = None) -> GatewayClient:
    """Build the gateway client named by ``path`` or ``settings.PAYMENT_GATEWAY_CLIENT``."""
    client_class = import_string(path or settings.PAYMENT_GATEWAY_CLIENT)
    return client_class.from_settings()
