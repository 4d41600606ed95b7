from unittest.mock import patch

import pytest
from django.db import OperationalError
from django.urls import reverse


@pytest.mark.django_db
def test_healthz_reports_components(client):
    response = client.get(reverse("healthz"))

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "database": "connected",
        "notifier": "EmailNotifier",
        "payment_gateway": "MpesaClient",
    }


@pytest.mark.django_db
def test_healthz_unhealthy_when_store_is_down(client):
    with patch("apps.core.views.connection.cursor", side_effect=OperationalError("gone")):
        response = client.get(reverse("healthz"))

    assert response.status_code == 503
    assert response.json()["database"] == "unavailable"


@pytest.mark.django_db
def test_healthz_only_answers_get(client):
    assert client.post(reverse("healthz")).status_code == 405
