"""URL routing for the contribution ledger."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import ContributionViewSet

router = DefaultRouter()
router.register(r"", ContributionViewSet, basename="contribution")

urlpatterns = [
    path("", include(router.urls)),
]
