"""URL routing for the kitty registry."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import KittyViewSet

router = DefaultRouter()
router.register(r"", KittyViewSet, basename="kitty")

urlpatterns = [
    path("", include(router.urls)),
]
