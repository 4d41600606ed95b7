"""Serializers for notification endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore


class WelcomeEmailSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
