"""Serializers for payment initiation."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore


class StkPushSerializer(serializers.Serializer):
    phone = serializers.CharField(max_length=20)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("1"))
