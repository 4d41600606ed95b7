"""Serializers for the kitty registry."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Kitty


class KittyCreateSerializer(serializers.Serializer):
    """Input for kitty creation. Every field is required."""

    email = serializers.EmailField()
    name = serializers.CharField(max_length=255)
    description = serializers.CharField()
    type = serializers.CharField(max_length=100, source="kitty_type")
    beneficiary_count = serializers.IntegerField(min_value=1)
    maturity_date = serializers.DateTimeField()
    address = serializers.CharField(max_length=255)


class KittySerializer(serializers.ModelSerializer):
    type = serializers.CharField(source="kitty_type", read_only=True)

    class Meta:
        model = Kitty
        fields = [
            "id",
            "email",
            "name",
            "description",
            "type",
            "beneficiary_count",
            "maturity_date",
            "address",
            "amount",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
