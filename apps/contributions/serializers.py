"""Serializers for the contribution ledger."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Contribution


class ContributionCreateSerializer(serializers.Serializer):
    """
    Shape checks for a new contribution.

    Fields may be absent or blank here: ``record_contribution`` answers those
    with its single "All fields are required." error and owns the amount
    rules, so ``amount`` stays a string at this layer.
    """

    kitty_address = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    name = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    email = serializers.EmailField(max_length=254, required=False, allow_blank=True, allow_null=True)
    amount = serializers.CharField(max_length=64, required=False, allow_blank=True, allow_null=True)
    transaction_ref = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)


class ContributionSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source="contributor_name", read_only=True)
    email = serializers.EmailField(source="contributor_email", read_only=True)

    class Meta:
        model = Contribution
        fields = [
            "id",
            "kitty_address",
            "name",
            "email",
            "amount",
            "transaction_ref",
            "status",
            "created_at",
        ]
        read_only_fields = fields
