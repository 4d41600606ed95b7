"""API views for the contribution ledger.

The create serializer rejects malformed values (bad email, over-long
strings). Absent fields and amount rules are left to ``record_contribution``,
which answers any absent field with a single "All fields are required." error.
"""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .serializers import ContributionCreateSerializer, ContributionSerializer
from .services import (
    list_all_contributions,
    list_contributions_by_email,
    list_contributions_by_kitty,
    record_contribution,
)


class ContributionViewSet(viewsets.ViewSet):
    serializer_class = ContributionSerializer
    permission_classes = [permissions.AllowAny]

    def create(self, request):  # type: ignore
        serializer = ContributionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        contribution = record_contribution(
            kitty_address=data.get("kitty_address"),
            name=data.get("name"),
            email=data.get("email"),
            amount=data.get("amount"),
            transaction_ref=data.get("transaction_ref"),
        )
        return Response(
            {
                "message": "Contribution recorded successfully!",
                "data": ContributionSerializer(contribution).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def list(self, request):  # type: ignore
        return Response(ContributionSerializer(list_all_contributions(), many=True).data)

    @action(detail=False, methods=["get"], url_path="by-email")
    def by_email(self, request):  # type: ignore
        contributions = list_contributions_by_email(request.query_params.get("email", "").strip())
        return Response(ContributionSerializer(contributions, many=True).data)

    @action(detail=False, methods=["get"], url_path="by-kitty")
    def by_kitty(self, request):  # type: ignore
        contributions = list_contributions_by_kitty(request.query_params.get("kitty_address", "").strip())
        return Response(ContributionSerializer(contributions, many=True).data)
