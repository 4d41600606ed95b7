"""API views for mobile-money payment initiation."""

from __future__ import annotations

from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from .gateway import get_gateway_client
from .serializers import StkPushSerializer


class MpesaStkPushView(APIView):
    """
    Prompt a contributor's phone to authorise a payment.

    Answers with the provider's payload as-is. A rejected push becomes a 500
    whose body carries the provider response so the client can show it.
    """

    permission_classes = [permissions.AllowAny]

    def post(self, request, *args, **kwargs):  # type: ignore
        serializer = StkPushSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        client = get_gateway_client()
        result = client.push(serializer.validated_data["phone"], serializer.validated_data["amount"])
        return Response(result, status=status.HTTP_200_OK)
