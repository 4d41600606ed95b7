"""API views for notifications."""

from __future__ import annotations

import logging

from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.domain.exceptions import NotificationError

from .serializers import WelcomeEmailSerializer
from .services import send_welcome_email

logger = logging.getLogger(__name__)


class WelcomeEmailView(APIView):
    """Send the VaultFund welcome mail to a new member."""

    permission_classes = [permissions.AllowAny]

    def post(self, request, *args, **kwargs):  # type: ignore
        serializer = WelcomeEmailSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"error": "Name and email are required", "fields": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            send_welcome_email(**serializer.validated_data)
        except NotificationError as e:
            logger.error(f"Welcome email failed: {e.detail}")
            return Response({"error": "Failed to send email"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({"message": "Welcome email sent successfully"}, status=status.HTTP_200_OK)
