"""API views for the kitty registry."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .models import Kitty
from .serializers import KittyCreateSerializer, KittySerializer
from .services import create_kitty, find_kitties_by_email, kitty_exists, list_kitties


class KittyViewSet(mixins.CreateModelMixin, mixins.ListModelMixin, viewsets.GenericViewSet):
    """Create kitties, list them, look them up by creator and check addresses."""

    queryset = Kitty.objects.all()
    permission_classes = [permissions.AllowAny]
    lookup_field = "address"
    lookup_value_regex = "[^/]+"

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return KittyCreateSerializer
        return KittySerializer

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        kitty = create_kitty(**serializer.validated_data)
        return Response(
            {"message": "Kitty created successfully!", "data": KittySerializer(kitty).data},
            status=status.HTTP_201_CREATED,
        )

    def list(self, request, *args, **kwargs):  # type: ignore
        return Response(KittySerializer(list_kitties(), many=True).data)

    @action(detail=False, methods=["get"], url_path="by-email")
    def by_email(self, request):  # type: ignore
        kitties = find_kitties_by_email(request.query_params.get("email", "").strip())
        return Response(KittySerializer(kitties, many=True).data)

    @action(detail=True, methods=["get"])
    def exists(self, request, address=None):  # type: ignore
        return Response({"address": address, "exists": kitty_exists(address)})
