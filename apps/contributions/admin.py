"""Admin registration for contributions."""

from __future__ import annotations

from django.contrib import admin

from .models import Contribution


@admin.register(Contribution)
class ContributionAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "kitty_address",
        "contributor_name",
        "contributor_email",
        "amount",
        "transaction_ref",
        "status",
        "created_at",
    )
    list_filter = ("status",)
    search_fields = ("kitty_address", "contributor_email", "transaction_ref")
    readonly_fields = ("created_at",)
