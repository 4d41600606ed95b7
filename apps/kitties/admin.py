"""Admin registration for kitties."""

from __future__ import annotations

from django.contrib import admin

from .models import Kitty


@admin.register(Kitty)
class KittyAdmin(admin.ModelAdmin):
    list_display = (
        "address",
        "name",
        "email",
        "kitty_type",
        "beneficiary_count",
        "maturity_date",
        "amount",
        "created_at",
    )
    list_filter = ("kitty_type", "maturity_date")
    search_fields = ("address", "name", "email")
    readonly_fields = ("created_at", "updated_at")
