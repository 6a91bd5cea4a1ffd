"""Admin registrations for spots."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Spot, SpotImage


class SpotImageInline(admin.TabularInline):
    model = SpotImage
    extra = 0
    fields = ("url", "preview")


@admin.register(Spot)
class SpotAdmin(admin.ModelAdmin):
    list_display = ("name", "city", "state", "country", "price", "owner", "created_at")
    list_filter = ("country", "state")
    search_fields = ("name", "city", "address", "owner__username", "owner__email")
    raw_id_fields = ("owner",)
    inlines = [SpotImageInline]


@admin.register(SpotImage)
class SpotImageAdmin(admin.ModelAdmin):
    list_display = ("spot", "url", "preview", "created_at")
    list_filter = ("preview",)
    raw_id_fields = ("spot",)
