"""Admin configuration for the listings app."""

from django.contrib import admin

from .models import Listing, Offer


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    """Admin definition for listings."""

    list_display = ("name", "user", "created_at")
    search_fields = ("name", "description", "user__username")


@admin.register(Offer)
class OfferAdmin(admin.ModelAdmin):
    """Admin definition for offers."""

    list_display = ("listing", "user", "amount", "status", "created_at")
    list_filter = ("status",)
    readonly_fields = ("created_at",)
