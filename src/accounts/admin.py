"""Admin configuration for the accounts app."""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import Location, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """User admin with the profile and location fields added."""

    list_display = ("username", "email", "location", "is_staff")
    fieldsets = BaseUserAdmin.fieldsets + (
        ("Profile", {"fields": ("location", "bio", "avatar", "number")}),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ("Profile", {"fields": ("email", "location")}),
    )


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    """Admin definition for locations."""

    list_display = ("city", "state")
    search_fields = ("city", "state")
