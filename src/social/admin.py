"""Admin configuration for the social app."""

from django.contrib import admin

from .models import Follow


@admin.register(Follow)
class FollowAdmin(admin.ModelAdmin):
    """Admin listing of follow edges."""

    list_display = ("follower", "followed", "created_at")
    search_fields = ("follower__username", "followed__username")
    readonly_fields = ("created_at",)
