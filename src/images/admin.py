"""Admin configuration for the images app."""

from django.contrib import admin

from .models import Comment, Image


@admin.register(Image)
class ImageAdmin(admin.ModelAdmin):
    """Admin definition for shared images."""

    list_display = ("name", "user", "created_at")
    search_fields = ("name", "description", "user__username")


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    """Admin definition for comments."""

    list_display = ("image", "user", "content_kind", "content_id", "created_at")
    list_filter = ("content_kind",)
