"""Models for shared images and the comments left on them."""
from django.conf import settings
from django.db import models
from django.utils import timezone


class Image(models.Model):
    """An image a user has shared."""
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    url = models.URLField(max_length=500)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='images'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.name


class TextComment(models.Model):
    """Plain text comment body."""
    body = models.TextField()

    def __str__(self):
        return self.body


class ImageComment(models.Model):
    """Comment made of an image with an optional caption."""
    url = models.URLField(max_length=500)
    caption = models.CharField(max_length=255, blank=True)

    def __str__(self):
        return self.caption or self.url


class Comment(models.Model):
    """
    A comment on an image.

    The content lives in one of the variant tables; ``content_kind`` says
    which one and ``content_id`` is the row in it.
    """

    TEXT = 'TextComment'
    IMAGE = 'ImageComment'
    KIND_CHOICES = [
        (TEXT, 'Text'),
        (IMAGE, 'Image'),
    ]
    CONTENT_MODELS = {
        TEXT: TextComment,
        IMAGE: ImageComment,
    }

    image = models.ForeignKey(Image, on_delete=models.CASCADE, related_name='comments')
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='comments'
    )
    content_kind = models.CharField(max_length=16, choices=KIND_CHOICES)
    content_id = models.PositiveBigIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['content_kind', 'content_id'], name='images_comment_content_idx'),
        ]

    def __str__(self):
        return f"{self.content_kind} #{self.content_id} by {self.user}"

    @classmethod
    def text_comments(cls, ids):
        """Comments whose content is one of the given text comment ids."""
        return cls.objects.filter(content_kind=cls.TEXT, content_id__in=ids)

    def resolve_content(self):
        """Load the variant row this comment points at, or None if it is gone."""
        return self.CONTENT_MODELS[self.content_kind].objects.filter(pk=self.content_id).first()

    @property
    def is_text(self) -> bool:
        return self.content_kind == self.TEXT

    @property
    def created_time(self) -> str:
        return timezone.localtime(self.created_at).strftime("%H:%M, %m/%d/%Y %Z")

    @property
    def username(self) -> str:
        return self.user.username
