# src/social/models.py
"""Models for tracking user follow relationships"""
from django.conf import settings
from django.db import models


class Follow(models.Model):
    """Directed edge: ``follower`` receives ``followed``'s activity in their feed."""

    follower = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='following_edges'
    )
    followed = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='follower_edges'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['follower', 'followed'], name='unique_follow_pair'),
            models.CheckConstraint(
                condition=~models.Q(follower=models.F('followed')), name='follow_not_self'
            ),
        ]
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['follower', 'created_at'], name='social_follower_created_idx'),
            models.Index(fields=['followed', 'created_at'], name='social_followed_created_idx'),
        ]

    def __str__(self):
        return f"{self.follower} follows {self.followed}"
