"""Models for registered users and where they live."""
from django.contrib.auth.models import AbstractUser
from django.db import models


class Location(models.Model):
    """City/state pair a user registers with."""
    city = models.CharField(max_length=128)
    state = models.CharField(max_length=64)

    def __str__(self):
        return f"{self.city}, {self.state}"


class User(AbstractUser):
    """
    Registered member of the site.

    Email, username, password credential and location are all required;
    ``save`` runs model validation so an incomplete user never persists.
    """
    email = models.EmailField(unique=True)
    location = models.ForeignKey(Location, on_delete=models.PROTECT, related_name='residents')
    bio = models.TextField(blank=True)
    avatar = models.URLField(blank=True)
    number = models.CharField(max_length=32, blank=True)

    REQUIRED_FIELDS = ['email', 'location']

    def save(self, *args, **kwargs):
        # Partial saves (e.g. last_login on sign-in) skip full validation.
        if not kwargs.get('update_fields'):
            self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.username

    @property
    def social_graph(self):
        from social.services.social_graph import default_social_graph

        return default_social_graph()

    def follow(self, other):
        """Start following ``other``."""
        self.social_graph.follow(self, other)

    def unfollow(self, other):
        """Stop following ``other``; does nothing when not following."""
        self.social_graph.unfollow(self, other)

    def is_following(self, other) -> bool:
        """Return True when this user is among ``other``'s followers."""
        return self.social_graph.is_following(self, other)

    def includes_myself(self):
        """Return this user's id followed by the ids of everyone they follow."""
        return self.social_graph.includes_myself(self)

    def can_accept(self, listing) -> bool:
        """Return True when ``listing`` is one of this user's listings."""
        return self.social_graph.can_accept(self, listing)

    @property
    def followed_users(self):
        return self.social_graph.followed_users(self)

    @property
    def followers(self):
        return self.social_graph.followers(self)
