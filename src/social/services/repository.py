"""Persistence seam for the social graph.

Each relation the graph needs is an explicit query method, so the service
never walks model associations itself and tests can substitute an
in-memory implementation of the same protocol.
"""

from __future__ import annotations

import logging
from typing import Any, List, Protocol

from django.contrib.auth import get_user_model
from django.db import DatabaseError, transaction

from listings.models import Listing

from ..exceptions import NotFound, PersistenceFailure
from ..models import Follow

logger = logging.getLogger(__name__)


class FollowRepository(Protocol):
    """Operations the social graph performs against its store."""

    def find_user(self, user_id: Any) -> Any:
        """Return the user with ``user_id`` or raise ``NotFound``."""

    def followed_users_of(self, user_id: Any) -> List[Any]:
        """Users ``user_id`` follows, oldest follow first."""

    def followers_of(self, user_id: Any) -> List[Any]:
        """Users following ``user_id``, oldest follow first."""

    def is_following(self, follower_id: Any, followed_id: Any) -> bool:
        """Whether the edge ``follower_id -> followed_id`` exists."""

    def count_followers(self, user_id: Any) -> int:
        """Number of users following ``user_id``."""

    def add_follow(self, follower_id: Any, followed_id: Any) -> None:
        """Persist the edge ``follower_id -> followed_id``."""

    def remove_follow(self, follower_id: Any, followed_id: Any) -> bool:
        """Delete the edge if present and report whether one was removed."""

    def listings_of(self, user_id: Any) -> List[Any]:
        """Listings owned by ``user_id``."""


class DjangoFollowRepository:
    """``FollowRepository`` backed by the Django ORM."""

    def __init__(self):
        self.user_model = get_user_model()

    def find_user(self, user_id):
        try:
            return self.user_model.objects.get(pk=user_id)
        except self.user_model.DoesNotExist as exc:
            raise NotFound("user", user_id) from exc
        except DatabaseError as exc:
            raise PersistenceFailure(f"Could not load user {user_id}") from exc

    def followed_users_of(self, user_id):
        edges = Follow.objects.filter(follower_id=user_id).select_related('followed')
        try:
            return [edge.followed for edge in edges.order_by('created_at', 'id')]
        except DatabaseError as exc:
            raise PersistenceFailure(f"Could not load users followed by {user_id}") from exc

    def followers_of(self, user_id):
        edges = Follow.objects.filter(followed_id=user_id).select_related('follower')
        try:
            return [edge.follower for edge in edges.order_by('created_at', 'id')]
        except DatabaseError as exc:
            raise PersistenceFailure(f"Could not load followers of {user_id}") from exc

    def is_following(self, follower_id, followed_id):
        try:
            return Follow.objects.filter(follower_id=follower_id, followed_id=followed_id).exists()
        except DatabaseError as exc:
            raise PersistenceFailure(
                f"Could not check follow {follower_id} -> {followed_id}"
            ) from exc

    def count_followers(self, user_id):
        try:
            return Follow.objects.filter(followed_id=user_id).count()
        except DatabaseError as exc:
            raise PersistenceFailure(f"Could not count followers of {user_id}") from exc

    def add_follow(self, follower_id, followed_id):
        try:
            with transaction.atomic():
                _, created = Follow.objects.get_or_create(
                    follower_id=follower_id, followed_id=followed_id
                )
        except DatabaseError as exc:
            raise PersistenceFailure(
                f"Could not store follow {follower_id} -> {followed_id}"
            ) from exc
        if not created:
            logger.debug("User %s already follows %s", follower_id, followed_id)

    def remove_follow(self, follower_id, followed_id):
        try:
            deleted, _ = Follow.objects.filter(
                follower_id=follower_id, followed_id=followed_id
            ).delete()
        except DatabaseError as exc:
            raise PersistenceFailure(
                f"Could not delete follow {follower_id} -> {followed_id}"
            ) from exc
        return bool(deleted)

    def listings_of(self, user_id):
        try:
            return list(Listing.objects.filter(user_id=user_id))
        except DatabaseError as exc:
            raise PersistenceFailure(f"Could not load listings of {user_id}") from exc
