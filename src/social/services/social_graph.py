"""Follow relationships between users and the queries built on them."""

from __future__ import annotations

import logging
from typing import Any, List

from ..exceptions import SelfFollowError
from .repository import DjangoFollowRepository, FollowRepository

logger = logging.getLogger(__name__)


class SocialGraph:
    """
    Directed follow relation over users.

    Users are passed around as model instances (anything with a ``pk``);
    reads and writes go through the injected repository.
    """

    def __init__(self, repository: FollowRepository):
        self.repository = repository

    def follow(self, follower, target) -> None:
        """Add ``target`` to the end of ``follower``'s followed users.

        Following someone already followed leaves the relation unchanged.

        Raises:
            SelfFollowError: ``follower`` and ``target`` are the same user.
            NotFound: either user does not exist.
            PersistenceFailure: the edge could not be stored.
        """
        if follower.pk == target.pk:
            raise SelfFollowError(f"User {follower.pk} cannot follow themselves")
        self._require(follower, target)
        self.repository.add_follow(follower.pk, target.pk)
        logger.info("User %s followed %s", follower.pk, target.pk)

    def unfollow(self, follower, target) -> None:
        """Remove ``target`` from ``follower``'s followed users, if present.

        Raises:
            NotFound: either user does not exist.
        """
        self._require(follower, target)
        removed = self.repository.remove_follow(follower.pk, target.pk)
        if removed:
            logger.info("User %s unfollowed %s", follower.pk, target.pk)

    def is_following(self, candidate, other) -> bool:
        """Return True when ``candidate`` is one of ``other``'s followers."""
        self._require(candidate, other)
        return self.repository.is_following(candidate.pk, other.pk)

    def followed_users(self, user) -> List[Any]:
        """Users ``user`` follows, in the order they were followed."""
        self._require(user)
        return self.repository.followed_users_of(user.pk)

    def followers(self, user) -> List[Any]:
        """Users following ``user``, in the order they followed."""
        self._require(user)
        return self.repository.followers_of(user.pk)

    def follower_count(self, user) -> int:
        self._require(user)
        return self.repository.count_followers(user.pk)

    def includes_myself(self, user) -> List[Any]:
        """Return ``user``'s id followed by the ids of the users they follow.

        This is the feed scope: the identities whose content ``user``'s feed shows.
        """
        self._require(user)
        return [user.pk] + [followed.pk for followed in self.repository.followed_users_of(user.pk)]

    def can_accept(self, user, listing) -> bool:
        """Return True when ``listing`` belongs to ``user``."""
        self._require(user)
        return any(owned.pk == listing.pk for owned in self.repository.listings_of(user.pk))

    def _require(self, *users) -> None:
        # Raises NotFound for the first user the store does not know.
        for user in users:
            self.repository.find_user(user.pk)


def default_social_graph() -> SocialGraph:
    """Social graph backed by the application database."""
    return SocialGraph(DjangoFollowRepository())
