"""Errors raised by the social graph service and its repositories."""


class SocialGraphError(Exception):
    """Base class for social graph failures."""


class NotFound(SocialGraphError):
    """A referenced user or listing does not exist."""

    def __init__(self, kind: str, identifier):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} {identifier!r} not found")


class PersistenceFailure(SocialGraphError):
    """The underlying store rejected or failed a read/write."""


class SelfFollowError(SocialGraphError):
    """A user attempted to follow themselves."""
