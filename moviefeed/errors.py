"""Exceptions raised by the feed service."""


class MovieFeedError(Exception):
    """Base class for all feed service errors."""


class RetrievalFailure(MovieFeedError):
    """A catalog, preference or related-user lookup failed."""

    def __init__(self, lookup: str, message: str | None = None) -> None:
        self.lookup = lookup
        super().__init__(message or f"{lookup} lookup failed")


class SeedDataError(MovieFeedError):
    """A seed data file is malformed or contains invalid records."""
