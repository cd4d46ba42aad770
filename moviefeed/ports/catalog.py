"""Catalog port: read-only lookups the feed scorer depends on."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Item:
    """A catalog movie as seen by the scorer."""

    movie_id: str
    genres: tuple[str, ...]
    release_date: datetime


@dataclass(frozen=True)
class Preference:
    """A user's affinity for one genre."""

    user_id: str
    genre: str
    preference_score: float


@dataclass(frozen=True)
class RelatedUser:
    """Directed edge: ``related_user_id`` influences ``user_id``'s feed."""

    user_id: str
    related_user_id: str


@dataclass
class ScoredItem:
    item: Item
    score: float


class CatalogPort(ABC):
    """Abstraction over movie, preference and relation storage.

    Implementations raise ``RetrievalFailure`` when storage cannot be read.
    Unknown user ids yield empty lists, never an error.
    """

    @abstractmethod
    async def get_catalog(self) -> list[Item]:
        """Return every movie in the catalog."""
        ...

    @abstractmethod
    async def get_preferences(self, user_id: str) -> list[Preference]:
        """Return all genre preferences recorded for a user."""
        ...

    @abstractmethod
    async def get_related_users(self, user_id: str) -> list[RelatedUser]:
        """Return the outgoing relation edges of a user."""
        ...
