"""In-process catalog adapter backed by plain lists."""

import logging
from collections import defaultdict
from collections.abc import Iterable
from typing import TYPE_CHECKING

from moviefeed.ports.catalog import CatalogPort, Item, Preference, RelatedUser

if TYPE_CHECKING:
    from moviefeed.services.seed import SeedBundle

logger = logging.getLogger(__name__)


class InMemoryCatalogAdapter(CatalogPort):
    """Serve lookups from records held in memory."""

    def __init__(
        self,
        items: Iterable[Item] = (),
        preferences: Iterable[Preference] = (),
        related_users: Iterable[RelatedUser] = (),
    ) -> None:
        self._items = list(items)
        self._preferences: dict[str, list[Preference]] = defaultdict(list)
        self._related: dict[str, list[RelatedUser]] = defaultdict(list)
        for preference in preferences:
            self._preferences[preference.user_id].append(preference)
        for edge in related_users:
            self._related[edge.user_id].append(edge)

    @classmethod
    def from_seed(cls, bundle: "SeedBundle") -> "InMemoryCatalogAdapter":
        adapter = cls(
            items=[record.to_item() for record in bundle.movies],
            preferences=[record.to_preference() for record in bundle.preferences],
            related_users=[record.to_related_user() for record in bundle.related_users],
        )
        logger.info(
            "InMemoryCatalog loaded: %d movies, %d preferences, %d relations",
            len(bundle.movies),
            len(bundle.preferences),
            len(bundle.related_users),
        )
        return adapter

    async def get_catalog(self) -> list[Item]:
        return list(self._items)

    async def get_preferences(self, user_id: str) -> list[Preference]:
        return list(self._preferences.get(user_id, ()))

    async def get_related_users(self, user_id: str) -> list[RelatedUser]:
        return list(self._related.get(user_id, ()))
