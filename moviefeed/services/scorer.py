"""
Personalized feed scoring.

Each catalog movie gets a relevance score built from three signals:

  1. Recency: a Gaussian over the movie's age in years,
     ``exp(-age**2 / 2)``, equal to 1.0 at release and symmetric for
     past and future dates.
  2. Own preferences: every preference of the user whose genre appears in
     the movie's genres adds its score.
  3. Related users: every preference of every directly related user whose
     genre appears in the movie's genres adds its score, unweighted.

Related-user preferences are fetched once per request, concurrently, and
fully awaited before any movie is scored. The top ``limit`` movies by score
form the feed.
"""

import asyncio
import logging
import math
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from moviefeed.ports.catalog import CatalogPort, Item, Preference, ScoredItem

logger = logging.getLogger(__name__)

DEFAULT_FEED_LIMIT = 10
SECONDS_PER_YEAR = 365 * 24 * 60 * 60


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def age_in_years(release_date: datetime, now: datetime) -> float:
    """Years since release; negative for movies released in the future."""
    return (now - release_date).total_seconds() / SECONDS_PER_YEAR


def time_score(age_years: float) -> float:
    """Gaussian recency decay in (0, 1], peaking at release."""
    return math.exp(-(age_years**2) / 2)


def preference_score(item: Item, preferences: Iterable[Preference]) -> float:
    """Sum of the scores of all preferences matching one of the item's genres."""
    genres = set(item.genres)
    return sum(p.preference_score for p in preferences if p.genre in genres)


def score_item(item: Item, preferences: Iterable[Preference], now: datetime) -> float:
    return time_score(age_in_years(item.release_date, now)) + preference_score(
        item, preferences
    )


class Scorer:
    """Ranks the catalog for a user."""

    def __init__(
        self,
        catalog: CatalogPort,
        limit: int = DEFAULT_FEED_LIMIT,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._catalog = catalog
        self._limit = limit
        self._clock = clock

    async def collect_preferences(self, user_id: str) -> list[Preference]:
        """Own preferences followed by those of every related user."""
        own = await self._catalog.get_preferences(user_id)
        related = await self._catalog.get_related_users(user_id)
        lookups = [
            asyncio.ensure_future(self._catalog.get_preferences(edge.related_user_id))
            for edge in related
        ]
        try:
            related_preferences = await asyncio.gather(*lookups)
        except BaseException:
            # One failed lookup aborts the request; stop the rest.
            for lookup in lookups:
                lookup.cancel()
            raise

        combined = list(own)
        for preferences in related_preferences:
            combined.extend(preferences)
        logger.debug(
            "User %s: %d own preferences, %d related users, %d combined preferences",
            user_id,
            len(own),
            len(related),
            len(combined),
        )
        return combined

    async def score(self, user_id: str) -> list[ScoredItem]:
        """Score the whole catalog for a user, best first."""
        preferences = await self.collect_preferences(user_id)
        items = await self._catalog.get_catalog()
        now = self._clock()

        scored = [
            ScoredItem(item=item, score=score_item(item, preferences, now))
            for item in items
        ]
        scored.sort(key=lambda s: s.score, reverse=True)
        logger.debug("User %s: scored %d catalog items", user_id, len(scored))
        return scored

    async def rank(self, user_id: str) -> list[Item]:
        """Return at most ``limit`` items, highest score first."""
        scored = await self.score(user_id)
        return [s.item for s in scored[: self._limit]]
