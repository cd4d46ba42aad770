"""SQLAlchemy-backed catalog adapter."""

import logging
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from moviefeed.domain import models
from moviefeed.domain.records import ensure_utc
from moviefeed.errors import RetrievalFailure
from moviefeed.ports.catalog import CatalogPort, Item, Preference, RelatedUser

logger = logging.getLogger(__name__)


class SqlCatalogAdapter(CatalogPort):
    """Read movies, preferences and relations from the relational store.

    Every lookup runs in its own session, so lookups may be awaited
    concurrently by the scorer.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def _fetch(self, lookup: str, stmt: Select) -> list[Any]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return list(result.scalars().all())
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Catalog lookup '%s' failed: %s", lookup, exc)
            raise RetrievalFailure(lookup) from exc

    async def get_catalog(self) -> list[Item]:
        rows = await self._fetch("catalog", select(models.Movie).order_by(models.Movie.id))
        return [
            Item(
                movie_id=row.movie_id,
                genres=tuple(row.genres or ()),
                release_date=ensure_utc(row.release_date),
            )
            for row in rows
        ]

    async def get_preferences(self, user_id: str) -> list[Preference]:
        rows = await self._fetch(
            "preferences",
            select(models.Preference)
            .where(models.Preference.user_id == user_id)
            .order_by(models.Preference.id),
        )
        return [
            Preference(
                user_id=row.user_id,
                genre=row.genre,
                preference_score=float(row.preference_score),
            )
            for row in rows
        ]

    async def get_related_users(self, user_id: str) -> list[RelatedUser]:
        rows = await self._fetch(
            "related_users",
            select(models.RelatedUser)
            .where(models.RelatedUser.user_id == user_id)
            .order_by(models.RelatedUser.id),
        )
        return [
            RelatedUser(user_id=row.user_id, related_user_id=row.related_user_id)
            for row in rows
        ]
