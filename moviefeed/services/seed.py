"""Seed data ingestion: read JSON seed files and bulk-insert them once."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

import aiofiles
from pydantic import BaseModel, TypeAdapter, ValidationError
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from moviefeed.domain import models
from moviefeed.domain.records import (
    MovieRecord,
    PreferenceRecord,
    RelatedUserRecord,
    UserRecord,
)
from moviefeed.errors import SeedDataError

logger = logging.getLogger(__name__)

USERS_FILE = "user_data.json"
MOVIES_FILE = "movie_data.json"
PREFERENCES_FILE = "user_preference.json"
RELATED_USERS_FILE = "related_user.json"

RecordT = TypeVar("RecordT", bound=BaseModel)


@dataclass
class SeedBundle:
    users: list[UserRecord] = field(default_factory=list)
    movies: list[MovieRecord] = field(default_factory=list)
    preferences: list[PreferenceRecord] = field(default_factory=list)
    related_users: list[RelatedUserRecord] = field(default_factory=list)


async def _read_records(path: Path, record_type: type[RecordT]) -> list[RecordT]:
    """Load and validate one JSON array of records. Missing files are empty."""
    if not path.exists():
        logger.warning("Seed file not found, skipping: %s", path)
        return []

    try:
        async with aiofiles.open(path, "r", encoding="utf-8") as f:
            raw = await f.read()
    except UnicodeDecodeError as exc:
        raise SeedDataError(f"{path.name}: not valid UTF-8 ({exc.reason})") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SeedDataError(f"{path.name}: invalid JSON ({exc})") from exc
    if not isinstance(data, list):
        raise SeedDataError(f"{path.name}: expected a JSON array of records")

    try:
        records = TypeAdapter(list[record_type]).validate_python(data)
    except ValidationError as exc:
        raise SeedDataError(f"{path.name}: {exc.error_count()} invalid record(s)\n{exc}") from exc

    logger.info("Read %d records from %s", len(records), path.name)
    return records


async def read_seed_bundle(seed_dir: Path) -> SeedBundle:
    """Read every seed file in ``seed_dir``.

    Repeated ``user_id``/``movie_id`` values keep their first occurrence, so
    every backend sees the same records.
    """
    if not seed_dir.is_dir():
        logger.warning("Seed directory not found: %s", seed_dir)
        return SeedBundle()

    return SeedBundle(
        users=_first_by_key(await _read_records(seed_dir / USERS_FILE, UserRecord), "user_id", "user"),
        movies=_first_by_key(await _read_records(seed_dir / MOVIES_FILE, MovieRecord), "movie_id", "movie"),
        preferences=await _read_records(seed_dir / PREFERENCES_FILE, PreferenceRecord),
        related_users=await _read_records(seed_dir / RELATED_USERS_FILE, RelatedUserRecord),
    )


def _first_by_key(records: list[RecordT], key: str, label: str) -> list[RecordT]:
    seen: set[str] = set()
    unique: list[RecordT] = []
    for record in records:
        value = getattr(record, key)
        if value in seen:
            logger.warning("Duplicate %s %s in seed data, keeping the first", label, value)
            continue
        seen.add(value)
        unique.append(record)
    return unique


async def _table_is_empty(session: AsyncSession, model: type[models.Base]) -> bool:
    count = await session.scalar(select(func.count()).select_from(model))
    return not count


async def seed_database(
    session_factory: async_sessionmaker[AsyncSession],
    bundle: SeedBundle,
) -> dict[str, int]:
    """
    Insert seed records into empty tables.

    Tables that already hold rows are left untouched, so repeated startups
    never duplicate data. Returns the number of rows inserted per table.
    """
    users = _first_by_key(bundle.users, "user_id", "user")
    movies = _first_by_key(bundle.movies, "movie_id", "movie")

    rows_by_table: list[tuple[type[models.Base], list[models.Base]]] = [
        (
            models.User,
            [models.User(user_id=r.user_id, name=r.name) for r in users],
        ),
        (
            models.Movie,
            [
                models.Movie(movie_id=r.movie_id, genres=list(r.genres), release_date=r.release_date)
                for r in movies
            ],
        ),
        (
            models.Preference,
            [
                models.Preference(user_id=r.user_id, genre=r.genre, preference_score=r.preference_score)
                for r in bundle.preferences
            ],
        ),
        (
            models.RelatedUser,
            [
                models.RelatedUser(user_id=r.user_id, related_user_id=r.related_user_id)
                for r in bundle.related_users
            ],
        ),
    ]

    inserted: dict[str, int] = {}
    async with session_factory() as session:
        async with session.begin():
            for model, rows in rows_by_table:
                table = model.__tablename__
                if not await _table_is_empty(session, model):
                    logger.info("Table %s already populated, skipping seed", table)
                    inserted[table] = 0
                    continue
                session.add_all(rows)
                inserted[table] = len(rows)

    logger.info("Seed data loaded: %s", inserted)
    return inserted
