import os
import tempfile
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
TEST_DB_PATH = Path(tempfile.gettempdir()) / "moviefeed-test.db"

# Settings are read at import time, so the environment must be set first.
os.environ.setdefault("MOVIEFEED_DATABASE_URL", f"sqlite+aiosqlite:///{TEST_DB_PATH}")
os.environ.setdefault("MOVIEFEED_SEED_DATA_DIR", str(PROJECT_ROOT / "data"))
os.environ.setdefault("MOVIEFEED_CATALOG_BACKEND", "sql")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from moviefeed.domain.models import Base  # noqa: E402
from moviefeed.ports.catalog import Item, Preference, RelatedUser  # noqa: E402

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


def years_ago(years: float) -> datetime:
    return NOW - timedelta(days=365 * years)


def make_item(movie_id: str, genres: list[str], age_years: float = 0.0) -> Item:
    return Item(movie_id=movie_id, genres=tuple(genres), release_date=years_ago(age_years))


def make_pref(user_id: str, genre: str, score: float) -> Preference:
    return Preference(user_id=user_id, genre=genre, preference_score=score)


def make_edge(user_id: str, related_user_id: str) -> RelatedUser:
    return RelatedUser(user_id=user_id, related_user_id=related_user_id)


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
async def session_factory(tmp_path: Path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """A fresh SQLite database with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()
