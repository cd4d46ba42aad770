"""Validated record shapes for data crossing the storage boundary."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from moviefeed.ports.catalog import Item, Preference, RelatedUser


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class _Record(BaseModel):
    # Seed exports may carry storage-specific keys such as "_id".
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True, allow_inf_nan=False)


class UserRecord(_Record):
    user_id: str = Field(min_length=1)
    name: str | None = None


class MovieRecord(_Record):
    movie_id: str = Field(min_length=1)
    genres: list[str] = Field(default_factory=list)
    release_date: datetime

    @field_validator("release_date")
    @classmethod
    def _release_date_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    def to_item(self) -> Item:
        return Item(
            movie_id=self.movie_id,
            genres=tuple(self.genres),
            release_date=self.release_date,
        )


class PreferenceRecord(_Record):
    user_id: str = Field(min_length=1)
    genre: str = Field(min_length=1)
    preference_score: float

    def to_preference(self) -> Preference:
        return Preference(
            user_id=self.user_id,
            genre=self.genre,
            preference_score=self.preference_score,
        )


class RelatedUserRecord(_Record):
    user_id: str = Field(min_length=1)
    related_user_id: str = Field(min_length=1)

    def to_related_user(self) -> RelatedUser:
        return RelatedUser(user_id=self.user_id, related_user_id=self.related_user_id)
