"""Pydantic response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class MovieResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    movie_id: str
    genres: list[str]
    release_date: datetime


class HealthResponse(BaseModel):
    status: str
    service: str
