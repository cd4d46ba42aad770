"""SQLAlchemy ORM models."""

from sqlalchemy import JSON, Column, DateTime, Float, Integer, String
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(100), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)


class Movie(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    movie_id = Column(String(100), unique=True, nullable=False, index=True)
    genres = Column(JSON, nullable=False, default=list)
    release_date = Column(DateTime(timezone=True), nullable=False)


class Preference(Base):
    __tablename__ = "preferences"

    # No uniqueness on (user_id, genre): duplicate rows all contribute to scores.
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(100), nullable=False, index=True)
    genre = Column(String(100), nullable=False)
    preference_score = Column(Float, nullable=False)


class RelatedUser(Base):
    __tablename__ = "related_users"

    # Edges may point at users that were never seeded, so no foreign keys.
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(100), nullable=False, index=True)
    related_user_id = Column(String(100), nullable=False)
