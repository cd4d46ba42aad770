"""Initial schema.

Revision ID: 001
Revises:
Create Date: 2026-10-17 00:00:00.000000
"""

import sqlalchemy as sa

from alembic import op

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Users
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(100), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
    )
    op.create_index("ix_users_user_id", "users", ["user_id"], unique=True)

    # Movies
    op.create_table(
        "movies",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("movie_id", sa.String(100), nullable=False),
        sa.Column("genres", sa.JSON, nullable=False),
        sa.Column("release_date", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_movies_movie_id", "movies", ["movie_id"], unique=True)

    # Genre preferences (duplicates allowed, all of them score)
    op.create_table(
        "preferences",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(100), nullable=False),
        sa.Column("genre", sa.String(100), nullable=False),
        sa.Column("preference_score", sa.Float, nullable=False),
    )
    op.create_index("ix_preferences_user_id", "preferences", ["user_id"])

    # Directed user relations
    op.create_table(
        "related_users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(100), nullable=False),
        sa.Column("related_user_id", sa.String(100), nullable=False),
    )
    op.create_index("ix_related_users_user_id", "related_users", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_related_users_user_id", table_name="related_users")
    op.drop_table("related_users")
    op.drop_index("ix_preferences_user_id", table_name="preferences")
    op.drop_table("preferences")
    op.drop_index("ix_movies_movie_id", table_name="movies")
    op.drop_table("movies")
    op.drop_index("ix_users_user_id", table_name="users")
    op.drop_table("users")
