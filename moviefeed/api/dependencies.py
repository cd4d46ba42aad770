"""FastAPI dependencies shared by routes."""

from fastapi import Request

from moviefeed.services.scorer import Scorer


def get_scorer(request: Request) -> Scorer:
    """Return the scorer built during application startup."""
    return request.app.state.scorer
