"""Personalized feed routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from moviefeed.api.dependencies import get_scorer
from moviefeed.api.schemas import MovieResponse
from moviefeed.errors import RetrievalFailure
from moviefeed.services.scorer import Scorer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Feed"])


@router.get("/feed/{user_id}", response_model=list[MovieResponse])
async def get_feed(
    user_id: str,
    scorer: Scorer = Depends(get_scorer),
) -> list[MovieResponse]:
    """Return the highest-scoring movies for a user, best first."""
    try:
        items = await scorer.rank(user_id)
    except RetrievalFailure as exc:
        logger.error("Error generating personalized feed for %s: %s", user_id, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from exc

    return [MovieResponse.model_validate(item) for item in items]
