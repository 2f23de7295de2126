"""Recommendation API endpoints"""

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from ..config import settings
from ..schemas.catalog import AvailabilityStatus
from ..schemas.recommendation import (
    ExplanationResponse,
    RecommendationResponse,
    RecommendedGame,
    paginate,
)
from ..services.availability import aggregate_availability
from ..services.engine import Bypass, RecommendationEngine
from ..services.scoring import explain
from ..services.stores import CatalogStore, MemberNotFoundError, MemberProfileStore
from ..utils.database import get_db
from ..utils.logging import get_logger
from ..utils.metrics import record_bypass, record_ranked, track_recommendation_time
from ..utils.rate_limit import limiter

router = APIRouter()
logger = get_logger(__name__)


def get_recommendation_engine() -> RecommendationEngine:
    """Engine dependency; overridable in tests"""
    return RecommendationEngine()


def _load_profile(db: Session, member_id: int):
    try:
        return MemberProfileStore(db).get_profile(member_id)
    except MemberNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Member not found"
        )


@track_recommendation_time("request")
def _recommend(engine: RecommendationEngine, db: Session, member_id: int):
    # Catalog and profile come from one session so they describe the same state
    profile = _load_profile(db, member_id)
    catalog = CatalogStore(db).get_snapshot()
    return engine.recommend(catalog, profile)


@router.get("/{member_id}", response_model=RecommendationResponse)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
def get_recommendations(
    request: Request,
    member_id: int,
    page: int = Query(1, description="Page number, 1-based"),
    db: Session = Depends(get_db),
    engine: RecommendationEngine = Depends(get_recommendation_engine)
):
    """
    Get personalized game recommendations for a member

    Members without favorite tags or platforms are redirected to the default
    game listing. Otherwise games are ranked by how many favorite tags and
    platforms they match; games the member already bought or that are not
    for sale never appear.
    """

    result = _recommend(engine, db, member_id)

    if isinstance(result, Bypass):
        record_bypass()
        url = f"{request.url_for('list_games')}?page={page}"
        logger.info("Redirecting to default listing", member_id=member_id)
        return RedirectResponse(url=url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)

    record_ranked(len(result.entries))

    entries, page_info = paginate(result.entries, page, settings.RECOMMENDATIONS_PER_PAGE)
    first_rank = (page_info.current_page - 1) * page_info.per_page + 1

    recommendations = [
        RecommendedGame(
            game_id=entry.item.id,
            name=entry.item.name,
            score=entry.score,
            rank=rank,
            availability=aggregate_availability(entry.item.editions)
        )
        for rank, entry in enumerate(entries, first_rank)
    ]

    return RecommendationResponse(
        member_id=member_id,
        recommendations=recommendations,
        page=page_info
    )


@router.get("/{member_id}/explain/{game_id}", response_model=ExplanationResponse)
def explain_recommendation(
    member_id: int,
    game_id: int,
    db: Session = Depends(get_db)
):
    """
    Explain a game's score for a member

    Returns the favorite tags and platforms the game matches and, when the
    game is filtered out before ranking, the reason it is excluded.
    """

    profile = _load_profile(db, member_id)

    item = CatalogStore(db).get_snapshot().get(game_id)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Game not found"
        )

    breakdown = explain(item, profile)

    excluded_reason = None
    if aggregate_availability(item.editions) == AvailabilityStatus.NOT_FOR_SALE:
        excluded_reason = "not_for_sale"
    elif item.id in profile.purchased_ids:
        excluded_reason = "purchased"

    return ExplanationResponse(
        member_id=member_id,
        game_id=item.id,
        name=item.name,
        matched_tags=list(breakdown.matched_tags),
        matched_platforms=list(breakdown.matched_platforms),
        score=breakdown.score,
        excluded_reason=excluded_reason,
        would_be_recommended=(
            profile.has_preferences and excluded_reason is None and breakdown.score > 0
        )
    )
