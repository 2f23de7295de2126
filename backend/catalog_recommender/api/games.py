"""Game listing endpoints"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..config import settings
from ..schemas.catalog import AvailabilityStatus
from ..schemas.recommendation import GameListResponse, GameSummary, paginate
from ..services.availability import aggregate_availability
from ..services.stores import CatalogStore
from ..utils.database import get_db

router = APIRouter()


@router.get("/", response_model=GameListResponse)
def list_games(
    page: int = Query(1, description="Page number, 1-based"),
    db: Session = Depends(get_db)
):
    """
    Default catalog listing

    Games that are for sale in at least one edition, ordered by name. This is
    where members without stated preferences are sent instead of receiving
    recommendations.
    """

    snapshot = CatalogStore(db).get_snapshot()

    listed = []
    for item in snapshot.items:
        availability = aggregate_availability(item.editions)
        if availability == AvailabilityStatus.NOT_FOR_SALE:
            continue
        listed.append(GameSummary(
            game_id=item.id,
            name=item.name,
            tags=sorted(item.tags),
            platforms=sorted(item.platforms),
            availability=availability
        ))

    listed.sort(key=lambda game: game.name)

    games, page_info = paginate(listed, page, settings.RECOMMENDATIONS_PER_PAGE)

    return GameListResponse(games=games, page=page_info)
