"""Recommendation and game listing response schemas"""

import math
from pydantic import BaseModel
from typing import List, Optional, Sequence, Tuple, TypeVar

from .catalog import AvailabilityStatus

T = TypeVar("T")


class PageInfo(BaseModel):
    """Pagination window for a list of games"""

    current_page: int
    total_pages: int
    start_page: int
    end_page: int
    total_items: int
    per_page: int


def paginate(entries: Sequence[T], page: int, per_page: int) -> Tuple[List[T], PageInfo]:
    """
    Slice one page out of an ordered sequence

    Pages are 1-based; anything below 1 is treated as the first page.
    The page-link window starts two pages before the current one and
    spans at most nine pages.
    """
    current_page = max(page, 1)
    total_items = len(entries)
    total_pages = math.ceil(total_items / per_page)

    offset = (current_page - 1) * per_page
    window = list(entries[offset:offset + per_page])

    start_page = max(1, current_page - 2)
    info = PageInfo(
        current_page=current_page,
        total_pages=total_pages,
        start_page=start_page,
        end_page=min(total_pages, start_page + 8),
        total_items=total_items,
        per_page=per_page
    )

    return window, info


class GameSummary(BaseModel):
    """A game entry in the default catalog listing"""

    game_id: int
    name: str
    tags: List[str]
    platforms: List[str]
    availability: AvailabilityStatus


class GameListResponse(BaseModel):
    """Paginated default catalog listing"""

    games: List[GameSummary]
    page: PageInfo


class RecommendedGame(BaseModel):
    """A single recommended game"""

    game_id: int
    name: str
    score: int
    rank: int
    availability: AvailabilityStatus


class RecommendationResponse(BaseModel):
    """Paginated ranked recommendations for a member"""

    member_id: int
    recommendations: List[RecommendedGame]
    page: PageInfo


class ExplanationResponse(BaseModel):
    """Why a game would or would not be recommended to a member"""

    member_id: int
    game_id: int
    name: str
    matched_tags: List[str]
    matched_platforms: List[str]
    score: int
    excluded_reason: Optional[str] = None
    would_be_recommended: bool
