"""Pydantic schemas for engine inputs and API responses"""

from .catalog import (
    AvailabilityStatus,
    OrderStatus,
    Edition,
    CatalogItem,
    CatalogSnapshot,
    PreferenceProfile,
    ScoredItem,
    ScoreBreakdown,
)
from .recommendation import (
    PageInfo,
    paginate,
    GameSummary,
    GameListResponse,
    RecommendedGame,
    RecommendationResponse,
    ExplanationResponse,
)

__all__ = [
    "AvailabilityStatus",
    "OrderStatus",
    "Edition",
    "CatalogItem",
    "CatalogSnapshot",
    "PreferenceProfile",
    "ScoredItem",
    "ScoreBreakdown",
    "PageInfo",
    "paginate",
    "GameSummary",
    "GameListResponse",
    "RecommendedGame",
    "RecommendationResponse",
    "ExplanationResponse",
]
