"""Read-only catalog and member projections consumed by the recommendation engine"""

from pydantic import BaseModel, ConfigDict, Field
from typing import FrozenSet, Tuple
from enum import Enum


class AvailabilityStatus(str, Enum):
    """Sale status of an edition, and of a game aggregated over its editions"""

    PRE_ORDER = "pre_order"
    AVAILABLE = "available"
    DISCONTINUED_BY_MANUFACTURER = "discontinued_by_manufacturer"
    NOT_FOR_SALE = "not_for_sale"


class OrderStatus(str, Enum):
    """Processing status of a web order"""

    PENDING = "pending"
    PROCESSED = "processed"
    CANCELLED = "cancelled"


class Edition(BaseModel):
    """A platform-specific, sellable version of a game"""

    model_config = ConfigDict(frozen=True)

    platform: str
    availability: AvailabilityStatus


class CatalogItem(BaseModel):
    """A game as seen by the engine: tags, editions and catalog position"""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    tags: FrozenSet[str] = frozenset()
    editions: Tuple[Edition, ...] = ()
    position: int = 0

    @property
    def platforms(self) -> FrozenSet[str]:
        """Distinct platforms across all editions"""
        return frozenset(edition.platform for edition in self.editions)


class CatalogSnapshot(BaseModel):
    """Candidate items in catalog order"""

    model_config = ConfigDict(frozen=True)

    items: Tuple[CatalogItem, ...] = ()

    def get(self, item_id: int):
        for item in self.items:
            if item.id == item_id:
                return item
        return None


class PreferenceProfile(BaseModel):
    """A member's stated favorites and the games they have already bought"""

    model_config = ConfigDict(frozen=True)

    member_id: int
    favorite_tags: FrozenSet[str] = frozenset()
    favorite_platforms: FrozenSet[str] = frozenset()
    purchased_ids: FrozenSet[int] = frozenset()

    @property
    def has_preferences(self) -> bool:
        return bool(self.favorite_tags or self.favorite_platforms)


class ScoredItem(BaseModel):
    """A candidate paired with its relevance score"""

    model_config = ConfigDict(frozen=True)

    item: CatalogItem
    score: int = Field(..., ge=0)


class ScoreBreakdown(BaseModel):
    """Which favorites an item matched, and the resulting score"""

    model_config = ConfigDict(frozen=True)

    item_id: int
    matched_tags: Tuple[str, ...] = ()
    matched_platforms: Tuple[str, ...] = ()

    @property
    def score(self) -> int:
        return len(self.matched_tags) + len(self.matched_platforms)
