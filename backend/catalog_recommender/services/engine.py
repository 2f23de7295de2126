"""
Recommendation Engine

Selects and orders catalog games for a member from their favorite tags,
favorite platforms and purchase history. The engine is a pure function of a
catalog snapshot and a preference profile: it holds no state between calls
and performs no I/O.
"""

from typing import List, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict

from ..schemas.catalog import CatalogItem, CatalogSnapshot, PreferenceProfile, ScoredItem
from ..utils.logging import get_logger
from .candidate_filter import CandidateFilter
from .ranker import rank

logger = get_logger(__name__)


class Bypass(BaseModel):
    """The member stated no preferences; show the default listing instead"""

    model_config = ConfigDict(frozen=True)

    member_id: int


class Ranked(BaseModel):
    """Ranked recommendations, possibly empty"""

    model_config = ConfigDict(frozen=True)

    member_id: int
    entries: Tuple[ScoredItem, ...] = ()

    @property
    def items(self) -> List[CatalogItem]:
        return [entry.item for entry in self.entries]


RecommendationResult = Union[Bypass, Ranked]


class RecommendationEngine:
    """Filter, score and rank a catalog for one member"""

    def __init__(self, candidate_filter: Optional[CandidateFilter] = None):
        self.candidate_filter = candidate_filter or CandidateFilter()

    def recommend(
        self,
        catalog: CatalogSnapshot,
        profile: PreferenceProfile
    ) -> RecommendationResult:
        """
        Recommend games to a member

        Args:
            catalog: Snapshot of the catalog in catalog order
            profile: The member's favorites and purchased game ids

        Returns:
            Bypass when the member has neither favorite tags nor favorite
            platforms, otherwise Ranked with the surviving games ordered by
            score (ties in catalog order).
        """
        if not profile.has_preferences:
            logger.info("No stated preferences, bypassing recommendations", member_id=profile.member_id)
            return Bypass(member_id=profile.member_id)

        candidates = self.candidate_filter.filter(catalog.items, profile.purchased_ids)
        entries = rank(candidates, profile)

        logger.info(
            "Generated recommendations",
            member_id=profile.member_id,
            catalog_size=len(catalog.items),
            candidates=len(candidates),
            recommended=len(entries)
        )

        return Ranked(member_id=profile.member_id, entries=tuple(entries))


def recommend(catalog: CatalogSnapshot, profile: PreferenceProfile) -> RecommendationResult:
    """Recommend with the default candidate filter"""
    return RecommendationEngine().recommend(catalog, profile)
