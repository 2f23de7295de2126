"""Ranking of filtered candidates by relevance score"""

from typing import Iterable, List

from ..schemas.catalog import CatalogItem, PreferenceProfile, ScoredItem
from ..utils.logging import get_logger
from .scoring import score

logger = get_logger(__name__)


def rank(items: Iterable[CatalogItem], profile: PreferenceProfile) -> List[ScoredItem]:
    """
    Order items by score, highest first

    Items scoring zero are dropped. Equal scores keep their input order: the
    input index is part of the sort key, so ties never depend on sort
    stability or on any other attribute of the item.
    """
    scored = []
    for index, item in enumerate(items):
        item_score = score(item, profile)
        if item_score > 0:
            scored.append((index, ScoredItem(item=item, score=item_score)))

    scored.sort(key=lambda entry: (-entry[1].score, entry[0]))

    logger.debug("Ranked candidates", ranked=len(scored))

    return [scored_item for _, scored_item in scored]
