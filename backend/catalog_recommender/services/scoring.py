"""Rule-based relevance score of a game for a member"""

from ..schemas.catalog import CatalogItem, PreferenceProfile, ScoreBreakdown


def explain(item: CatalogItem, profile: PreferenceProfile) -> ScoreBreakdown:
    """
    List the favorites an item matches

    Tags match one for one. Platforms are matched once per distinct
    platform, however many editions share it.
    """
    matched_tags = item.tags & profile.favorite_tags
    matched_platforms = item.platforms & profile.favorite_platforms

    return ScoreBreakdown(
        item_id=item.id,
        matched_tags=tuple(sorted(matched_tags)),
        matched_platforms=tuple(sorted(matched_platforms))
    )


def score(item: CatalogItem, profile: PreferenceProfile) -> int:
    """Number of favorite tags plus number of favorite platforms the item matches"""
    return (
        len(item.tags & profile.favorite_tags)
        + len(item.platforms & profile.favorite_platforms)
    )
