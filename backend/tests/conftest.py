"""Shared test configuration"""

import os

# Point the application at SQLite before anything imports the database module
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")

import pytest

from catalog_recommender.schemas import AvailabilityStatus, CatalogItem, Edition, PreferenceProfile


@pytest.fixture
def make_item():
    """Build a catalog item from tag names and (platform, status) pairs"""

    def _make_item(item_id, tags=(), editions=(), name=None, position=None):
        return CatalogItem(
            id=item_id,
            name=name or f"Game {item_id}",
            tags=frozenset(tags),
            editions=tuple(
                Edition(platform=platform, availability=availability)
                for platform, availability in editions
            ),
            position=item_id if position is None else position
        )

    return _make_item


@pytest.fixture
def make_profile():
    """Build a preference profile"""

    def _make_profile(tags=(), platforms=(), purchased=(), member_id=1):
        return PreferenceProfile(
            member_id=member_id,
            favorite_tags=frozenset(tags),
            favorite_platforms=frozenset(platforms),
            purchased_ids=frozenset(purchased)
        )

    return _make_profile


AVAILABLE = AvailabilityStatus.AVAILABLE
PRE_ORDER = AvailabilityStatus.PRE_ORDER
DISCONTINUED = AvailabilityStatus.DISCONTINUED_BY_MANUFACTURER
NOT_FOR_SALE = AvailabilityStatus.NOT_FOR_SALE
