"""Tests for relevance scoring"""

from catalog_recommender.services.scoring import explain, score
from conftest import AVAILABLE, NOT_FOR_SALE


def test_counts_tags_and_platforms(make_item, make_profile):
    item = make_item(1, tags=["Shooter", "3D"], editions=[("PS4", AVAILABLE)])
    profile = make_profile(tags=["Shooter", "3D"], platforms=["PS4"])

    assert score(item, profile) == 3


def test_platform_counted_once_per_item(make_item, make_profile):
    item = make_item(1, editions=[("PS4", AVAILABLE), ("PS4", NOT_FOR_SALE), ("PS4", AVAILABLE)])
    profile = make_profile(platforms=["PS4"])

    assert score(item, profile) == 1


def test_each_distinct_platform_counts(make_item, make_profile):
    item = make_item(1, editions=[("PS4", AVAILABLE), ("PC", AVAILABLE), ("XONE", AVAILABLE)])
    profile = make_profile(platforms=["PS4", "PC"])

    assert score(item, profile) == 2


def test_tags_not_multiplied_by_editions(make_item, make_profile):
    item = make_item(1, tags=["RPG"], editions=[("PS4", AVAILABLE), ("PC", AVAILABLE)])
    profile = make_profile(tags=["RPG"])

    assert score(item, profile) == 1


def test_matching_is_case_sensitive(make_item, make_profile):
    item = make_item(1, tags=["shooter"], editions=[("ps4", AVAILABLE)])
    profile = make_profile(tags=["Shooter"], platforms=["PS4"])

    assert score(item, profile) == 0


def test_empty_item_scores_zero(make_item, make_profile):
    profile = make_profile(tags=["Shooter"], platforms=["PS4"])

    assert score(make_item(1), profile) == 0


def test_unknown_identifiers_do_not_match(make_item, make_profile):
    item = make_item(1, tags=["Nonexistent"], editions=[("Dreamcast", AVAILABLE)])
    profile = make_profile(tags=["RPG"], platforms=["PC"])

    assert score(item, profile) == 0


def test_explain_lists_matches(make_item, make_profile):
    item = make_item(1, tags=["3D", "2D", "Shooter"], editions=[("PC", AVAILABLE), ("PS4", AVAILABLE)])
    profile = make_profile(tags=["Shooter", "3D", "RPG"], platforms=["PC"])

    breakdown = explain(item, profile)

    assert breakdown.item_id == 1
    assert breakdown.matched_tags == ("3D", "Shooter")
    assert breakdown.matched_platforms == ("PC",)
    assert breakdown.score == score(item, profile) == 3
