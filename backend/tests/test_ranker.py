"""Tests for the ranker"""

from catalog_recommender.services.ranker import rank
from conftest import AVAILABLE


def test_orders_by_score_descending(make_item, make_profile):
    items = [
        make_item(1, tags=["A"]),
        make_item(2, tags=["A", "B", "C"]),
        make_item(3, tags=["A", "B"]),
    ]
    profile = make_profile(tags=["A", "B", "C"])

    ranked = rank(items, profile)

    assert [entry.item.id for entry in ranked] == [2, 3, 1]
    assert [entry.score for entry in ranked] == [3, 2, 1]


def test_drops_zero_scores(make_item, make_profile):
    items = [make_item(1, tags=["A"]), make_item(2, tags=["Z"]), make_item(3)]
    profile = make_profile(tags=["A"])

    ranked = rank(items, profile)

    assert [entry.item.id for entry in ranked] == [1]
    assert all(entry.score > 0 for entry in ranked)


def test_ties_keep_input_order(make_item, make_profile):
    x = make_item(10, name="X", tags=["A"], editions=[("PS4", AVAILABLE)])
    y = make_item(20, name="Y", tags=["B"], editions=[("PS4", AVAILABLE)])
    profile = make_profile(tags=["A", "B"], platforms=["PS4"])

    assert [entry.item.name for entry in rank([x, y], profile)] == ["X", "Y"]
    assert [entry.item.name for entry in rank([y, x], profile)] == ["Y", "X"]


def test_ties_ignore_name_and_id(make_item, make_profile):
    """Tie-break is input position only, never alphabetical or by id"""

    items = [
        make_item(30, name="Zelda", tags=["A"]),
        make_item(10, name="Asteroids", tags=["A"]),
        make_item(20, name="Myst", tags=["A"]),
    ]
    profile = make_profile(tags=["A"])

    assert [entry.item.id for entry in rank(items, profile)] == [30, 10, 20]


def test_many_ties_interleaved_with_higher_scores(make_item, make_profile):
    items = [
        make_item(1, tags=["A"]),
        make_item(2, tags=["A", "B"]),
        make_item(3, tags=["A"]),
        make_item(4, tags=["A", "B"]),
        make_item(5, tags=["A"]),
    ]
    profile = make_profile(tags=["A", "B"])

    assert [entry.item.id for entry in rank(items, profile)] == [2, 4, 1, 3, 5]


def test_empty_input(make_profile):
    assert rank([], make_profile(tags=["A"])) == []
