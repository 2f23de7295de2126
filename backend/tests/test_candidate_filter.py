"""Tests for candidate filtering"""

from catalog_recommender.services.candidate_filter import (
    CandidateFilter,
    FilterAlreadyPurchasedRule,
    FilterNotForSaleRule,
    filter_candidates,
)
from conftest import AVAILABLE, DISCONTINUED, NOT_FOR_SALE, PRE_ORDER


def test_removes_not_for_sale(make_item):
    catalog = [
        make_item(1, editions=[("PS4", AVAILABLE)]),
        make_item(2, editions=[("PS4", NOT_FOR_SALE)]),
        make_item(3, editions=[("PC", DISCONTINUED)]),
        make_item(4, editions=[("PC", PRE_ORDER)]),
    ]

    result = filter_candidates(catalog, frozenset())

    assert [item.id for item in result] == [1, 3, 4]


def test_removes_games_without_editions(make_item):
    catalog = [make_item(1, tags=["RPG"]), make_item(2, editions=[("PC", AVAILABLE)])]

    result = filter_candidates(catalog, frozenset())

    assert [item.id for item in result] == [2]


def test_removes_purchased(make_item):
    catalog = [make_item(item_id, editions=[("PS4", AVAILABLE)]) for item_id in (1, 2, 3)]

    result = filter_candidates(catalog, frozenset({2}))

    assert [item.id for item in result] == [1, 3]


def test_preserves_catalog_order(make_item):
    catalog = [
        make_item(item_id, editions=[("PS4", AVAILABLE)])
        for item_id in (9, 4, 7, 1, 5)
    ]

    result = filter_candidates(catalog, frozenset({7}))

    assert [item.id for item in result] == [9, 4, 1, 5]


def test_does_not_mutate_input(make_item):
    catalog = [make_item(1, editions=[("PS4", NOT_FOR_SALE)])]

    filter_candidates(catalog, frozenset())

    assert len(catalog) == 1


def test_rules_run_by_priority():
    candidate_filter = CandidateFilter(rules=[FilterAlreadyPurchasedRule(), FilterNotForSaleRule()])

    names = [rule["name"] for rule in candidate_filter.get_rules_summary()]

    assert names == ["filter_not_for_sale", "filter_purchased"]


def test_remove_rule(make_item):
    candidate_filter = CandidateFilter()
    candidate_filter.remove_rule("filter_purchased")

    catalog = [make_item(1, editions=[("PS4", AVAILABLE)])]

    assert candidate_filter.filter(catalog, frozenset({1})) == catalog
