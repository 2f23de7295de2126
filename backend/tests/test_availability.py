"""Tests for availability aggregation"""

import pytest

from catalog_recommender.schemas import AvailabilityStatus, Edition
from catalog_recommender.services.availability import aggregate_availability


def editions(*statuses):
    return [Edition(platform="PS4", availability=status) for status in statuses]


def test_no_editions_is_not_for_sale():
    assert aggregate_availability([]) == AvailabilityStatus.NOT_FOR_SALE


@pytest.mark.parametrize("status", list(AvailabilityStatus))
def test_single_edition_status_is_kept(status):
    assert aggregate_availability(editions(status)) == status


def test_pre_order_beats_available():
    result = aggregate_availability(editions(
        AvailabilityStatus.AVAILABLE,
        AvailabilityStatus.PRE_ORDER
    ))

    assert result == AvailabilityStatus.PRE_ORDER


def test_available_beats_discontinued():
    result = aggregate_availability(editions(
        AvailabilityStatus.DISCONTINUED_BY_MANUFACTURER,
        AvailabilityStatus.AVAILABLE
    ))

    assert result == AvailabilityStatus.AVAILABLE


def test_discontinued_beats_not_for_sale():
    result = aggregate_availability(editions(
        AvailabilityStatus.NOT_FOR_SALE,
        AvailabilityStatus.DISCONTINUED_BY_MANUFACTURER
    ))

    assert result == AvailabilityStatus.DISCONTINUED_BY_MANUFACTURER


def test_one_of_each_status_is_pre_order():
    result = aggregate_availability(editions(
        AvailabilityStatus.AVAILABLE,
        AvailabilityStatus.DISCONTINUED_BY_MANUFACTURER,
        AvailabilityStatus.NOT_FOR_SALE,
        AvailabilityStatus.PRE_ORDER
    ))

    assert result == AvailabilityStatus.PRE_ORDER


def test_not_a_majority_vote():
    """A single available edition outweighs several that are not for sale"""

    result = aggregate_availability(editions(
        AvailabilityStatus.NOT_FOR_SALE,
        AvailabilityStatus.NOT_FOR_SALE,
        AvailabilityStatus.AVAILABLE
    ))

    assert result == AvailabilityStatus.AVAILABLE
