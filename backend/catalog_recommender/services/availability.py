"""Aggregate availability of a game from the availability of its editions"""

from typing import Iterable

from ..schemas.catalog import AvailabilityStatus, Edition

# Checked in order; the first status held by any edition wins
AVAILABILITY_PRIORITY = (
    AvailabilityStatus.PRE_ORDER,
    AvailabilityStatus.AVAILABLE,
    AvailabilityStatus.DISCONTINUED_BY_MANUFACTURER,
)


def aggregate_availability(editions: Iterable[Edition]) -> AvailabilityStatus:
    """
    Reduce edition statuses to a single game-level status

    A game with a pre-order edition is a pre-order, otherwise a game with an
    available edition is available, otherwise one with a discontinued edition
    is discontinued. Anything else, including a game with no editions at
    all, is not for sale.
    """
    statuses = {edition.availability for edition in editions}

    for status in AVAILABILITY_PRIORITY:
        if status in statuses:
            return status

    return AvailabilityStatus.NOT_FOR_SALE
