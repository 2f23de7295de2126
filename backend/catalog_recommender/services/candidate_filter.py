"""Candidate filtering: drop games that must never be recommended"""

from typing import AbstractSet, Dict, Iterable, List, Optional, Any

from ..schemas.catalog import AvailabilityStatus, CatalogItem
from ..utils.logging import get_logger
from .availability import aggregate_availability

logger = get_logger(__name__)


class FilterRule:
    """Base class for candidate filter rules"""

    def __init__(self, name: str, priority: int = 0):
        self.name = name
        self.priority = priority  # Higher priority rules execute first

    def apply(
        self,
        candidates: List[CatalogItem],
        excluded_ids: AbstractSet[int]
    ) -> List[CatalogItem]:
        """
        Apply the filter rule

        Args:
            candidates: Items in catalog order
            excluded_ids: Ids of items the member has already purchased

        Returns:
            The surviving items, in their original relative order
        """
        raise NotImplementedError


class FilterNotForSaleRule(FilterRule):
    """Remove games that are no longer sold in any edition"""

    def __init__(self):
        super().__init__("filter_not_for_sale", priority=100)

    def apply(
        self,
        candidates: List[CatalogItem],
        excluded_ids: AbstractSet[int]
    ) -> List[CatalogItem]:
        return [
            item for item in candidates
            if aggregate_availability(item.editions) != AvailabilityStatus.NOT_FOR_SALE
        ]


class FilterAlreadyPurchasedRule(FilterRule):
    """Remove games the member has already bought"""

    def __init__(self):
        super().__init__("filter_purchased", priority=90)

    def apply(
        self,
        candidates: List[CatalogItem],
        excluded_ids: AbstractSet[int]
    ) -> List[CatalogItem]:
        if not excluded_ids:
            return candidates

        return [item for item in candidates if item.id not in excluded_ids]


class CandidateFilter:
    """
    Applies filter rules to a catalog, in priority order

    Every rule keeps the relative order of what it lets through, so the
    output is always a subsequence of the catalog order.
    """

    def __init__(self, rules: Optional[Iterable[FilterRule]] = None):
        self.rules: List[FilterRule] = []

        if rules is None:
            self._load_default_rules()
        else:
            for rule in rules:
                self.add_rule(rule)

    def _load_default_rules(self):
        self.add_rule(FilterNotForSaleRule())
        self.add_rule(FilterAlreadyPurchasedRule())

    def add_rule(self, rule: FilterRule):
        """Add a filter rule"""
        self.rules.append(rule)
        self.rules.sort(key=lambda r: r.priority, reverse=True)
        logger.debug("Added filter rule", rule=rule.name, priority=rule.priority)

    def remove_rule(self, rule_name: str):
        """Remove a filter rule by name"""
        self.rules = [r for r in self.rules if r.name != rule_name]
        logger.debug("Removed filter rule", rule=rule_name)

    def filter(
        self,
        catalog: Iterable[CatalogItem],
        excluded_ids: AbstractSet[int]
    ) -> List[CatalogItem]:
        """
        Remove items that cannot be recommended

        Args:
            catalog: Items in catalog order
            excluded_ids: Ids of items the member has already purchased

        Returns:
            Remaining items, order preserved
        """
        result = list(catalog)
        initial_count = len(result)

        for rule in self.rules:
            before_count = len(result)
            result = rule.apply(result, excluded_ids)

            if before_count != len(result):
                logger.debug(
                    "Filter rule removed candidates",
                    rule=rule.name,
                    before=before_count,
                    after=len(result)
                )

        logger.debug("Filtered candidates", before=initial_count, after=len(result))

        return result

    def get_rules_summary(self) -> List[Dict[str, Any]]:
        """Get summary of all active rules"""
        return [
            {"name": rule.name, "priority": rule.priority}
            for rule in self.rules
        ]


def filter_candidates(
    catalog: Iterable[CatalogItem],
    excluded_ids: AbstractSet[int]
) -> List[CatalogItem]:
    """Filter a catalog with the default rules"""
    return CandidateFilter().filter(catalog, excluded_ids)
