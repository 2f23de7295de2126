"""Recommendation services"""

from .availability import aggregate_availability
from .candidate_filter import CandidateFilter, filter_candidates
from .scoring import score, explain
from .ranker import rank
from .engine import RecommendationEngine, Bypass, Ranked, RecommendationResult, recommend
from .stores import CatalogStore, MemberProfileStore, MemberNotFoundError, purchased_game_ids

__all__ = [
    "aggregate_availability",
    "CandidateFilter",
    "filter_candidates",
    "score",
    "explain",
    "rank",
    "RecommendationEngine",
    "Bypass",
    "Ranked",
    "RecommendationResult",
    "recommend",
    "CatalogStore",
    "MemberProfileStore",
    "MemberNotFoundError",
    "purchased_game_ids",
]
