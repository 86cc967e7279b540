"""Ranking engine

Ranks are dense positions (1..N) in descending ``overall_score`` order. Sorting
is stable, so equal scores keep the order in which candidates were inserted.
"""

from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Tuple

from backend.app.models.candidate import Candidate
from backend.app.services.scoring import round_half_up
from backend.app.core.logging import get_logger

logger = get_logger(__name__)

RankedCandidate = Tuple[Candidate, int]


def sort_by_score(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Stable sort, highest overall score first"""
    return sorted(candidates, key=lambda c: c.overall_score, reverse=True)


def compute_percentile(total: int, rank: int) -> int:
    """
    Share of the scope this candidate matches or beats

    ``round((total - rank + 1) / total * 100)``, rounded half-up. The top
    candidate of any non-empty scope is at 100.
    """
    if total <= 0:
        return 0
    return round_half_up(Decimal(total - rank + 1) * 100 / Decimal(total))


def _group_by(candidates: Iterable[Candidate], key: Callable[[Candidate], str]) -> Dict[str, List[Candidate]]:
    groups: Dict[str, List[Candidate]] = {}
    for candidate in candidates:
        groups.setdefault(key(candidate), []).append(candidate)
    return groups


def recompute_rankings(candidates: Iterable[Candidate]) -> None:
    """
    Refresh global, regional and industry ranks in place

    Regional and industry ranks are dense within the candidate's own region
    or industry. An empty collection is a no-op.
    """
    ordered = sort_by_score(candidates)

    for position, candidate in enumerate(ordered):
        candidate.global_rank = position + 1

    for members in _group_by(ordered, lambda c: c.region).values():
        for position, candidate in enumerate(members):
            candidate.regional_rank = position + 1

    for members in _group_by(ordered, lambda c: c.industry).values():
        for position, candidate in enumerate(members):
            candidate.industry_rank = position + 1

    logger.debug(f"Recomputed rankings for {len(ordered)} candidates")


def rank_scope(
    candidates: Iterable[Candidate],
    limit: int,
    offset: int = 0
) -> List[RankedCandidate]:
    """
    Build one leaderboard page

    Percentiles are taken from each candidate's rank within the whole scope,
    before pagination is applied.

    Args:
        candidates: Every candidate in scope (already filtered)
        limit: Page size
        offset: Number of ranked candidates to skip

    Returns:
        List of (candidate, percentile) pairs
    """
    ordered = sort_by_score(candidates)
    total = len(ordered)

    page = ordered[offset:offset + limit]
    return [
        (candidate, compute_percentile(total, offset + index + 1))
        for index, candidate in enumerate(page)
    ]
