"""Candidate repository backed by an in-memory collection"""

import threading
from collections import Counter
from dataclasses import fields, replace
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple
import uuid

from backend.app.models.candidate import Candidate
from backend.app.services.ranking import RankedCandidate, rank_scope, recompute_rankings, sort_by_score
from backend.app.services.scoring import compute_overall_score, round_half_up
from backend.app.services.search import CandidateFilters, filter_candidates
from backend.app.core.config import settings
from backend.app.core.logging import get_logger

logger = get_logger(__name__)

RANK_FIELDS = ("global_rank", "regional_rank", "industry_rank")
OPTIONAL_FIELDS = ("company", "experience", "image_url", "badge", "email")
CANDIDATE_FIELDS = frozenset(f.name for f in fields(Candidate))


class CandidateRepository:
    """
    Repository for candidate records

    Owns the authoritative candidate collection. Every mutation and the rank
    refresh that follows it run under one lock, so readers never see a
    half-ranked collection.
    """

    def __init__(self, total_candidate_pool: Optional[int] = None):
        """
        Initialize repository

        Args:
            total_candidate_pool: Notional talent pool size reported by
                analytics (defaults to settings.TOTAL_CANDIDATE_POOL)
        """
        self._candidates: Dict[str, Candidate] = {}
        self._lock = threading.RLock()
        self.total_candidate_pool = (
            total_candidate_pool if total_candidate_pool is not None
            else settings.TOTAL_CANDIDATE_POOL
        )

    @staticmethod
    def _copy(candidate: Candidate) -> Candidate:
        return replace(candidate, skills=list(candidate.skills))

    def _snapshot(self) -> List[Candidate]:
        with self._lock:
            return [self._copy(c) for c in self._candidates.values()]

    def create(self, candidate_data: Dict[str, Any]) -> Candidate:
        """
        Create a new candidate

        The overall score is always derived from the four sub-scores; any
        supplied ``overall_score``, rank or ``id`` value is ignored.

        Args:
            candidate_data: Dictionary with candidate data

        Returns:
            Created candidate
        """
        data = {
            key: value for key, value in candidate_data.items()
            if key in CANDIDATE_FIELDS and key not in RANK_FIELDS + ("id", "overall_score")
        }
        for key in OPTIONAL_FIELDS:
            data.setdefault(key, None)
        data["skills"] = list(data.get("skills") or [])

        data["overall_score"] = compute_overall_score(
            data["skills_score"],
            data["certifications_score"],
            data["experience_score"],
            data["industry_score"],
        )

        candidate = Candidate(id=str(uuid.uuid4()), **data)

        with self._lock:
            self._candidates[candidate.id] = candidate
            recompute_rankings(self._candidates.values())
            created = self._copy(candidate)

        logger.info(f"Created candidate: {candidate.id}", extra={"candidate_id": candidate.id})
        return created

    def seed(self, candidates: Iterable[Candidate]) -> int:
        """
        Insert prepared candidates as-is and rank them once

        Args:
            candidates: Fully populated candidate records

        Returns:
            Number of candidates inserted
        """
        inserted = 0
        with self._lock:
            for candidate in candidates:
                self._candidates[candidate.id] = self._copy(candidate)
                inserted += 1
            recompute_rankings(self._candidates.values())

        logger.info(f"Seeded {inserted} candidates")
        return inserted

    def get_by_id(self, candidate_id: str) -> Optional[Candidate]:
        """
        Get candidate by ID

        Args:
            candidate_id: Candidate identifier

        Returns:
            Candidate if found, None otherwise
        """
        with self._lock:
            candidate = self._candidates.get(candidate_id)
            if candidate:
                candidate = self._copy(candidate)

        if candidate:
            logger.debug(f"Found candidate: {candidate_id}")
        else:
            logger.debug(f"Candidate not found: {candidate_id}")

        return candidate

    def get_by_name(self, name: str) -> Optional[Candidate]:
        """First candidate whose name matches case-insensitively"""
        wanted = name.lower()
        return next(
            (c for c in self._snapshot() if c.name.lower() == wanted),
            None
        )

    def update(self, candidate_id: str, update_data: Dict[str, Any]) -> Optional[Candidate]:
        """
        Update candidate

        Fields are merged shallowly. The overall score is not recomputed
        even when sub-scores change; ranks are.

        Args:
            candidate_id: Candidate identifier
            update_data: Dictionary with fields to update

        Returns:
            Updated candidate if found, None otherwise
        """
        with self._lock:
            candidate = self._candidates.get(candidate_id)

            if not candidate:
                return None

            for key, value in update_data.items():
                if key != "id" and key in CANDIDATE_FIELDS:
                    if isinstance(value, list):
                        value = list(value)
                    setattr(candidate, key, value)

            recompute_rankings(self._candidates.values())
            updated = self._copy(candidate)

        logger.info(f"Updated candidate: {candidate_id}", extra={"candidate_id": candidate_id})
        return updated

    def search(self, filters: CandidateFilters) -> List[Candidate]:
        """
        Search candidates with filters

        Args:
            filters: Search criteria

        Returns:
            Matching candidates, highest overall score first
        """
        results = sort_by_score(filter_candidates(self._snapshot(), filters))
        logger.info(f"Search returned {len(results)} candidates")
        return results

    def get_global_leaderboard(self, limit: int = 50, offset: int = 0) -> List[RankedCandidate]:
        """
        Global leaderboard page

        Args:
            limit: Page size
            offset: Number of candidates to skip

        Returns:
            List of (candidate, percentile) pairs
        """
        return rank_scope(self._snapshot(), limit, offset)

    def get_regional_leaderboard(self, region: str, limit: int = 50, offset: int = 0) -> List[RankedCandidate]:
        """Leaderboard page for one region (exact match)"""
        scope = [c for c in self._snapshot() if c.region == region]
        return rank_scope(scope, limit, offset)

    def get_industry_leaderboard(self, industry: str, limit: int = 50, offset: int = 0) -> List[RankedCandidate]:
        """Leaderboard page for one industry (exact match)"""
        scope = [c for c in self._snapshot() if c.industry == industry]
        return rank_scope(scope, limit, offset)

    def count(self) -> int:
        """Number of candidates actually held"""
        with self._lock:
            return len(self._candidates)

    def get_total_candidate_count(self) -> int:
        """
        Size of the global talent pool

        Deliberately independent of ``count()``: the stored candidates are a
        sample of a much larger notional population.
        """
        return self.total_candidate_pool

    def get_average_score(self) -> int:
        """Mean overall score, rounded half-up; 0 when empty"""
        candidates = self._snapshot()
        if not candidates:
            return 0
        total = sum(c.overall_score for c in candidates)
        return round_half_up(Decimal(total) / len(candidates))

    def get_top_skills(self, limit: int = 10) -> List[Tuple[str, int]]:
        """
        Most frequent skills across all candidates

        Args:
            limit: Number of skills to return

        Returns:
            List of (skill, count), most frequent first; ties keep first-seen order
        """
        counts: Counter = Counter()
        for candidate in self._snapshot():
            counts.update(candidate.skills)
        return counts.most_common(limit)
