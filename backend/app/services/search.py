"""Candidate search filters"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from backend.app.models.candidate import Candidate


def _contains(haystack: Optional[str], needle: str) -> bool:
    return haystack is not None and needle.lower() in haystack.lower()


@dataclass
class CandidateFilters:
    """
    Compound search criteria

    Every supplied dimension must match. Within ``skills`` a candidate needs
    only one requested skill, matched as a case-insensitive substring of any
    of its own skills. ``None`` leaves a dimension unconstrained.
    """

    skills: Optional[List[str]] = None
    experience: Optional[str] = None
    industry: Optional[str] = None
    region: Optional[str] = None
    min_score: Optional[int] = None
    max_score: Optional[int] = None

    def matches(self, candidate: Candidate) -> bool:
        if self.skills:
            if not any(
                _contains(own_skill, wanted)
                for wanted in self.skills
                for own_skill in candidate.skills
            ):
                return False

        if self.experience and not _contains(candidate.experience, self.experience):
            return False

        if self.industry and not _contains(candidate.industry, self.industry):
            return False

        if self.region and not _contains(candidate.region, self.region):
            return False

        if self.min_score is not None and candidate.overall_score < self.min_score:
            return False

        if self.max_score is not None and candidate.overall_score > self.max_score:
            return False

        return True


def filter_candidates(candidates: Iterable[Candidate], filters: CandidateFilters) -> List[Candidate]:
    """Return candidates matching ``filters``, preserving input order"""
    return [candidate for candidate in candidates if filters.matches(candidate)]
