"""Candidate API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from backend.app.core.dependencies import get_candidate_repository, get_resume_repository
from backend.app.core.exceptions import ReRankException, NotFoundException, ValidationException
from backend.app.core.logging import get_logger
from backend.app.repositories.candidate_repository import CandidateRepository
from backend.app.repositories.resume_repository import ResumeRepository
from backend.app.schemas.candidate import CandidateResponse, ResumeSummaryResponse
from backend.app.services.search import CandidateFilters

logger = get_logger(__name__)

router = APIRouter()


def parse_skills(skills: Optional[str]) -> Optional[List[str]]:
    """Split a comma-separated skills parameter, dropping blanks"""
    if not skills:
        return None
    parsed = [s.strip() for s in skills.split(",") if s.strip()]
    return parsed or None


def parse_score(value: Optional[str], name: str) -> Optional[int]:
    """Integer score bound; blank means unconstrained"""
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        raise ValidationException(f"{name} must be an integer", details={name: value})


# Must stay above "/{candidate_id}" so "search" is never read as an id
@router.get("/search", response_model=List[CandidateResponse])
async def search_candidates(
    skills: Optional[str] = Query(None, description="Comma-separated; any one must match"),
    experience: Optional[str] = Query(None),
    industry: Optional[str] = Query(None),
    region: Optional[str] = Query(None),
    min_score: Optional[str] = Query(None, alias="minScore"),
    max_score: Optional[str] = Query(None, alias="maxScore"),
    candidate_repo: CandidateRepository = Depends(get_candidate_repository)
):
    """
    Search candidates

    All supplied filters must match. Text filters are case-insensitive
    substring matches. Results are ordered by overall score, highest first.
    """
    try:
        filters = CandidateFilters(
            skills=parse_skills(skills),
            experience=experience or None,
            industry=industry or None,
            region=region or None,
            min_score=parse_score(min_score, "minScore"),
            max_score=parse_score(max_score, "maxScore"),
        )
        candidates = candidate_repo.search(filters)
        return [CandidateResponse.from_candidate(c) for c in candidates]

    except ReRankException:
        raise
    except Exception as e:
        logger.error(f"Failed to search candidates: {str(e)}", exc_info=True)
        raise ReRankException("Failed to search candidates", status_code=500)


@router.get("/{candidate_id}", response_model=CandidateResponse)
async def get_candidate(
    candidate_id: str,
    candidate_repo: CandidateRepository = Depends(get_candidate_repository)
):
    """Get a single candidate by id"""
    try:
        candidate = candidate_repo.get_by_id(candidate_id)
        if not candidate:
            raise NotFoundException("Candidate not found")
        return CandidateResponse.from_candidate(candidate)

    except ReRankException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch candidate: {str(e)}", exc_info=True)
        raise ReRankException("Failed to fetch candidate", status_code=500)


@router.get("/{candidate_id}/resumes", response_model=List[ResumeSummaryResponse])
async def get_candidate_resumes(
    candidate_id: str,
    candidate_repo: CandidateRepository = Depends(get_candidate_repository),
    resume_repo: ResumeRepository = Depends(get_resume_repository)
):
    """List resumes uploaded for a candidate (metadata only)"""
    try:
        if not candidate_repo.get_by_id(candidate_id):
            raise NotFoundException("Candidate not found")
        resumes = resume_repo.get_by_candidate(candidate_id)
        return [ResumeSummaryResponse.from_resume(r) for r in resumes]

    except ReRankException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch resumes: {str(e)}", exc_info=True)
        raise ReRankException("Failed to fetch resumes", status_code=500)
