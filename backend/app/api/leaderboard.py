"""Leaderboard API endpoints"""

from typing import List

from fastapi import APIRouter, Depends, Query

from backend.app.core.config import settings
from backend.app.core.dependencies import get_candidate_repository
from backend.app.core.exceptions import ReRankException
from backend.app.core.logging import get_logger
from backend.app.repositories.candidate_repository import CandidateRepository
from backend.app.schemas.candidate import CandidateWithRankResponse

logger = get_logger(__name__)

router = APIRouter()


@router.get("", response_model=List[CandidateWithRankResponse])
@router.get("/global", response_model=List[CandidateWithRankResponse])
async def get_global_leaderboard(
    limit: int = Query(settings.DEFAULT_LEADERBOARD_LIMIT, ge=1, le=settings.MAX_LEADERBOARD_LIMIT),
    offset: int = Query(0, ge=0),
    candidate_repo: CandidateRepository = Depends(get_candidate_repository)
):
    """
    Global leaderboard

    Candidates ordered by overall score, highest first. Each entry carries
    its percentile within the whole pool and its tier.
    """
    try:
        entries = candidate_repo.get_global_leaderboard(limit=limit, offset=offset)
        return [CandidateWithRankResponse.from_ranked(c, p) for c, p in entries]

    except ReRankException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch leaderboard: {str(e)}", exc_info=True)
        raise ReRankException("Failed to fetch leaderboard", status_code=500)


@router.get("/regional/{region}", response_model=List[CandidateWithRankResponse])
async def get_regional_leaderboard(
    region: str,
    limit: int = Query(settings.DEFAULT_LEADERBOARD_LIMIT, ge=1, le=settings.MAX_LEADERBOARD_LIMIT),
    offset: int = Query(0, ge=0),
    candidate_repo: CandidateRepository = Depends(get_candidate_repository)
):
    """Leaderboard restricted to one region; percentiles are relative to that region"""
    try:
        entries = candidate_repo.get_regional_leaderboard(region, limit=limit, offset=offset)
        return [CandidateWithRankResponse.from_ranked(c, p) for c, p in entries]

    except ReRankException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch regional leaderboard: {str(e)}", exc_info=True)
        raise ReRankException("Failed to fetch regional leaderboard", status_code=500)


@router.get("/industry/{industry}", response_model=List[CandidateWithRankResponse])
async def get_industry_leaderboard(
    industry: str,
    limit: int = Query(settings.DEFAULT_LEADERBOARD_LIMIT, ge=1, le=settings.MAX_LEADERBOARD_LIMIT),
    offset: int = Query(0, ge=0),
    candidate_repo: CandidateRepository = Depends(get_candidate_repository)
):
    """Leaderboard restricted to one industry; percentiles are relative to that industry"""
    try:
        entries = candidate_repo.get_industry_leaderboard(industry, limit=limit, offset=offset)
        return [CandidateWithRankResponse.from_ranked(c, p) for c, p in entries]

    except ReRankException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch industry leaderboard: {str(e)}", exc_info=True)
        raise ReRankException("Failed to fetch industry leaderboard", status_code=500)
