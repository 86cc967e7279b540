"""Analytics API endpoints"""

from fastapi import APIRouter, Depends

from backend.app.core.config import settings
from backend.app.core.dependencies import get_candidate_repository
from backend.app.core.exceptions import ReRankException
from backend.app.core.logging import get_logger
from backend.app.repositories.candidate_repository import CandidateRepository
from backend.app.schemas.analytics import AnalyticsResponse, SkillCount

logger = get_logger(__name__)

router = APIRouter()


@router.get("", response_model=AnalyticsResponse)
async def get_analytics(
    candidate_repo: CandidateRepository = Depends(get_candidate_repository)
):
    """
    Platform-wide analytics

    ``totalCandidates`` is the size of the notional talent pool, not the
    number of stored candidates. ``countries`` and ``accuracyRate`` are
    configured figures.
    """
    try:
        return AnalyticsResponse(
            total_candidates=candidate_repo.get_total_candidate_count(),
            average_score=candidate_repo.get_average_score(),
            top_skills=[
                SkillCount(skill=skill, count=count)
                for skill, count in candidate_repo.get_top_skills()
            ],
            countries=settings.COUNTRIES_COUNT,
            accuracy_rate=settings.ACCURACY_RATE,
        )

    except ReRankException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch analytics: {str(e)}", exc_info=True)
        raise ReRankException("Failed to fetch analytics", status_code=500)
