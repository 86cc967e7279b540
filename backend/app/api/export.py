"""Export API endpoints"""

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from backend.app.core.config import settings
from backend.app.core.dependencies import get_candidate_repository
from backend.app.core.exceptions import ReRankException
from backend.app.core.logging import get_logger
from backend.app.repositories.candidate_repository import CandidateRepository
from backend.app.services.export_service import export_candidates_csv

logger = get_logger(__name__)

router = APIRouter()


@router.get("/candidates")
async def export_candidates(
    candidate_repo: CandidateRepository = Depends(get_candidate_repository)
):
    """Download the global leaderboard as ``candidates.csv``"""
    try:
        leaderboard = candidate_repo.get_global_leaderboard(limit=settings.EXPORT_ROW_LIMIT)
        csv_content = export_candidates_csv(leaderboard)

        return StreamingResponse(
            iter([csv_content]),
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="candidates.csv"'}
        )

    except ReRankException:
        raise
    except Exception as e:
        logger.error(f"Failed to export candidates: {str(e)}", exc_info=True)
        raise ReRankException("Failed to export candidates", status_code=500)
