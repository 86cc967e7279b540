"""Hiring simulator API endpoints"""

from fastapi import APIRouter, Depends

from backend.app.core.dependencies import get_candidate_repository
from backend.app.core.exceptions import ReRankException, NotFoundException
from backend.app.core.logging import get_logger
from backend.app.repositories.candidate_repository import CandidateRepository
from backend.app.schemas.simulator import SimulationRequest, SimulationResponse
from backend.app.services.hiring_simulator import HiringSimulator, unique_ids

logger = get_logger(__name__)

router = APIRouter()


@router.post("/run", response_model=SimulationResponse)
async def run_simulation(
    request: SimulationRequest,
    candidate_repo: CandidateRepository = Depends(get_candidate_repository)
):
    """
    Simulate hiring a set of candidates into a team

    **Process:**
    1. Resolves each candidate id (repeated ids count once)
    2. Projects the team's average score and per-area skill levels
    3. Estimates cost, productivity gain, time to hire and risk

    The sample team is used when ``team`` is omitted.
    """
    try:
        hires = []
        for candidate_id in unique_ids(request.candidate_ids):
            candidate = candidate_repo.get_by_id(candidate_id)
            if not candidate:
                raise NotFoundException(f"Candidate {candidate_id} not found")
            hires.append(candidate)

        simulator = HiringSimulator(team=request.team)
        result = simulator.simulate(hires, request.skill_coverage)

        logger.info(f"Simulated hiring {len(hires)} candidates")
        return result

    except ReRankException:
        raise
    except Exception as e:
        logger.error(f"Simulation failed: {str(e)}", exc_info=True)
        raise ReRankException("Failed to run simulation", status_code=500)
