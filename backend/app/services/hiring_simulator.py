"""What-if hiring simulation"""

from typing import Dict, List, Mapping, Optional, Sequence

from backend.app.models.candidate import Candidate
from backend.app.schemas.simulator import SimulationResponse, TeamProfile
from backend.app.services.scoring import round_half_up

# Share of a new hire's coverage that carries over to the team level
COVERAGE_TRANSFER = 0.3
MAX_SKILL_LEVEL = 100.0

# (exclusive lower bound, annual salary); falls through to BASE_SALARY
SALARY_BANDS = (
    (3000, 180000),
    (2500, 150000),
)
BASE_SALARY = 120000

WEEKS_PER_HIRE = 3
HIRING_OVERHEAD_WEEKS = 2
LOW_RISK_MAX_HIRES = 2

DEFAULT_TEAM = TeamProfile(
    current_skills={
        "Frontend": 70,
        "Backend": 85,
        "Cloud": 60,
        "DevOps": 45,
        "AI/ML": 30,
        "Database": 75,
    },
    avg_score=2750,
    team_size=8,
)


def estimated_salary(overall_score: int) -> int:
    for threshold, salary in SALARY_BANDS:
        if overall_score > threshold:
            return salary
    return BASE_SALARY


class HiringSimulator:
    """Project how hiring a set of candidates changes a team"""

    def __init__(self, team: Optional[TeamProfile] = None):
        self.team = team or DEFAULT_TEAM

    def simulate(
        self,
        hires: Sequence[Candidate],
        skill_coverage: Optional[Mapping[str, Mapping[str, float]]] = None
    ) -> SimulationResponse:
        """
        Run the simulation

        Args:
            hires: Candidates to add (at least one)
            skill_coverage: Per candidate id, skill area -> coverage 0-100;
                missing areas count as 0

        Returns:
            Projected team figures

        Raises:
            ValueError: If no candidates are given
        """
        if not hires:
            raise ValueError("At least one candidate is required")

        coverage = skill_coverage or {}
        team = self.team

        new_team_size = team.team_size + len(hires)
        new_avg_score = (
            team.avg_score * team.team_size + sum(c.overall_score for c in hires)
        ) / new_team_size
        score_improvement = new_avg_score - team.avg_score

        skill_improvements: Dict[str, float] = {}
        for area, current_level in team.current_skills.items():
            boost = sum(coverage.get(c.id, {}).get(area, 0) for c in hires) / len(hires)
            new_level = min(MAX_SKILL_LEVEL, current_level + boost * COVERAGE_TRANSFER)
            skill_improvements[area] = new_level - current_level

        return SimulationResponse(
            team_size=new_team_size,
            new_avg_score=new_avg_score,
            score_improvement=score_improvement,
            skill_improvements=skill_improvements,
            estimated_cost=sum(estimated_salary(c.overall_score) for c in hires),
            productivity_increase=round_half_up(score_improvement / 10),
            time_to_hire=len(hires) * WEEKS_PER_HIRE + HIRING_OVERHEAD_WEEKS,
            risk_assessment="Medium" if len(hires) > LOW_RISK_MAX_HIRES else "Low",
        )


def unique_ids(candidate_ids: List[str]) -> List[str]:
    """Drop repeated ids, keeping first occurrence order"""
    return list(dict.fromkeys(candidate_ids))
