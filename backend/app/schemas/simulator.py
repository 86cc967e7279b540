"""Hiring simulator schemas"""

from typing import Dict, List, Optional

from pydantic import Field

from backend.app.schemas.base import CamelModel


class TeamProfile(CamelModel):
    """Current team: skill-area levels (0-100), average score and headcount"""
    current_skills: Dict[str, float] = Field(default_factory=dict)
    avg_score: float = Field(..., ge=0)
    team_size: int = Field(..., ge=0)


class SimulationRequest(CamelModel):
    """What-if hiring scenario"""
    candidate_ids: List[str] = Field(..., min_length=1, description="Candidates to hire")
    team: Optional[TeamProfile] = Field(None, description="Defaults to the sample team when omitted")
    skill_coverage: Dict[str, Dict[str, float]] = Field(
        default_factory=dict,
        description="Per candidate id: skill area -> coverage (0-100)"
    )


class SimulationResponse(CamelModel):
    """Projected effect of the scenario on the team"""
    team_size: int
    new_avg_score: float
    score_improvement: float
    skill_improvements: Dict[str, float]
    estimated_cost: int
    productivity_increase: int
    time_to_hire: int = Field(..., description="Weeks")
    risk_assessment: str
