"""Analytics schemas"""

from typing import List

from backend.app.schemas.base import CamelModel


class SkillCount(CamelModel):
    skill: str
    count: int


class AnalyticsResponse(CamelModel):
    """Platform-wide figures shown on the dashboards"""
    total_candidates: int
    average_score: int
    top_skills: List[SkillCount]
    countries: int
    accuracy_rate: float
