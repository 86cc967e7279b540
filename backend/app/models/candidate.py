"""Candidate model"""

from dataclasses import dataclass, field
from typing import List, Optional
import uuid


@dataclass
class Candidate:
    """Candidate profile and score record held by the in-memory store"""

    name: str
    title: str
    location: str
    region: str
    industry: str

    # Scores (900-3500+ range)
    skills_score: int
    certifications_score: int
    experience_score: int
    industry_score: int
    overall_score: int = 0

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    company: Optional[str] = None
    experience: Optional[str] = None
    image_url: Optional[str] = None
    email: Optional[str] = None

    # Rankings, refreshed whenever the candidate set changes
    global_rank: Optional[int] = None
    regional_rank: Optional[int] = None
    industry_rank: Optional[int] = None

    skills: List[str] = field(default_factory=list)
    badge: Optional[str] = None  # Elite Pro, Top 1%, Rising Talent

    def __repr__(self):
        return f"<Candidate(id={self.id}, name={self.name}, overall_score={self.overall_score})>"
