"""Candidate schemas for API responses"""

from typing import List, Optional

from pydantic import Field

from backend.app.models.candidate import Candidate
from backend.app.models.resume import Resume
from backend.app.schemas.base import CamelModel
from backend.app.services.scoring import score_tier


class CandidateResponse(CamelModel):
    """Public candidate profile with scores and ranks"""
    id: str = Field(..., description="Unique candidate identifier")
    name: str
    title: str
    location: str
    company: Optional[str] = None
    experience: Optional[str] = Field(None, description="Experience label, e.g. '5 years'")
    image_url: Optional[str] = None

    overall_score: int = Field(..., description="Weighted composite of the four sub-scores")
    skills_score: int
    certifications_score: int
    experience_score: int
    industry_score: int

    global_rank: Optional[int] = Field(None, ge=1, description="Rank among all candidates")
    regional_rank: Optional[int] = Field(None, ge=1, description="Rank within the candidate's region")
    industry_rank: Optional[int] = Field(None, ge=1, description="Rank within the candidate's industry")

    skills: List[str] = Field(default_factory=list)
    badge: Optional[str] = None
    region: str
    industry: str

    @classmethod
    def from_candidate(cls, candidate: Candidate) -> "CandidateResponse":
        """Create response from Candidate model"""
        return cls(
            id=candidate.id,
            name=candidate.name,
            title=candidate.title,
            location=candidate.location,
            company=candidate.company,
            experience=candidate.experience,
            image_url=candidate.image_url,
            overall_score=candidate.overall_score,
            skills_score=candidate.skills_score,
            certifications_score=candidate.certifications_score,
            experience_score=candidate.experience_score,
            industry_score=candidate.industry_score,
            global_rank=candidate.global_rank,
            regional_rank=candidate.regional_rank,
            industry_rank=candidate.industry_rank,
            skills=list(candidate.skills),
            badge=candidate.badge,
            region=candidate.region,
            industry=candidate.industry,
        )


class CandidateWithRankResponse(CandidateResponse):
    """Leaderboard entry: candidate plus standing within the leaderboard's scope"""
    percentile: int = Field(..., ge=0, le=100, description="Share of the scope this candidate matches or beats")
    tier: str = Field(..., description="Diamond, Gold, Silver or Bronze")

    @classmethod
    def from_ranked(cls, candidate: Candidate, percentile: int) -> "CandidateWithRankResponse":
        """Create leaderboard entry from a (candidate, percentile) pair"""
        base = CandidateResponse.from_candidate(candidate)
        return cls(
            **base.model_dump(),
            percentile=percentile,
            tier=score_tier(candidate.overall_score),
        )


class ResumeSummaryResponse(CamelModel):
    """Resume metadata; the document content itself is never returned"""
    id: str
    candidate_id: Optional[str] = None
    filename: str
    uploaded_at: str

    @classmethod
    def from_resume(cls, resume: Resume) -> "ResumeSummaryResponse":
        return cls(
            id=resume.id,
            candidate_id=resume.candidate_id,
            filename=resume.filename,
            uploaded_at=resume.uploaded_at,
        )
