"""Resume schemas"""

from typing import List

from pydantic import ConfigDict, Field

from backend.app.schemas.base import CamelModel


class ScoreBreakdown(CamelModel):
    """Four sub-scores and the overall score derived from them"""
    skills_score: int
    certifications_score: int
    experience_score: int
    industry_score: int
    overall_score: int


class ResumeRatingResponse(CamelModel):
    """Response for rating an anonymous resume"""
    resume_id: str = Field(..., description="Identifier of the stored resume")
    scores: ScoreBreakdown
    extracted_skills: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "resumeId": "7b0c5a0e-3f5e-4d5c-9a57-1d1f0c6f9b1e",
                "scores": {
                    "skillsScore": 2912,
                    "certificationsScore": 2410,
                    "experienceScore": 2688,
                    "industryScore": 2205,
                    "overallScore": 2674
                },
                "extractedSkills": ["JavaScript", "React", "Node.js", "Python"],
                "recommendations": [
                    "Add cloud certifications to boost your score by 200+ points"
                ]
            }
        }
    )


class UploadBreakdown(CamelModel):
    """Sub-scores estimated by the upload flow"""
    skills: int
    experience: int
    industry: int
    certifications: int


class ResumeUploadResponse(CamelModel):
    """Response for a profile-creating resume upload"""
    success: bool = True
    candidate_id: str
    score: int = Field(..., description="Upload estimate (weights 0.35/0.30/0.20/0.15, floored)")
    breakdown: UploadBreakdown
