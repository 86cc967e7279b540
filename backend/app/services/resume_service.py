"""Resume service for orchestrating resume rating and profile uploads"""

import base64
from typing import List, Optional

from backend.app.repositories.candidate_repository import CandidateRepository
from backend.app.repositories.resume_repository import ResumeRepository
from backend.app.schemas.resume import (
    ResumeRatingResponse, ResumeUploadResponse, ScoreBreakdown, UploadBreakdown
)
from backend.app.services.scoring import compute_upload_overall_score
from ml.inference.resume_scorer import DeterministicResumeScorer, ResumeScorer
from ml.parsing.skill_matcher import SkillMatcher
from ml.parsing.text_extractor import TextExtractor
from backend.app.core.config import settings
from backend.app.core.logging import get_logger
from backend.app.core.exceptions import ValidationException, PayloadTooLargeException

logger = get_logger(__name__)

# Used when nothing recognisable can be read from the document
RATING_PLACEHOLDER_SKILLS = ["JavaScript", "React", "Node.js", "Python"]
UPLOAD_PLACEHOLDER_SKILLS = ["JavaScript", "React", "Node.js", "TypeScript"]

RECOMMENDATIONS = [
    "Add cloud certifications to boost your score by 200+ points",
    "Highlight leadership experience and project management skills",
    "Update technology stack with modern frameworks like Next.js",
]

# Profile defaults for candidates created from an upload
UPLOAD_EXPERIENCE_LABEL = "Mid-level"
UPLOAD_REGION = "North America"
UPLOAD_INDUSTRY = "Technology"


class ResumeService:
    """Service for rating resumes and creating candidates from uploads"""

    def __init__(
        self,
        candidate_repository: CandidateRepository,
        resume_repository: ResumeRepository,
        scorer: Optional[ResumeScorer] = None,
        skill_matcher: Optional[SkillMatcher] = None,
        max_upload_size: Optional[int] = None
    ):
        """
        Initialize resume service

        Args:
            candidate_repository: Candidate repository
            resume_repository: Resume repository
            scorer: Resume scoring strategy (deterministic placeholder if None)
            skill_matcher: Skill matcher (default vocabulary if None)
            max_upload_size: Byte limit for uploads (settings.MAX_UPLOAD_SIZE if None)
        """
        self.candidate_repo = candidate_repository
        self.resume_repo = resume_repository
        self.scorer = scorer or DeterministicResumeScorer()
        self.skill_matcher = skill_matcher or SkillMatcher()
        self.max_upload_size = max_upload_size if max_upload_size is not None else settings.MAX_UPLOAD_SIZE

    def validate_upload_size(self, content: bytes) -> None:
        """
        Reject uploads above the size limit

        Raises:
            PayloadTooLargeException: If the file is too large
        """
        if len(content) > self.max_upload_size:
            limit_mb = self.max_upload_size / (1024 * 1024)
            raise PayloadTooLargeException(
                f"File size must be under {limit_mb:g}MB",
                details={"size": len(content), "max_size": self.max_upload_size}
            )

    def extract_skills(self, content: bytes, filename: str) -> List[str]:
        """
        Skills mentioned in the document

        Unreadable or unsupported documents yield an empty list; callers
        fall back to placeholder skills.
        """
        try:
            text = TextExtractor.extract_text(content, filename)
        except ValidationException as e:
            logger.warning(f"Could not read text from {filename}: {e.message}")
            return []
        return self.skill_matcher.match(text)

    def rate_resume(self, content: bytes, filename: str) -> ResumeRatingResponse:
        """
        Score an anonymous resume and keep a copy

        Args:
            content: Raw file bytes
            filename: Original filename

        Returns:
            Resume id, score breakdown, skills and recommendations

        Raises:
            PayloadTooLargeException: If the file exceeds the size limit
        """
        self.validate_upload_size(content)

        skills = self.extract_skills(content, filename) or list(RATING_PLACEHOLDER_SKILLS)
        scores = self.scorer.rate(content, skills)

        resume = self.resume_repo.create({
            "candidate_id": None,
            "filename": filename,
            "content": base64.b64encode(content).decode("ascii"),
        })

        logger.info(
            f"Rated resume {resume.id}: {scores['overall_score']}",
            extra={"resume_id": resume.id}
        )

        return ResumeRatingResponse(
            resume_id=resume.id,
            scores=ScoreBreakdown(**scores),
            extracted_skills=skills,
            recommendations=list(RECOMMENDATIONS),
        )

    def upload_resume(
        self,
        content: bytes,
        filename: str,
        name: Optional[str],
        email: Optional[str],
        location: str = "",
        title: str = ""
    ) -> ResumeUploadResponse:
        """
        Create a candidate profile from an uploaded resume

        Workflow:
        1. Validate required fields and file size (nothing is stored on failure)
        2. Estimate sub-scores for the document
        3. Create the candidate (stored with the canonical overall score)
        4. Store the resume against the new candidate

        Args:
            content: Raw file bytes
            filename: Original filename
            name: Candidate name (required)
            email: Candidate email (required)
            location: Optional location
            title: Optional job title

        Returns:
            Candidate id, upload score estimate and its breakdown

        Raises:
            ValidationException: If name or email is missing
            PayloadTooLargeException: If the file exceeds the size limit
        """
        if not name or not email:
            raise ValidationException("Name and email are required")

        self.validate_upload_size(content)

        estimate = self.scorer.estimate(content)
        upload_score = compute_upload_overall_score(
            estimate["skills"],
            estimate["experience"],
            estimate["industry"],
            estimate["certifications"],
        )
        skills = self.extract_skills(content, filename) or list(UPLOAD_PLACEHOLDER_SKILLS)

        candidate = self.candidate_repo.create({
            "name": name,
            "email": email,
            "title": title or "",
            "location": location or "",
            "company": None,
            "experience": UPLOAD_EXPERIENCE_LABEL,
            "image_url": None,
            "skills_score": estimate["skills"],
            "experience_score": estimate["experience"],
            "industry_score": estimate["industry"],
            "certifications_score": estimate["certifications"],
            "skills": skills,
            "region": UPLOAD_REGION,
            "industry": UPLOAD_INDUSTRY,
        })

        self.resume_repo.create({
            "candidate_id": candidate.id,
            "filename": filename,
            "content": base64.b64encode(content).decode("ascii"),
        })

        logger.info(
            f"Created candidate {candidate.id} from resume upload",
            extra={"candidate_id": candidate.id}
        )

        return ResumeUploadResponse(
            success=True,
            candidate_id=candidate.id,
            score=upload_score,
            breakdown=UploadBreakdown(**estimate),
        )
