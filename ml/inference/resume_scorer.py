"""Resume scoring strategies

``DeterministicResumeScorer`` is a placeholder for a real model: it draws
plausible sub-scores from a generator seeded with the SHA-256 of the resume
bytes, so the same file always rates the same. Swap in another
``ResumeScorer`` implementation to plug in actual analysis.
"""

import hashlib
import random
from typing import Dict, List, Protocol

from backend.app.services.scoring import compute_overall_score
from backend.app.core.logging import get_logger

logger = get_logger(__name__)

# Rating path: base + [0, variation), plus a bonus per detected skill
RATING_BASE_SCORE = 2000
RATING_VARIATION = 1000
SKILL_BONUS = 50

# Upload path: sub-scores in [600, 1000)
ESTIMATE_MIN_SCORE = 600
ESTIMATE_SPAN = 400


class ResumeScorer(Protocol):
    """Interface for anything that can score resume bytes"""

    def rate(self, content: bytes, skills: List[str]) -> Dict[str, int]:
        """Full breakdown: four sub-scores plus ``overall_score``"""
        ...

    def estimate(self, content: bytes) -> Dict[str, int]:
        """Quick estimate of the four sub-scores used by the upload flow"""
        ...


class DeterministicResumeScorer:
    """Content-seeded stand-in for an AI resume scorer"""

    model_version = "placeholder-sha256-v1"

    def __init__(self, salt: str = ""):
        """
        Args:
            salt: Mixed into the seed; different salts give independent
                but still reproducible scores
        """
        self.salt = salt

    def _rng(self, content: bytes, purpose: str) -> random.Random:
        digest = hashlib.sha256(self.salt.encode() + purpose.encode() + content).hexdigest()
        return random.Random(int(digest, 16))

    def rate(self, content: bytes, skills: List[str]) -> Dict[str, int]:
        rng = self._rng(content, "rate")

        skills_score = int(RATING_BASE_SCORE + rng.random() * RATING_VARIATION + len(skills) * SKILL_BONUS)
        certifications_score = int(RATING_BASE_SCORE + rng.random() * RATING_VARIATION)
        experience_score = int(RATING_BASE_SCORE + rng.random() * RATING_VARIATION)
        industry_score = int(RATING_BASE_SCORE + rng.random() * RATING_VARIATION)

        breakdown = {
            "skills_score": skills_score,
            "certifications_score": certifications_score,
            "experience_score": experience_score,
            "industry_score": industry_score,
            "overall_score": compute_overall_score(
                skills_score, certifications_score, experience_score, industry_score
            ),
        }
        logger.debug(f"Rated resume ({len(content)} bytes): {breakdown['overall_score']}")
        return breakdown

    def estimate(self, content: bytes) -> Dict[str, int]:
        rng = self._rng(content, "estimate")
        return {
            "skills": ESTIMATE_MIN_SCORE + rng.randrange(ESTIMATE_SPAN),
            "experience": ESTIMATE_MIN_SCORE + rng.randrange(ESTIMATE_SPAN),
            "industry": ESTIMATE_MIN_SCORE + rng.randrange(ESTIMATE_SPAN),
            "certifications": ESTIMATE_MIN_SCORE + rng.randrange(ESTIMATE_SPAN),
        }
