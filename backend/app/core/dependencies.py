"""Shared dependencies for API routes

The in-memory store lives for the lifetime of the process, so each provider
hands out a single instance. Tests swap them through
``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends

from backend.app.repositories.candidate_repository import CandidateRepository
from backend.app.repositories.resume_repository import ResumeRepository
from backend.app.repositories.seed_data import build_seed_candidates
from backend.app.services.resume_service import ResumeService
from backend.app.core.config import settings
from backend.app.core.logging import get_logger

logger = get_logger(__name__)


@lru_cache()
def get_candidate_repository() -> CandidateRepository:
    """Process-wide candidate repository, seeded on first use when enabled"""
    repository = CandidateRepository()
    if settings.SEED_MOCK_DATA:
        seeded = repository.seed(build_seed_candidates())
        logger.info(f"Seeded {seeded} sample candidates")
    return repository


@lru_cache()
def get_resume_repository() -> ResumeRepository:
    """Process-wide resume repository"""
    return ResumeRepository()


def get_resume_service(
    candidate_repo: CandidateRepository = Depends(get_candidate_repository),
    resume_repo: ResumeRepository = Depends(get_resume_repository)
) -> ResumeService:
    """Resume service bound to the shared repositories"""
    return ResumeService(candidate_repo, resume_repo)
