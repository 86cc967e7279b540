"""Pytest configuration and shared fixtures"""

import os

# Keep the app's rate limiter out of the way of the integration suites
os.environ.setdefault("RATE_LIMIT_PER_MINUTE", "100000")

import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

from backend.app.main import app
from backend.app.core.dependencies import get_candidate_repository, get_resume_repository
from backend.app.models.candidate import Candidate
from backend.app.repositories.candidate_repository import CandidateRepository
from backend.app.repositories.resume_repository import ResumeRepository
from backend.app.repositories.seed_data import build_seed_candidates
from backend.app.services.resume_service import ResumeService


@pytest.fixture
def make_candidate():
    """Factory for ready-made Candidate records (bypasses score calculation)"""
    def _make(
        name: str,
        overall_score: int,
        region: str = "North America",
        industry: str = "Technology",
        skills=None,
        **kwargs
    ) -> Candidate:
        return Candidate(
            name=name,
            title=kwargs.pop("title", "Engineer"),
            location=kwargs.pop("location", "Austin, TX"),
            region=region,
            industry=industry,
            skills_score=kwargs.pop("skills_score", overall_score),
            certifications_score=kwargs.pop("certifications_score", overall_score),
            experience_score=kwargs.pop("experience_score", overall_score),
            industry_score=kwargs.pop("industry_score", overall_score),
            overall_score=overall_score,
            skills=list(skills or []),
            **kwargs
        )
    return _make


@pytest.fixture
def candidate_data():
    """Input accepted by CandidateRepository.create"""
    return {
        "name": "Alex Chen",
        "title": "Senior Full Stack Developer",
        "location": "San Francisco, CA",
        "company": "Meta",
        "experience": "5 years",
        "skills_score": 3500,
        "certifications_score": 3800,
        "experience_score": 3200,
        "industry_score": 3450,
        "skills": ["React", "Node.js", "AWS", "Python"],
        "region": "North America",
        "industry": "Technology",
    }


@pytest.fixture
def candidate_repository():
    """Empty candidate repository"""
    return CandidateRepository()


@pytest.fixture
def seeded_repository():
    """Candidate repository holding the sample candidates"""
    repository = CandidateRepository()
    repository.seed(build_seed_candidates())
    return repository


@pytest.fixture
def resume_repository():
    """Empty resume repository"""
    return ResumeRepository()


@pytest.fixture
def resume_service(seeded_repository, resume_repository):
    """Resume service over the seeded store"""
    return ResumeService(seeded_repository, resume_repository)


@pytest.fixture
def override_store(seeded_repository, resume_repository):
    """Point the app at fresh repositories for the duration of a test"""
    app.dependency_overrides[get_candidate_repository] = lambda: seeded_repository
    app.dependency_overrides[get_resume_repository] = lambda: resume_repository
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(override_store):
    """Test client"""
    return TestClient(app)


@pytest.fixture
async def async_client(override_store):
    """Create async HTTP client"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
