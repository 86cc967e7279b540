"""Data access layer"""

from backend.app.repositories.candidate_repository import CandidateRepository
from backend.app.repositories.resume_repository import ResumeRepository

__all__ = ['CandidateRepository', 'ResumeRepository']
