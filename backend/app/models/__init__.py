"""Domain models"""

from backend.app.models.candidate import Candidate
from backend.app.models.resume import Resume

__all__ = [
    "Candidate",
    "Resume",
]
