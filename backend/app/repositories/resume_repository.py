"""Resume repository backed by an in-memory collection"""

import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import uuid

from backend.app.models.resume import Resume
from backend.app.core.logging import get_logger

logger = get_logger(__name__)


class ResumeRepository:
    """Repository for uploaded resume records"""

    def __init__(self):
        self._resumes: Dict[str, Resume] = {}
        self._lock = threading.RLock()

    def create(self, resume_data: Dict[str, Any]) -> Resume:
        """
        Store a new resume

        Args:
            resume_data: Dictionary with ``filename`` and optional
                ``content`` (base64) and ``candidate_id``

        Returns:
            Created resume with server-assigned id and upload timestamp
        """
        resume = Resume(
            id=str(uuid.uuid4()),
            filename=resume_data["filename"],
            uploaded_at=datetime.now(timezone.utc).isoformat(),
            candidate_id=resume_data.get("candidate_id"),
            content=resume_data.get("content"),
        )

        with self._lock:
            self._resumes[resume.id] = resume

        logger.info(
            f"Created resume: {resume.id}",
            extra={"resume_id": resume.id, "candidate_id": resume.candidate_id}
        )
        return resume

    def get_by_id(self, resume_id: str) -> Optional[Resume]:
        with self._lock:
            return self._resumes.get(resume_id)

    def get_by_candidate(self, candidate_id: str) -> List[Resume]:
        """All resumes attached to a candidate"""
        with self._lock:
            return [r for r in self._resumes.values() if r.candidate_id == candidate_id]

    def count(self) -> int:
        with self._lock:
            return len(self._resumes)
