"""Resume model"""

from dataclasses import dataclass, field
from typing import Optional
import uuid


@dataclass(frozen=True)
class Resume:
    """Uploaded resume document; immutable once stored"""

    filename: str
    uploaded_at: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    candidate_id: Optional[str] = None
    content: Optional[str] = None  # base64-encoded file bytes

    def __repr__(self):
        return f"<Resume(id={self.id}, candidate_id={self.candidate_id}, filename={self.filename})>"
