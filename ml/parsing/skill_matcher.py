"""Vocabulary-based skill matching"""

import re
from typing import Iterable, List, Optional

from backend.app.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SKILL_VOCABULARY = [
    "JavaScript", "TypeScript", "Python", "Java", "Rust", "SQL",
    "React", "Node.js", "Next.js", "GraphQL", "Spring Boot",
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Terraform", "Jenkins",
    "Prometheus", "Grafana", "PostgreSQL", "Redis", "Kafka", "Spark", "Tableau",
    "TensorFlow", "PyTorch", "Scikit-learn", "MLOps",
]


class SkillMatcher:
    """Find known skills mentioned in free text"""

    def __init__(self, vocabulary: Optional[Iterable[str]] = None):
        self.vocabulary = list(vocabulary or DEFAULT_SKILL_VOCABULARY)
        # Word boundaries that still allow symbols such as "Node.js" or "C++"
        self._patterns = [
            (skill, re.compile(r"(?<![\w.+#])" + re.escape(skill) + r"(?![\w+#])", re.IGNORECASE))
            for skill in self.vocabulary
        ]

    def match(self, text: str) -> List[str]:
        """
        Skills from the vocabulary that appear in ``text``

        Args:
            text: Resume text

        Returns:
            Matched skills in vocabulary order, each at most once
        """
        if not text:
            return []

        found = [skill for skill, pattern in self._patterns if pattern.search(text)]
        logger.debug(f"Matched {len(found)} skills")
        return found
