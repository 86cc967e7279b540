"""Resume parsing module"""

from ml.parsing.text_extractor import TextExtractor
from ml.parsing.skill_matcher import SkillMatcher, DEFAULT_SKILL_VOCABULARY

__all__ = [
    'TextExtractor',
    'SkillMatcher',
    'DEFAULT_SKILL_VOCABULARY',
]
