"""Unit tests for text extraction, skill matching and resume scoring"""

import io

import pytest
from docx import Document

from ml.parsing.text_extractor import TextExtractor
from ml.parsing.skill_matcher import SkillMatcher
from ml.inference.resume_scorer import DeterministicResumeScorer
from backend.app.services.scoring import compute_overall_score
from backend.app.core.exceptions import ValidationException


def build_docx(*paragraphs: str) -> bytes:
    """Create an in-memory DOCX document"""
    doc = Document()
    for paragraph in paragraphs:
        doc.add_paragraph(paragraph)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


class TestTextExtractor:
    """Test text extraction from uploads"""

    def test_plain_text(self):
        text = TextExtractor.extract_text(b"Python developer", "resume.txt")
        assert text == "Python developer"

    def test_markdown(self):
        text = TextExtractor.extract_text(b"# Skills\n- Docker", "RESUME.MD")
        assert "Docker" in text

    def test_docx(self):
        content = build_docx("Jane Doe", "Kubernetes and Terraform")

        text = TextExtractor.extract_text(content, "resume.docx")

        assert "Jane Doe" in text
        assert "Kubernetes and Terraform" in text

    def test_unsupported_extension(self):
        with pytest.raises(ValidationException) as exc_info:
            TextExtractor.extract_text(b"data", "resume.exe")

        assert "Unsupported file format" in str(exc_info.value)

    def test_missing_extension(self):
        with pytest.raises(ValidationException):
            TextExtractor.extract_text(b"data", "resume")

    def test_corrupt_pdf(self):
        with pytest.raises(ValidationException):
            TextExtractor.extract_text(b"not really a pdf", "resume.pdf")

    def test_corrupt_docx(self):
        with pytest.raises(ValidationException):
            TextExtractor.extract_text(b"not really a docx", "resume.docx")


class TestSkillMatcher:
    """Test vocabulary skill matching"""

    def test_matches_in_vocabulary_order(self):
        matcher = SkillMatcher()

        skills = matcher.match("Built AWS services in node.js and PYTHON")

        assert skills == ["Python", "Node.js", "AWS"]

    def test_whole_words_only(self):
        """Test Java is not found inside JavaScript"""
        matcher = SkillMatcher()

        assert matcher.match("JavaScript engineer") == ["JavaScript"]

    def test_each_skill_once(self):
        matcher = SkillMatcher()
        assert matcher.match("Docker, docker, DOCKER") == ["Docker"]

    def test_empty_text(self):
        assert SkillMatcher().match("") == []

    def test_custom_vocabulary(self):
        matcher = SkillMatcher(vocabulary=["C++", "Go"])
        assert matcher.match("Go and C++ services") == ["C++", "Go"]


class TestDeterministicResumeScorer:
    """Test the placeholder scorer"""

    def test_same_bytes_same_rating(self):
        scorer = DeterministicResumeScorer()
        content = b"resume body"

        assert scorer.rate(content, ["Python"]) == scorer.rate(content, ["Python"])
        assert DeterministicResumeScorer().estimate(content) == scorer.estimate(content)

    def test_rating_ranges(self):
        scorer = DeterministicResumeScorer()
        skills = ["Python", "AWS", "Docker"]

        scores = scorer.rate(b"some resume", skills)

        assert 2150 <= scores["skills_score"] < 3150
        for key in ("certifications_score", "experience_score", "industry_score"):
            assert 2000 <= scores[key] < 3000
        assert scores["overall_score"] == compute_overall_score(
            scores["skills_score"],
            scores["certifications_score"],
            scores["experience_score"],
            scores["industry_score"],
        )

    def test_estimate_ranges(self):
        estimate = DeterministicResumeScorer().estimate(b"some resume")

        assert set(estimate) == {"skills", "experience", "industry", "certifications"}
        assert all(600 <= value < 1000 for value in estimate.values())
