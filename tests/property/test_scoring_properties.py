"""Property-based tests for score calculation and ranking

Properties:
- Canonical overall score for every created candidate
- Global ranks form a 1..N permutation consistent with score order
- Regional and industry ranks are dense within each group
- Percentiles stay within 0..100 and never increase down a leaderboard
"""

import pytest
from hypothesis import given, strategies as st, settings

from backend.app.repositories.candidate_repository import CandidateRepository
from backend.app.services.ranking import compute_percentile
from backend.app.services.scoring import compute_overall_score


sub_scores = st.integers(min_value=0, max_value=5000)
regions = st.sampled_from(["North America", "Europe", "Asia Pacific"])
industries = st.sampled_from(["Technology", "Fintech", "Healthcare"])

candidate_inputs = st.fixed_dictionaries({
    "skills_score": sub_scores,
    "certifications_score": sub_scores,
    "experience_score": sub_scores,
    "industry_score": sub_scores,
    "region": regions,
    "industry": industries,
})


def create_all(inputs):
    repository = CandidateRepository()
    created = [
        repository.create({"name": f"Candidate {i}", "title": "Engineer", "location": "Remote", **data})
        for i, data in enumerate(inputs)
    ]
    return repository, created


class TestOverallScoreProperty:
    """Property tests for the overall score"""

    @pytest.mark.property
    @settings(max_examples=100)
    @given(skills=sub_scores, certifications=sub_scores, experience=sub_scores, industry=sub_scores)
    def test_formula_matches_integer_arithmetic(self, skills, certifications, experience, industry):
        """
        For any sub-scores, the overall score equals the weighted sum rounded
        half-up, checked here in exact tenths.
        """
        tenths = 4 * skills + 2 * certifications + 3 * experience + industry
        expected = (tenths + 5) // 10

        assert compute_overall_score(skills, certifications, experience, industry) == expected

    @pytest.mark.property
    @settings(max_examples=50)
    @given(data=candidate_inputs)
    def test_created_candidates_use_formula(self, data):
        """For any created candidate, the stored score is the canonical one"""
        repository, (candidate,) = create_all([data])

        stored = repository.get_by_id(candidate.id)
        assert stored.overall_score == compute_overall_score(
            data["skills_score"],
            data["certifications_score"],
            data["experience_score"],
            data["industry_score"],
        )


class TestRankingProperty:
    """Property tests for rank consistency"""

    @pytest.mark.property
    @settings(max_examples=50, deadline=None)
    @given(inputs=st.lists(candidate_inputs, min_size=1, max_size=25))
    def test_global_ranks_are_dense_and_ordered(self, inputs):
        """
        For any candidate set, global ranks are exactly 1..N and a higher
        score never ranks below a lower one.
        """
        repository, created = create_all(inputs)
        stored = [repository.get_by_id(c.id) for c in created]

        assert sorted(c.global_rank for c in stored) == list(range(1, len(stored) + 1))

        for a in stored:
            for b in stored:
                if a.overall_score > b.overall_score:
                    assert a.global_rank < b.global_rank

    @pytest.mark.property
    @settings(max_examples=50, deadline=None)
    @given(inputs=st.lists(candidate_inputs, min_size=1, max_size=25))
    def test_group_ranks_are_dense(self, inputs):
        """For any candidate set, ranks within each region and industry are 1..k"""
        repository, created = create_all(inputs)
        stored = [repository.get_by_id(c.id) for c in created]

        for attribute, rank_attribute in (("region", "regional_rank"), ("industry", "industry_rank")):
            groups = {}
            for candidate in stored:
                groups.setdefault(getattr(candidate, attribute), []).append(candidate)

            for members in groups.values():
                ranks = sorted(getattr(c, rank_attribute) for c in members)
                assert ranks == list(range(1, len(members) + 1))

    @pytest.mark.property
    @settings(max_examples=100)
    @given(total=st.integers(min_value=1, max_value=20000), data=st.data())
    def test_percentile_bounds_and_monotonic(self, total, data):
        """For any scope, percentile is within 0..100 and falls as rank grows"""
        rank = data.draw(st.integers(min_value=1, max_value=total))

        percentile = compute_percentile(total, rank)

        assert 0 <= percentile <= 100
        assert compute_percentile(total, 1) == 100
        if rank < total:
            assert compute_percentile(total, rank + 1) <= percentile
