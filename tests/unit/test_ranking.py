"""Unit tests for the ranking engine"""

import pytest

from backend.app.services.ranking import (
    compute_percentile,
    rank_scope,
    recompute_rankings,
    sort_by_score,
)


class TestPercentile:
    """Test percentile calculation"""

    @pytest.mark.parametrize("total,rank,expected", [
        (10, 1, 100),
        (10, 10, 10),
        (3, 2, 67),
        (8, 3, 75),
        (15, 6, 67),
        (200, 200, 1),  # 0.5 rounds up
        (1, 1, 100),
    ])
    def test_compute_percentile(self, total, rank, expected):
        assert compute_percentile(total, rank) == expected

    def test_empty_scope(self):
        """Test empty scope yields zero"""
        assert compute_percentile(0, 1) == 0


class TestRecomputeRankings:
    """Test rank refresh"""

    def test_global_ranks_follow_score(self, make_candidate):
        """Test global ranks are dense and descending by score"""
        candidates = [
            make_candidate("Low", 2000),
            make_candidate("High", 3400),
            make_candidate("Mid", 2800),
        ]

        recompute_rankings(candidates)

        ranks = {c.name: c.global_rank for c in candidates}
        assert ranks == {"High": 1, "Mid": 2, "Low": 3}

    def test_ties_keep_insertion_order(self, make_candidate):
        """Test equal scores get distinct ranks in insertion order"""
        first = make_candidate("First", 3000)
        second = make_candidate("Second", 3000)

        recompute_rankings([first, second])

        assert first.global_rank == 1
        assert second.global_rank == 2

    def test_regional_and_industry_ranks(self, make_candidate):
        """Test group ranks are dense within each group"""
        candidates = [
            make_candidate("NA-1", 3300, region="North America", industry="Fintech"),
            make_candidate("EU-1", 3200, region="Europe", industry="Technology"),
            make_candidate("NA-2", 3100, region="North America", industry="Technology"),
            make_candidate("EU-2", 3000, region="Europe", industry="Fintech"),
        ]

        recompute_rankings(candidates)

        by_name = {c.name: c for c in candidates}
        assert by_name["NA-1"].regional_rank == 1
        assert by_name["NA-2"].regional_rank == 2
        assert by_name["EU-1"].regional_rank == 1
        assert by_name["EU-2"].regional_rank == 2

        assert by_name["EU-1"].industry_rank == 1
        assert by_name["NA-2"].industry_rank == 2
        assert by_name["NA-1"].industry_rank == 1
        assert by_name["EU-2"].industry_rank == 2

    def test_empty_collection(self):
        """Test empty input is a no-op"""
        recompute_rankings([])


class TestRankScope:
    """Test leaderboard page construction"""

    def test_percentile_uses_full_scope(self, make_candidate):
        """Test percentiles reflect position in the unpaginated scope"""
        candidates = [make_candidate(f"C{i}", 3000 - i * 10) for i in range(5)]

        page = rank_scope(candidates, limit=2, offset=2)

        assert [c.name for c, _ in page] == ["C2", "C3"]
        assert [p for _, p in page] == [60, 40]

    def test_offset_past_end(self, make_candidate):
        candidates = [make_candidate("Only", 3000)]
        assert rank_scope(candidates, limit=10, offset=5) == []

    def test_sort_by_score(self, make_candidate):
        ordered = sort_by_score([make_candidate("a", 1), make_candidate("b", 3), make_candidate("c", 2)])
        assert [c.name for c in ordered] == ["b", "c", "a"]
