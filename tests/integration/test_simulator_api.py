"""Integration tests for the hiring simulator endpoint"""

import pytest
from fastapi.testclient import TestClient


class TestSimulatorAPI:
    """Integration tests for hiring simulation"""

    def test_run_with_default_team(self, client: TestClient, seeded_repository):
        alex = seeded_repository.get_by_name("Alex Chen")

        response = client.post("/api/simulator/run", json={"candidateIds": [alex.id, alex.id]})

        assert response.status_code == 200
        data = response.json()
        assert data["teamSize"] == 9
        assert data["newAvgScore"] == pytest.approx((2750 * 8 + 3487) / 9)
        assert data["scoreImprovement"] == pytest.approx((2750 * 8 + 3487) / 9 - 2750)
        assert data["productivityIncrease"] == 8
        assert data["estimatedCost"] == 180000
        assert data["timeToHire"] == 5
        assert data["riskAssessment"] == "Low"

    def test_run_with_custom_team_and_coverage(self, client: TestClient, seeded_repository):
        ids = [seeded_repository.get_by_name(n).id for n in ("Yuki Tanaka", "Carlos Santos", "Hassan Ali")]

        response = client.post("/api/simulator/run", json={
            "candidateIds": ids,
            "team": {"currentSkills": {"Mobile": 40}, "avgScore": 2500, "teamSize": 2},
            "skillCoverage": {ids[0]: {"Mobile": 90}},
        })

        data = response.json()
        assert response.status_code == 200
        assert data["teamSize"] == 5
        assert data["skillImprovements"] == {"Mobile": pytest.approx(9)}
        assert data["riskAssessment"] == "Medium"
        assert data["estimatedCost"] == 450000

    def test_unknown_candidate(self, client: TestClient):
        response = client.post("/api/simulator/run", json={"candidateIds": ["missing"]})

        assert response.status_code == 404
        assert response.json()["message"] == "Candidate missing not found"

    def test_empty_selection(self, client: TestClient):
        response = client.post("/api/simulator/run", json={"candidateIds": []})
        assert response.status_code == 422
