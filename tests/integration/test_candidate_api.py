"""Integration tests for candidate endpoints"""

from fastapi.testclient import TestClient

from backend.app.services.search import CandidateFilters


class TestCandidateAPI:
    """Integration tests for candidate lookup and search"""

    def test_get_candidate(self, client: TestClient, seeded_repository):
        alex = seeded_repository.get_by_name("Alex Chen")

        response = client.get(f"/api/candidates/{alex.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == alex.id
        assert data["skillsScore"] == 3500
        assert data["imageUrl"].startswith("https://")
        assert "email" not in data

    def test_get_candidate_not_found(self, client: TestClient):
        response = client.get("/api/candidates/does-not-exist")

        assert response.status_code == 404
        body = response.json()
        assert body["message"] == "Candidate not found"
        assert body["request_id"]

    def test_search_is_not_an_id(self, client: TestClient):
        """Test /search is routed to search, not to the id lookup"""
        response = client.get("/api/candidates/search")

        assert response.status_code == 200
        assert len(response.json()) == 15

    def test_search_by_skills(self, client: TestClient):
        response = client.get("/api/candidates/search", params={"skills": "kafka, pytorch"})

        names = {c["name"] for c in response.json()}
        assert names == {"David Kim", "Emma Watson"}

    def test_search_by_score_range(self, client: TestClient):
        response = client.get("/api/candidates/search", params={"minScore": 3000, "maxScore": 3400})

        scores = [c["overallScore"] for c in response.json()]
        assert scores == sorted(scores, reverse=True)
        assert all(3000 <= s <= 3400 for s in scores)
        assert 3398 in scores
        assert 3487 not in scores

    def test_search_by_region_and_experience(self, client: TestClient):
        response = client.get("/api/candidates/search", params={"region": "asia", "experience": "7 years"})

        assert [c["name"] for c in response.json()] == ["Priya Patel"]

    def test_search_invalid_score(self, client: TestClient):
        response = client.get("/api/candidates/search", params={"minScore": "high"})

        assert response.status_code == 400
        assert response.json()["message"] == "minScore must be an integer"

    def test_search_all_parameters_blank(self, client: TestClient):
        """Test empty query values impose no constraint"""
        response = client.get(
            "/api/candidates/search?skills=&experience=&industry=&region=&minScore=&maxScore="
        )

        assert response.status_code == 200
        assert len(response.json()) == 15

    def test_search_skills_with_blank_score_bounds(self, client: TestClient, seeded_repository):
        response = client.get(
            "/api/candidates/search?skills=python&experience=&industry=&region=&minScore=&maxScore="
        )

        assert response.status_code == 200
        expected = [c.id for c in seeded_repository.search(CandidateFilters(skills=["python"]))]
        assert expected
        assert [c["id"] for c in response.json()] == expected

    def test_candidate_resumes(self, client: TestClient):
        upload = client.post(
            "/api/resumes/upload",
            files={"resume": ("cv.txt", b"Python", "text/plain")},
            data={"name": "Jordan Lee", "email": "jordan@example.com"},
        )
        candidate_id = upload.json()["candidateId"]

        response = client.get(f"/api/candidates/{candidate_id}/resumes")

        assert response.status_code == 200
        resumes = response.json()
        assert len(resumes) == 1
        assert resumes[0]["filename"] == "cv.txt"
        assert resumes[0]["candidateId"] == candidate_id
        assert "content" not in resumes[0]

    def test_candidate_resumes_not_found(self, client: TestClient):
        assert client.get("/api/candidates/missing/resumes").status_code == 404
