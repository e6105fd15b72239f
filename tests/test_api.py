"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from league_onboarding.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestProcessEndpoint:
    """Tests for POST /process."""

    def test_process_csv(self, client: TestClient) -> None:
        response = client.post(
            "/process",
            json={
                "fileContent": "id,name\n1,Hawks\n2,Owls\n",
                "fileName": "teams.csv",
                "fileId": "abc",
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["fileId"] == "abc"
        assert body["recordCount"] == 2
        assert body["fieldCount"] == 2
        assert body["schema"]["name"] == "teams"
        assert body["schema"]["items"]["properties"]["id"]["type"] == "number"
        assert body["extractedData"][0] == {"id": "1", "name": "Hawks"}
        assert body["requestId"]

    def test_parse_failure_is_200_with_error(self, client: TestClient) -> None:
        response = client.post(
            "/process",
            json={"fileContent": "{bad", "fileName": "x.json"},
        )

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert "x.json" in response.json()["error"]

    def test_missing_fields(self, client: TestClient) -> None:
        response = client.post("/process", json={"fileName": "x.csv"})

        assert response.status_code == 400
        assert response.json()["detail"] == {
            "success": False,
            "error": "File content and name are required",
        }


class TestProcessFilesEndpoint:
    """Tests for POST /process/files."""

    def test_batch_keeps_order(self, client: TestClient) -> None:
        files = [
            ("files", ("players.csv", b"player_id,name\n1,A\n", "text/csv")),
            ("files", ("notes.txt", b"hello", "text/plain")),
            ("files", ("games.json", b'[{"game_id": 1}]', "application/json")),
        ]
        response = client.post("/process/files", files=files)

        assert response.status_code == 200
        body = response.json()
        assert [r["fileName"] for r in body["results"]] == [
            "players.csv",
            "notes.txt",
            "games.json",
        ]
        assert [r["success"] for r in body["results"]] == [True, False, True]
        assert body["dashboard"]["stats"]["data_quality"] == 67
        assert body["dashboard"]["data_types"] == {"number": 2, "string": 1}


class TestUploadEndpoint:
    """Tests for POST /upload."""

    def test_accepts_csv(self, client: TestClient) -> None:
        response = client.post(
            "/upload",
            files={"file": ("roster.csv", b"a,b\n1,2\n", "text/csv")},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["fileId"].startswith("file_")
        assert body["fileName"] == "roster.csv"
        assert body["fileSize"] == 8

    def test_accepts_excel_by_extension(self, client: TestClient) -> None:
        response = client.post(
            "/upload",
            files={"file": ("roster.xlsx", b"PK", "application/octet-stream")},
        )

        assert response.status_code == 200

    def test_rejects_other_types(self, client: TestClient) -> None:
        response = client.post(
            "/upload",
            files={"file": ("notes.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 400
        assert "Invalid file type" in response.json()["detail"]["error"]

    def test_rejects_large_files(self, client: TestClient, monkeypatch) -> None:
        monkeypatch.setenv("ONBOARDING_MAX_UPLOAD_BYTES", "4")
        response = client.post(
            "/upload",
            files={"file": ("roster.csv", b"a,b\n1,2\n", "text/csv")},
        )

        assert response.status_code == 400
        assert "too large" in response.json()["detail"]["error"]


class TestLeagueEndpoints:
    """Tests for /league."""

    def test_create(self, client: TestClient) -> None:
        payload = {
            "name": "Metro Basketball",
            "sport": "Basketball",
            "contactEmail": "admin@metro.com",
            "contactName": "Jordan",
        }
        response = client.post("/league", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["leagueId"].startswith("league_")
        assert body["data"]["status"] == "onboarding"
        assert body["data"]["name"] == "Metro Basketball"

    def test_create_missing_fields(self, client: TestClient) -> None:
        response = client.post("/league", json={"name": "Metro"})

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == (
            "Missing required fields: sport, contactEmail, contactName"
        )

    def test_fetch(self, client: TestClient) -> None:
        response = client.get("/league", params={"id": "league_1"})

        assert response.status_code == 200
        assert response.json()["data"]["id"] == "league_1"

    def test_fetch_requires_id(self, client: TestClient) -> None:
        response = client.get("/league")

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "League ID is required"
