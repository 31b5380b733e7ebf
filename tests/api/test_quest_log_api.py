"""Quest log API 엔드포인트 테스트"""

import json

from fastapi.testclient import TestClient

from src.main import app


class TestGetQuestLog:
    def test_not_loaded(self, client: TestClient) -> None:
        response = client.get("/quest-log")
        assert response.status_code == 404

    def test_view_model(self, loaded_client: TestClient) -> None:
        response = loaded_client.get("/quest-log")
        assert response.status_code == 200
        data = response.json()

        assert data["current_month"] == "2026-01"
        assert data["selected_month"] == "2026-01"

        stats = data["stats"]
        assert stats["name"] == "Aria"
        assert stats["class"] == "Wizard"
        assert stats["hp_percent"] == 75
        assert stats["day_count"] == 3
        assert [m["badge"] for m in stats["modifiers"]] == [
            "Night Vision: +2",
            "Blessed By Moon: +1",
        ]

        months = data["months"]
        assert len(months) == 12
        assert [m["month_key"] for m in months if m["has_events"]] == [
            "2026-01",
            "2026-02",
        ]

        timeline = data["timeline"]
        assert timeline["empty"] is False
        assert [e["date"] for e in timeline["entries"]] == ["2026-01-03", "2026-01-05"]
        assert timeline["entries"][1]["is_today"] is True
        assert timeline["entries"][1]["heading"] == "January 5, 2026 - TODAY"
        assert '<span class="success">Victory</span>' in (
            timeline["entries"][1]["outcome_markup"]
        )


class TestUpload:
    def test_upload_replaces_document(
        self, loaded_client: TestClient, sample_document: dict
    ) -> None:
        sample_document["character"]["name"] = "Corvin"
        response = loaded_client.post(
            "/quest-log/upload", content=json.dumps(sample_document)
        )
        assert response.status_code == 200
        assert response.json()["stats"]["name"] == "Corvin"
        assert loaded_client.get("/quest-log").json()["stats"]["name"] == "Corvin"

    def test_invalid_json_keeps_previous(self, loaded_client: TestClient) -> None:
        response = loaded_client.post("/quest-log/upload", content=b"{broken")
        assert response.status_code == 400
        assert "Invalid JSON" in response.json()["detail"]
        assert loaded_client.get("/quest-log").json()["stats"]["name"] == "Aria"

    def test_missing_field(self, client: TestClient, sample_document: dict) -> None:
        del sample_document["character"]
        response = client.post("/quest-log/upload", content=json.dumps(sample_document))
        assert response.status_code == 400
        assert "character" in response.json()["detail"]
        assert client.get("/quest-log").status_code == 404

    def test_zero_max_hp_serializes(self, client: TestClient, sample_document: dict) -> None:
        sample_document["character"]["stats"]["max_hp"] = 0
        response = client.post("/quest-log/upload", content=json.dumps(sample_document))
        assert response.status_code == 200
        stats = response.json()["stats"]
        assert stats["hp_percent"] is None
        assert stats["hp_bar_percent"] == 100

    def test_huge_integer_hp_serializes(
        self, client: TestClient, sample_document: dict
    ) -> None:
        sample_document["character"]["stats"]["hp"] = 10**400
        response = client.post("/quest-log/upload", content=json.dumps(sample_document))
        assert response.status_code == 200
        stats = response.json()["stats"]
        assert stats["hp"] is None
        assert stats["hp_percent"] is None
        assert stats["hp_bar_percent"] == 100
        assert stats["max_hp"] == 40

    def test_upload_clears_notice(
        self, loaded_client: TestClient, sample_document: dict
    ) -> None:
        assert loaded_client.get("/quest-log/notice").json()["level"] == "success"
        response = loaded_client.post(
            "/quest-log/upload", content=json.dumps(sample_document)
        )
        assert response.status_code == 200
        assert loaded_client.get("/quest-log/notice").json()["level"] is None


class TestReload:
    def test_reload(self, client: TestClient) -> None:
        response = client.post("/quest-log/reload")
        assert response.status_code == 200
        assert response.json()["stats"]["name"] == "Aria"
        notice = client.get("/quest-log/notice").json()
        assert notice["level"] == "success"
        assert notice["message"] == "Quest data loaded successfully!"

    def test_reload_failure(self, failing_service) -> None:
        app.state.quest_log_service = failing_service
        client = TestClient(app)
        response = client.post("/quest-log/reload")
        assert response.status_code == 502
        assert "Could not auto-load quest-data.json" in response.json()["detail"]

        notice = client.get("/quest-log/notice").json()
        assert notice["level"] == "warning"
        assert notice["detail"] == "HTTP error! status: 404"


class TestSelectMonth:
    def test_select_month(self, loaded_client: TestClient) -> None:
        response = loaded_client.post("/quest-log/months/2026-02")
        assert response.status_code == 200
        data = response.json()
        assert data["selected_month"] == "2026-02"
        assert [m["month_key"] for m in data["months"] if m["is_selected"]] == [
            "2026-02"
        ]
        entries = data["timeline"]["entries"]
        assert len(entries) == 1
        assert entries[0]["date_label"] == "February 1, 2026"
        assert entries[0]["is_today"] is False
        assert "stats" not in data

    def test_select_empty_month(self, loaded_client: TestClient) -> None:
        response = loaded_client.post("/quest-log/months/2026-08")
        timeline = response.json()["timeline"]
        assert timeline["empty"] is True
        assert timeline["message"] == "No events recorded for this month"
        assert timeline["entries"] == []

    def test_selection_persists(self, loaded_client: TestClient) -> None:
        loaded_client.post("/quest-log/months/2026-02")
        data = loaded_client.get("/quest-log").json()
        assert data["selected_month"] == "2026-02"
        assert data["current_month"] == "2026-01"

    def test_malformed_key(self, loaded_client: TestClient) -> None:
        response = loaded_client.post("/quest-log/months/someday")
        assert response.status_code == 400

    def test_not_loaded(self, client: TestClient) -> None:
        response = client.post("/quest-log/months/2026-01")
        assert response.status_code == 404


class TestNotice:
    def test_no_notice(self, client: TestClient) -> None:
        assert client.get("/quest-log/notice").json() == {
            "level": None,
            "message": None,
            "detail": None,
        }
