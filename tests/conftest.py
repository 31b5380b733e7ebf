"""Shared test fixtures."""

import copy

import pytest
from fastapi.testclient import TestClient

from src.core.quest_log.errors import AcquisitionFailure
from src.core.quest_log.renderer import QuestRenderer
from src.main import app
from src.services.quest_log_service import QuestLogService

SAMPLE_DOCUMENT: dict = {
    "character": {
        "name": "Aria",
        "class": "Wizard",
        "stats": {"hp": 30, "max_hp": 40, "spell_points": 12},
    },
    "quest_progress": {
        "current_date": "2026-01-05",
        "completed_days": [
            {
                "date": "2026-01-03",
                "event": "Left the village",
                "outcome": "Success - packed supplies",
            },
            {
                "date": "2026-01-05",
                "event": "Fought the goblin scouts",
                "outcome": "Victory after Result 17 on the attack roll",
            },
            {
                "date": "2026/02/01",
                "event": "Crossed the river",
                "outcome": "Partial Success, lost a boot",
            },
        ],
        "active_modifiers": {"night_vision": 2, "blessed_by_moon": 1},
    },
}


@pytest.fixture()
def sample_document() -> dict:
    """Deep copy of a small valid quest document."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture()
def quest_log_service(sample_document: dict) -> QuestLogService:
    """Service whose default fetch returns the sample document."""
    return QuestLogService(
        renderer=QuestRenderer(target_year=2026),
        fetcher=lambda: copy.deepcopy(sample_document),
    )


@pytest.fixture()
def client(quest_log_service: QuestLogService) -> TestClient:
    """FastAPI TestClient with an empty (not yet loaded) quest log service."""
    app.state.quest_log_service = quest_log_service
    return TestClient(app)


@pytest.fixture()
def loaded_client(client: TestClient, quest_log_service: QuestLogService) -> TestClient:
    """TestClient whose service already holds the sample document."""
    quest_log_service.load_default()
    return client


@pytest.fixture()
def failing_service() -> QuestLogService:
    """Service whose default fetch always fails."""

    def _fail():
        raise AcquisitionFailure("quest-data.json", "HTTP error! status: 404")

    return QuestLogService(renderer=QuestRenderer(target_year=2026), fetcher=_fail)
