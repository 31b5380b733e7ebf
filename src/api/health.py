"""Health check endpoint."""

from fastapi import APIRouter, Depends

from src.api.quest_log import get_quest_log_service
from src.services.quest_log_service import QuestLogService

router = APIRouter()


@router.get("/health")
def health_check(
    service: QuestLogService = Depends(get_quest_log_service),
) -> dict[str, str]:
    """Return application status and whether a quest document is loaded."""
    return {
        "status": "ok",
        "document": "loaded" if service.has_document else "empty",
    }
