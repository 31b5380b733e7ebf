"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from functools import partial
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.staticfiles import StaticFiles

from src.api.health import router as health_router
from src.api.quest_log import router as quest_log_router
from src.config import settings
from src.core.logging import get_logger, setup_logging
from src.core.quest_log.errors import QuestLogError
from src.core.quest_log.renderer import QuestRenderer
from src.services.acquisition import fetch_quest_document, read_quest_document
from src.services.quest_log_service import DocumentFetcher, QuestLogService

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def build_fetcher() -> DocumentFetcher:
    """설정에 따라 로컬 파일, 원격 HTTP fetch, 번들 정적 파일 중 선택"""
    if settings.QUEST_DATA_PATH:
        logger.debug("Using local quest document: %s", settings.QUEST_DATA_PATH)
        return partial(read_quest_document, settings.QUEST_DATA_PATH)
    if settings.QUEST_DATA_BASE_URL:
        logger.debug("Fetching quest document from %s", settings.QUEST_DATA_BASE_URL)
        return partial(
            fetch_quest_document,
            settings.QUEST_DATA_BASE_URL,
            settings.QUEST_DATA_FILENAME,
            timeout=settings.FETCH_TIMEOUT,
        )
    # /static으로 서빙되는 파일과 같은 파일. 아직 바인딩 전인 자기 자신에게 HTTP 요청하지 않는다
    path = Path(settings.QUEST_STATIC_DIR) / settings.QUEST_DATA_FILENAME
    logger.debug("Using bundled quest document: %s", path)
    return partial(read_quest_document, path)


def build_quest_log_service() -> QuestLogService:
    return QuestLogService(
        renderer=QuestRenderer(target_year=settings.QUEST_TARGET_YEAR),
        fetcher=build_fetcher(),
        default_filename=settings.QUEST_DATA_FILENAME,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Initializing QuestLogService...")
    service = build_quest_log_service()
    app.state.quest_log_service = service
    logger.info(
        "QuestLogService initialized (selector year %d).", settings.QUEST_TARGET_YEAR
    )

    if settings.AUTO_LOAD_ON_STARTUP:
        try:
            # 동기 fetch/파일 읽기가 이벤트 루프를 막지 않도록
            await run_in_threadpool(service.load_default)
        except QuestLogError as e:
            # 자동 로드 실패는 치명적이지 않음. 수동 업로드 대기
            logger.warning("Starting without quest document: %s", e)

    yield

    logger.info("Shutting down...")


app = FastAPI(title="Quest Log Viewer", lifespan=lifespan)

app.include_router(health_router)
app.include_router(quest_log_router)
app.mount(
    "/static",
    StaticFiles(directory=settings.QUEST_STATIC_DIR, check_dir=False),
    name="static",
)
