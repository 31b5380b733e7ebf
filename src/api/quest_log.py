"""Quest log API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.schemas import (
    ErrorResponse,
    MonthSelectionResponse,
    NoticeResponse,
    QuestLogResponse,
    build_month_infos,
    build_quest_log_response,
    build_timeline_info,
)
from src.core.logging import get_logger
from src.core.quest_log.errors import AcquisitionFailure, InvalidDocument, MalformedDate
from src.services.quest_log_service import QuestLogService

logger = get_logger(__name__)

router = APIRouter(prefix="/quest-log", tags=["quest-log"])

NOT_LOADED_DETAIL = "No quest document loaded"


def get_quest_log_service(request: Request) -> QuestLogService:
    """QuestLogService 인스턴스 반환 (의존성 주입)"""
    service: QuestLogService = request.app.state.quest_log_service
    return service


@router.get(
    "",
    response_model=QuestLogResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_quest_log(
    service: QuestLogService = Depends(get_quest_log_service),
) -> QuestLogResponse:
    """
    현재 퀘스트 로그 조회

    스탯, 12개월 선택 버튼, 선택 월의 타임라인을 반환합니다.
    """
    view_model = service.view_model
    if view_model is None:
        raise HTTPException(status_code=404, detail=NOT_LOADED_DETAIL)
    return build_quest_log_response(view_model)


@router.post(
    "/upload",
    response_model=QuestLogResponse,
    responses={400: {"model": ErrorResponse}},
)
async def upload_quest_log(
    http_request: Request,
    service: QuestLogService = Depends(get_quest_log_service),
) -> QuestLogResponse:
    """
    퀘스트 문서 수동 업로드

    요청 본문 전체를 JSON 문서로 읽어 현재 문서를 교체합니다.
    실패 시 이전 문서는 그대로 유지됩니다.
    """
    body = await http_request.body()
    try:
        view_model = service.load_upload(body)
    except (InvalidDocument, MalformedDate) as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Quest document uploaded: %s", view_model.stats.name)
    return build_quest_log_response(view_model)


@router.post(
    "/reload",
    response_model=QuestLogResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def reload_quest_log(
    service: QuestLogService = Depends(get_quest_log_service),
) -> QuestLogResponse:
    """
    기본 퀘스트 문서 다시 불러오기

    획득 실패 시 502와 경고 메시지를 반환합니다. 수동 업로드는 계속 가능합니다.
    """
    try:
        view_model = service.load_default()
    except AcquisitionFailure:
        notice = service.notice
        detail = notice.message if notice is not None else NOT_LOADED_DETAIL
        raise HTTPException(status_code=502, detail=detail)
    except (InvalidDocument, MalformedDate) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return build_quest_log_response(view_model)


@router.post(
    "/months/{month_key}",
    response_model=MonthSelectionResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def select_month(
    month_key: str,
    service: QuestLogService = Depends(get_quest_log_service),
) -> MonthSelectionResponse:
    """
    월 선택

    타임라인만 다시 계산합니다. 기록이 없는 달은 empty 타임라인을 반환합니다.
    """
    if not service.has_document:
        raise HTTPException(status_code=404, detail=NOT_LOADED_DETAIL)

    try:
        view_model = service.select_month(month_key)
    except MalformedDate as e:
        raise HTTPException(status_code=400, detail=str(e))

    return MonthSelectionResponse(
        selected_month=view_model.selected_month,
        months=build_month_infos(view_model.month_buttons),
        timeline=build_timeline_info(view_model.selected_month, view_model.timeline),
    )


@router.get("/notice", response_model=NoticeResponse)
def get_notice(
    service: QuestLogService = Depends(get_quest_log_service),
) -> NoticeResponse:
    """최근 알림 배너 조회"""
    notice = service.notice
    if notice is None:
        return NoticeResponse()
    return NoticeResponse(
        level=notice.level.value, message=notice.message, detail=notice.detail
    )
