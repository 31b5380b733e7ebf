"""퀘스트 로그 Service — 현재 ViewModel 소유 + 로드/선택 + 알림

Service → Core 허용. 프레젠테이션 계층은 이 Service만 호출한다.
ViewModel은 성공 시에만 통째로 교체된다. 실패한 로드는 이전 상태를 유지.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from src.core.quest_log.errors import (
    AcquisitionFailure,
    InvalidDocument,
    MalformedDate,
)
from src.core.quest_log.models import ViewModel
from src.core.quest_log.renderer import QuestRenderer
from src.services.acquisition import decode_quest_document

logger = logging.getLogger(__name__)

LOADED_MESSAGE = "Quest data loaded successfully!"

# 기본 문서 획득 함수. 인자 없이 원본 dict 반환, 실패 시 AcquisitionFailure
DocumentFetcher = Callable[[], Any]


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    """사용자에게 보여줄 배너 메시지"""

    level: NoticeLevel
    message: str
    detail: Optional[str] = None


class QuestLogService:
    """현재 문서/선택 월 상태 관리"""

    def __init__(
        self,
        renderer: QuestRenderer,
        fetcher: Optional[DocumentFetcher] = None,
        default_filename: str = "quest-data.json",
    ) -> None:
        self._renderer = renderer
        self._fetcher = fetcher
        self._default_filename = default_filename
        self._view_model: Optional[ViewModel] = None
        self._notice: Optional[Notice] = None
        self._lock = threading.Lock()

    @property
    def view_model(self) -> Optional[ViewModel]:
        return self._view_model

    @property
    def notice(self) -> Optional[Notice]:
        return self._notice

    @property
    def has_document(self) -> bool:
        return self._view_model is not None

    # === 로드 ===

    def load_raw(self, raw: Any) -> ViewModel:
        """파싱된 dict로 로드. 실패 시 이전 ViewModel 유지.

        성공 시 알림을 지운다. 성공 배너는 기본 파일 자동 로드에서만 표시.

        Raises:
            InvalidDocument, MalformedDate
        """
        try:
            view_model = self._renderer.load(raw)
        except (InvalidDocument, MalformedDate) as e:
            logger.warning("Quest document rejected: %s", e)
            self._notice = Notice(NoticeLevel.ERROR, str(e))
            raise

        with self._lock:
            self._view_model = view_model
            self._notice = None
        return view_model

    def load_upload(self, body: str | bytes) -> ViewModel:
        """수동 업로드 본문 로드."""
        try:
            raw = decode_quest_document(body)
        except InvalidDocument as e:
            self._notice = Notice(NoticeLevel.ERROR, str(e))
            raise
        return self.load_raw(raw)

    def load_default(self) -> ViewModel:
        """기본 파일 자동 로드. 실패 시 경고 알림 + AcquisitionFailure.

        수동 업로드는 실패와 무관하게 계속 가능하다.
        """
        if self._fetcher is None:
            raise AcquisitionFailure(self._default_filename, "no fetcher configured")

        try:
            raw = self._fetcher()
        except AcquisitionFailure as e:
            logger.error("Auto-load failed: %s", e)
            self._notice = Notice(
                NoticeLevel.WARNING,
                f"Could not auto-load {self._default_filename}. "
                "Please upload manually or check logs for details.",
                detail=e.reason,
            )
            raise

        view_model = self.load_raw(raw)
        self._notice = Notice(NoticeLevel.SUCCESS, LOADED_MESSAGE)
        return view_model

    # === 월 선택 ===

    def select_month(self, month_key: str) -> ViewModel:
        """타임라인만 재계산. 로드된 문서가 없으면 RuntimeError.

        Raises:
            MalformedDate: month_key 형식 오류
        """
        current = self._view_model
        if current is None:
            raise RuntimeError("No quest document loaded")

        view_model = self._renderer.select_month(current, month_key)
        with self._lock:
            # 선택 도중 새 문서가 로드됐으면 그 결과를 덮어쓰지 않는다
            if self._view_model is current:
                self._view_model = view_model
        return view_model
