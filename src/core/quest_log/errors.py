"""퀘스트 로그 예외 정의"""


class QuestLogError(Exception):
    """퀘스트 로그 처리 중 발생하는 모든 예외의 기반"""


class MalformedDate(QuestLogError, ValueError):
    """날짜 문자열이 숫자 3개 구성요소로 분리되지 않음"""

    def __init__(self, value: object, reason: str = "") -> None:
        self.value = value
        message = f"Malformed date: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidDocument(QuestLogError, ValueError):
    """필수 필드 누락/타입 불일치. 로드 거부, 이전 상태 유지."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class AcquisitionFailure(QuestLogError, RuntimeError):
    """문서 획득(fetch/파일 읽기) 실패. 경고만 표시, 수동 로드는 계속 가능."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to acquire {source}: {reason}")
