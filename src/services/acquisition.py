"""퀘스트 문서 획득 — HTTP fetch(캐시 무효화) / 로컬 파일 / 업로드 본문

획득 실패는 AcquisitionFailure (복구 가능, 경고 표시용).
업로드 본문 JSON 오류는 InvalidDocument (사용자 입력 오류).
"""

import json
import logging
import time
from pathlib import Path
from typing import Any, Optional

import httpx

from src.core.quest_log.errors import AcquisitionFailure, InvalidDocument

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON file. Please check your file format."

NO_CACHE_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


def _cache_buster() -> str:
    return str(int(time.time() * 1000))


def fetch_quest_document(
    base_url: str,
    filename: str,
    *,
    client: Optional[httpx.Client] = None,
    timeout: float = 10.0,
) -> Any:
    """base_url + filename을 GET. 매 요청마다 ?t=<ms> 쿼리로 캐시 우회.

    Raises:
        AcquisitionFailure: 네트워크 오류, 비 2xx 응답, JSON 파싱 실패
    """
    url = base_url.rstrip("/") + "/" + filename.lstrip("/")
    params = {"t": _cache_buster()}

    owns_client = client is None
    http = client if client is not None else httpx.Client(timeout=timeout)
    try:
        response = http.get(url, params=params, headers=NO_CACHE_HEADERS)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        raise AcquisitionFailure(
            filename, f"HTTP error! status: {e.response.status_code}"
        ) from e
    except httpx.HTTPError as e:
        raise AcquisitionFailure(filename, str(e) or type(e).__name__) from e
    except ValueError as e:
        raise AcquisitionFailure(filename, f"invalid JSON: {e}") from e
    finally:
        if owns_client:
            http.close()

    logger.info("Fetched %s from %s", filename, url)
    return data


def read_quest_document(path: str | Path) -> Any:
    """로컬 JSON 파일 읽기.

    Raises:
        AcquisitionFailure: 파일 없음/읽기 실패, JSON 파싱 실패
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise AcquisitionFailure(path.name, str(e)) from e
    except ValueError as e:
        raise AcquisitionFailure(path.name, f"invalid JSON: {e}") from e

    logger.info("Read quest document from %s", path)
    return data


def decode_quest_document(body: str | bytes) -> Any:
    """업로드된 본문 JSON 디코드. 실패 시 InvalidDocument."""
    try:
        return json.loads(body)
    except ValueError as e:
        logger.warning("Uploaded document is not valid JSON: %s", e)
        raise InvalidDocument(INVALID_JSON_MESSAGE) from e
