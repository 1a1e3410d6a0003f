# -*- coding: utf-8 -*-
"""
universe.py — Client for the reading service ("ask the universe").

Sends a ReadingRequest to the service over HTTP and returns the raw answer
text. Every failure (transport, non-2xx status, missing credential on the
service side, malformed body) surfaces as ServiceUnavailableError; nothing is
retried or cached.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

import requests
import structlog
from dotenv import load_dotenv

from .schemas import ReadingRequest

load_dotenv()
READING_API_URL = os.getenv("READING_API_URL", "http://127.0.0.1:8000/api/chat")
READING_TIMEOUT: Optional[float] = (
    float(os.environ["READING_TIMEOUT"]) if os.getenv("READING_TIMEOUT") else None
)

# User-facing text when the service gives no fallback message of its own.
UNAVAILABLE_MESSAGE = "Spojení se na moment rozostřilo. Zkusíme to vyložit znovu?"

logger = structlog.get_logger(__name__)


class ReadingServiceError(Exception):
    """Base class for reading-client errors."""


class ServiceUnavailableError(ReadingServiceError):
    """
    The reading could not be obtained.

    `message` is safe to show to the user; `debug` holds the underlying cause
    (the service's `error` field or the transport exception).
    """

    def __init__(self, message: str = UNAVAILABLE_MESSAGE, debug: Optional[str] = None,
                 status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.debug = debug
        self.status_code = status_code


class UniverseClient:
    def __init__(
        self,
        api_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.api_url = api_url or READING_API_URL
        self.session = session or requests.Session()
        self.timeout = READING_TIMEOUT if timeout is None else timeout

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "UniverseClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def send(self, request: ReadingRequest) -> str:
        """POST the request and return the `answer` text."""
        payload = request.model_dump(exclude_none=True)
        try:
            resp = self.session.post(self.api_url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("reading_request_failed", url=self.api_url, error=str(e))
            raise ServiceUnavailableError(debug=f"{type(e).__name__}: {e}") from e

        data = _json_body(resp)
        if not resp.ok:
            logger.warning(
                "reading_service_error",
                status=resp.status_code,
                error=data.get("error"),
            )
            raise ServiceUnavailableError(
                message=data.get("answer") or UNAVAILABLE_MESSAGE,
                debug=data.get("error") or f"API error: {resp.status_code}",
                status_code=resp.status_code,
            )

        answer = data.get("answer")
        if not isinstance(answer, str):
            raise ServiceUnavailableError(debug="Response body has no 'answer' string",
                                          status_code=resp.status_code)
        logger.info("reading_received", mode=request.mode, cards=len(request.cards),
                    answer_chars=len(answer))
        return answer


def _json_body(resp: requests.Response) -> Dict[str, Any]:
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
