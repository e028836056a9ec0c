from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cumulocity_client.infrastructure.pipeline import (  # noqa: E402
    ApiPipeline,
    HttpxRequestExecutor,
)

BASE_URL = "https://t100.example.com/"

Responder = Callable[[httpx.Request], httpx.Response]


class RecordingTransport:
    """MockTransport handler that records requests and replays queued answers."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responses: List[Union[httpx.Response, Responder, Exception]] = []

    def respond(
        self,
        status_code: int = 200,
        *,
        json_body: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[dict] = None,
    ) -> None:
        if json_body is not None:
            content = json.dumps(json_body).encode("utf-8")
            headers = {"Content-Type": "application/json", **(headers or {})}
        self.queue(httpx.Response(status_code, content=content or b"", headers=headers))

    def raise_error(self, error: Exception) -> None:
        self.queue(error)

    def queue(self, answer: Union[httpx.Response, Responder, Exception]) -> None:
        self._responses.append(answer)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={})
        answer = self._responses.pop(0)
        if isinstance(answer, Exception):
            raise answer
        if callable(answer):
            return answer(request)
        return answer

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture()
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture()
def http_client(transport: RecordingTransport) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(transport))


@pytest.fixture()
def api_pipeline(http_client: httpx.AsyncClient) -> ApiPipeline:
    return ApiPipeline(HttpxRequestExecutor(http_client))
