"""액세스 로그 미들웨어 (Common Log Format)

요청 1건당 1줄:
    127.0.0.1 - - [16/Oct/2026:10:55:36 +0000] "GET /products HTTP/1.1" 200 1234
"""
import logging
import time
from dataclasses import dataclass
from typing import Optional

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from feedback_api.core.logging import ACCESS_LOGGER_NAME, logger


@dataclass
class RequestLog:
    """액세스 로그 1건"""

    client_ip: str
    timestamp: str
    method: str
    path: str
    protocol: str
    status_code: int
    content_length: int

    def to_text(self) -> str:
        return (
            f'{self.client_ip} - - [{self.timestamp}] '
            f'"{self.method} {self.path} {self.protocol}" '
            f'{self.status_code} {self.content_length}'
        )


def _request_uri(scope: Scope) -> str:
    """path + query string (원본 요청 URI)"""
    path = scope.get("raw_path") or scope.get("path", "").encode("utf-8")
    if isinstance(path, bytes):
        path = path.split(b"?", 1)[0].decode("latin-1")
    query = scope.get("query_string", b"")
    if query:
        return f"{path}?{query.decode('latin-1')}"
    return path


def _client_ip(scope: Scope) -> str:
    client = scope.get("client")
    if not client:
        return "-"
    return client[0]


class AccessLogMiddleware:
    """
    요청 로깅 ASGI 미들웨어

    라우터 전체를 감싸서 상태 코드/응답 크기를 send 단계에서 수집한 뒤
    응답이 끝나면 한 줄을 기록합니다. 로그 쓰기 실패는 logging 핸들러가
    처리하므로 응답을 중단시키지 않습니다.
    """

    def __init__(self, app: ASGIApp, access_logger: Optional[logging.Logger] = None):
        self.app = app
        self.access_logger = access_logger or logging.getLogger(ACCESS_LOGGER_NAME)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        # lifespan / websocket 은 그대로 통과
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.perf_counter()
        # 요청 시작 시각 기준으로 기록
        timestamp = time.strftime("%d/%b/%Y:%H:%M:%S %z")
        status_code = 500
        content_length = 0

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code, content_length
            if message["type"] == "http.response.start":
                status_code = message["status"]
            elif message["type"] == "http.response.body":
                content_length += len(message.get("body", b""))
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            # 처리 중 예외도 기록 후 그대로 전파
            self._emit(scope, 500, content_length, start_time, timestamp)
            raise

        self._emit(scope, status_code, content_length, start_time, timestamp)

    def _emit(
        self,
        scope: Scope,
        status_code: int,
        content_length: int,
        start_time: float,
        timestamp: str,
    ) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000

        entry = RequestLog(
            client_ip=_client_ip(scope),
            timestamp=timestamp,
            method=scope.get("method", "-"),
            path=_request_uri(scope),
            protocol=f"HTTP/{scope.get('http_version', '1.1')}",
            status_code=status_code,
            content_length=content_length,
        )
        self.access_logger.info(entry.to_text())
        logger.debug(f"{entry.method} {entry.path} took {duration_ms:.2f}ms")
