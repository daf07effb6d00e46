"""ASGI 미들웨어 - export only."""

from .access_log import AccessLogMiddleware

__all__ = ["AccessLogMiddleware"]
