"""API 엔드포인트 패키지 - export only."""

from .routes import status_router, product_router, static_router, mount_static

__all__ = ["status_router", "product_router", "static_router", "mount_static"]
