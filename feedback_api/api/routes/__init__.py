"""API routes package."""

from .status_routes import router as status_router
from .product_routes import router as product_router
from .static_routes import router as static_router, mount_static

__all__ = ["status_router", "product_router", "static_router", "mount_static"]
