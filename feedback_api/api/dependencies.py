"""라우트 공용 의존성

카탈로그/설정은 모듈 전역이 아니라 app.state에서 주입합니다.
"""
from fastapi import Request

from feedback_api.core.config import Settings
from feedback_api.repositories.catalog_repository import CatalogStore


def get_catalog(request: Request) -> CatalogStore:
    """앱 생성 시 등록된 CatalogStore"""
    return request.app.state.catalog


def get_settings(request: Request) -> Settings:
    """앱 생성 시 등록된 Settings"""
    return request.app.state.settings
