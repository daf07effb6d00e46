"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 임시 views/static 디렉토리를 가리키는 Settings 주입
- 앱/클라이언트 픽스처
"""

from __future__ import annotations

import io
import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from feedback_api.app import create_app  # noqa: E402
from feedback_api.core.config import Settings  # noqa: E402
from tests.fixtures import INDEX_HTML, STYLE_CSS  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def asset_dirs(tmp_path: Path) -> tuple[Path, Path]:
    """views / static 임시 디렉토리"""
    views = tmp_path / "views"
    static = tmp_path / "static"
    (static / "css").mkdir(parents=True)
    views.mkdir()
    (views / "index.html").write_text(INDEX_HTML)
    (static / "css" / "style.css").write_text(STYLE_CSS)
    return views, static


@pytest.fixture
def test_settings(asset_dirs: tuple[Path, Path]) -> Settings:
    views, static = asset_dirs
    return Settings(views_dir=str(views), static_dir=str(static))


@pytest.fixture
def access_log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def app(test_settings: Settings, access_log_stream: io.StringIO):
    return create_app(settings=test_settings, access_log_stream=access_log_stream)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
