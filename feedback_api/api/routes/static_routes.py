"""정적 파일 라우트

- GET /            : views 디렉토리의 index 파일
- GET /static/...  : static 디렉토리 (prefix 제거 후 조회)

파일 서빙 자체는 Starlette(FileResponse, StaticFiles)에 위임합니다.
"""
from pathlib import Path

from fastapi import APIRouter, Depends, FastAPI, HTTPException
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from feedback_api.api.dependencies import get_settings
from feedback_api.core.config import Settings
from feedback_api.core.logging import logger

router = APIRouter(tags=["static"])


@router.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
async def index(settings: Settings = Depends(get_settings)) -> FileResponse:
    """프론트엔드 index 페이지"""
    index_path = Path(settings.views_dir) / settings.index_file
    if not index_path.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(index_path)


def mount_static(app: FastAPI, settings: Settings) -> bool:
    """
    /static 마운트

    디렉토리가 없으면 마운트하지 않습니다 (요청은 기본 404로 처리됨).

    Returns:
        마운트 여부
    """
    static_dir = Path(settings.static_dir)
    if not static_dir.is_dir():
        logger.warning(f"Static directory not found, /static disabled: {static_dir}")
        return False

    app.mount("/static", StaticFiles(directory=static_dir), name="static")
    return True
