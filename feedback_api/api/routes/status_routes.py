"""상태 확인 엔드포인트"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["status"])

STATUS_MESSAGE = "API is up and running"


@router.get("/status", response_class=PlainTextResponse)
async def status() -> PlainTextResponse:
    """API 동작 여부 확인 (항상 200)"""
    return PlainTextResponse(STATUS_MESSAGE)
