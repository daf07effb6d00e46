"""서버 실행: python -m feedback_api"""
import uvicorn

from feedback_api.core.config import settings


def main() -> None:
    # 액세스 로그는 AccessLogMiddleware가 담당하므로 uvicorn 것은 끔
    uvicorn.run(
        "feedback_api.app:app",
        host=settings.host,
        port=settings.port,
        access_log=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
