"""로깅 설정"""
import logging
import sys
import os
from typing import IO, Optional

from feedback_api.core.config import settings


# Production 환경에서는 DEBUG 로그 비활성화
IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"

ACCESS_LOGGER_NAME = "feedback_api.access"


def setup_logging() -> logging.Logger:
    """애플리케이션 로거 초기화 및 설정"""

    logger = logging.getLogger("feedback_api")

    # Production에서는 최소 INFO 레벨
    log_level = settings.log_level.upper()
    if IS_PRODUCTION and log_level == "DEBUG":
        log_level = "INFO"

    logger.setLevel(getattr(logging, log_level))

    # 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level))

    if IS_PRODUCTION:
        # Production: 최소 정보만
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        # Development: 상세 정보
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    console_handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(console_handler)

    return logger


def setup_access_logger(stream: Optional[IO[str]] = None) -> logging.Logger:
    """액세스 로그 전용 로거

    한 요청당 한 줄(Common Log Format)을 그대로 출력해야 하므로
    메시지 외의 prefix를 붙이지 않습니다. 앱마다 출력 스트림이 다를 수 있어
    전역 logger 레지스트리에 등록하지 않은 독립 Logger를 매번 새로 만듭니다.

    Args:
        stream: 출력 스트림 (기본값: stdout)

    Returns:
        액세스 로거
    """
    access_logger = logging.Logger(ACCESS_LOGGER_NAME, logging.INFO)
    access_logger.propagate = False

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    access_logger.addHandler(handler)

    return access_logger


logger = setup_logging()
