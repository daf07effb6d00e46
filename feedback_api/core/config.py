"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 서버 바인딩 (기본값 :3000)
    host: str = "0.0.0.0"
    port: int = 3000

    # 정적 파일
    # - views_dir: "/" 요청 시 index_file을 내려줄 디렉토리
    # - static_dir: "/static/" prefix를 떼고 파일을 찾을 디렉토리
    views_dir: str = "./views"
    index_file: str = "index.html"
    static_dir: str = "./static"

    # 피드백 엔드포인트
    # False(기본값): 상품이 없어도 200 + "Product Not Found" (기존 동작 호환)
    # True: 404 + JSON 에러 객체
    feedback_strict_not_found: bool = False

    # API
    api_title: str = "Product Feedback API"
    api_version: str = "1.0.0"
    api_description: str = "보드게임 상품 목록 조회 및 피드백 수집(mock) API"

    # 로깅
    log_level: str = "INFO"
    access_log_enabled: bool = True

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("index_file")
    @classmethod
    def validate_index_file(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError("index_file must be a plain file name")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
