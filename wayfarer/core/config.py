"""애플리케이션 전역 설정을 관리하는 모듈."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """환경 변수 기반 설정 모델."""

    SERVICE_SECRET: str
    ATTRACTION_SEARCH_LIMIT: int = 20
    SEARCH_CACHE_MAX_ENTRIES: int = 128
    APP_ENV: str = "development"
    DOCS_MODE: str = "disabled"
    EXPOSE_INTERNAL_ERRORS: bool = False
    CORS_ALLOW_ORIGINS: str = ""
    CORS_ALLOW_METHODS: str = "GET,POST,OPTIONS"
    CORS_ALLOW_HEADERS: str = "Content-Type,x-service-secret"
    CORS_ALLOW_CREDENTIALS: bool = False
    SECURITY_HEADERS_ENABLED: bool = True
    TRUSTED_HOSTS: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ATTRACTION_SEARCH_LIMIT", mode="before")
    @classmethod
    def _clamp_attraction_search_limit(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else 20
        except (TypeError, ValueError):
            numeric = 20
        return min(100, max(1, numeric))

    @field_validator("SEARCH_CACHE_MAX_ENTRIES", mode="before")
    @classmethod
    def _clamp_search_cache_max_entries(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else 128
        except (TypeError, ValueError):
            numeric = 128
        return max(1, numeric)


@lru_cache
def get_settings() -> Settings:
    """Settings 인스턴스를 반환한다. 최초 호출 시에만 생성되고 이후 캐싱된다."""
    return Settings()
