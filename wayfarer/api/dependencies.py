"""API 의존성 모음."""

from functools import lru_cache

from fastapi import Header, HTTPException, status

from wayfarer.core.config import get_settings
from wayfarer.services.catalog import AttractionCatalogProtocol, StaticAttractionCatalog


@lru_cache
def get_attraction_catalog() -> AttractionCatalogProtocol:
    """프로세스 단위로 공유하는 명소 카탈로그를 제공합니다."""
    return StaticAttractionCatalog.from_settings()


def require_service_secret(
    x_service_secret: str | None = Header(default=None, alias="x-service-secret"),
) -> None:
    """서비스 간 인증을 위한 시크릿 헤더를 검증한다."""
    settings = get_settings()
    if not settings.SERVICE_SECRET:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="서비스 시크릿 설정이 없습니다.",
        )

    if x_service_secret is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="서비스 시크릿 헤더가 누락되었습니다.",
        )

    if x_service_secret != settings.SERVICE_SECRET:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="유효하지 않은 서비스 시크릿입니다.",
        )
