"""FastAPI 애플리케이션 진입점."""

from __future__ import annotations

from fastapi import Depends, FastAPI, Request
from fastapi.openapi.docs import get_redoc_html, get_swagger_ui_html
from fastapi.responses import JSONResponse, Response
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from wayfarer.api import itinerary
from wayfarer.api.dependencies import require_service_secret
from wayfarer.core.config import get_settings
from wayfarer.core.logger import get_logger
from wayfarer.core.logging_config import configure_logging

configure_logging()
logger = get_logger(__name__)
settings = get_settings()

DOCS_MODES = ("disabled", "secret", "public")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}


def _csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _docs_mode(raw: str) -> str:
    mode = (raw or "").strip().lower()
    if mode not in DOCS_MODES:
        logger.warning("Unknown DOCS_MODE %r, falling back to disabled", raw)
        return "disabled"
    return mode


def _install_middleware(app_: FastAPI) -> None:
    """환경 설정에 따라 호스트 허용 목록과 CORS 미들웨어를 붙입니다."""
    if allowed_hosts := _csv(settings.TRUSTED_HOSTS):
        app_.add_middleware(TrustedHostMiddleware, allowed_hosts=allowed_hosts)

    origins = _csv(settings.CORS_ALLOW_ORIGINS)
    if not origins:
        return

    allow_credentials = settings.CORS_ALLOW_CREDENTIALS
    if allow_credentials and "*" in origins:
        logger.warning("CORS wildcard origin cannot be combined with credentials; credentials disabled")
        allow_credentials = False

    app_.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=_csv(settings.CORS_ALLOW_METHODS) or ["GET", "POST"],
        allow_headers=_csv(settings.CORS_ALLOW_HEADERS) or ["Content-Type"],
    )


docs_mode = _docs_mode(settings.DOCS_MODE)
public_docs = docs_mode == "public"

app = FastAPI(
    title="Wayfarer Itinerary Planner",
    docs_url="/docs" if public_docs else None,
    redoc_url="/redoc" if public_docs else None,
    openapi_url="/openapi.json" if public_docs else None,
)
_install_middleware(app)
app.include_router(itinerary.router)


@app.middleware("http")
async def add_security_headers(request: Request, call_next) -> Response:
    response = await call_next(request)
    if settings.SECURITY_HEADERS_ENABLED:
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
    return response


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """처리되지 않은 예외를 로그로 남기고 500 응답으로 감춥니다."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    detail = str(exc) if settings.EXPOSE_INTERNAL_ERRORS else "Internal server error"
    return JSONResponse(status_code=500, content={"detail": detail})


if docs_mode == "secret":
    _secret_only = [Depends(require_service_secret)]

    @app.get("/openapi.json", include_in_schema=False, dependencies=_secret_only)
    def openapi_json() -> JSONResponse:
        return JSONResponse(app.openapi())

    @app.get("/docs", include_in_schema=False, dependencies=_secret_only)
    def swagger_ui() -> Response:
        return get_swagger_ui_html(openapi_url="/openapi.json", title=f"{app.title} - Swagger UI")

    @app.get("/redoc", include_in_schema=False, dependencies=_secret_only)
    def redoc_ui() -> Response:
        return get_redoc_html(openapi_url="/openapi.json", title=f"{app.title} - ReDoc")


@app.get("/")
def health_check() -> dict:
    """헬스 체크 엔드포인트."""
    return {"status": "ok", "message": "Wayfarer itinerary planner is running"}
