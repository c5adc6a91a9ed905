import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from weather_app.api import health, outfit, translate, weather
from weather_app.api.cors import EmptyPreflightCORSMiddleware
from weather_app.core.errors import WeatherAppError
from weather_app.core.log import configure_logging
from weather_app.core.settings import CORS_ALLOW_ORIGINS

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """프록시는 어떤 실패든 {"error": ...} JSON으로 응답한다."""

    @app.exception_handler(WeatherAppError)
    async def weather_app_error_handler(request: Request, exc: WeatherAppError):
        if exc.status_code >= 500:
            logger.error("❌ %s %s → %s (%s)", request.method, request.url.path, exc.message, exc.details)
        else:
            logger.info("⚠️ %s %s → %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "요청 형식이 올바르지 않습니다."})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("❌ 서버 오류: %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "서버 내부 오류"})


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Weather App - Proxy API")

    # ============================================================
    # 🌐 CORS 설정
    # ============================================================
    app.add_middleware(
        EmptyPreflightCORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    register_exception_handlers(app)

    # ============================================================
    # 📦 라우터 등록
    # ============================================================
    app.include_router(weather.router, prefix="/api")
    app.include_router(translate.router, prefix="/api")
    app.include_router(outfit.router, prefix="/api")
    app.include_router(health.router)

    return app


# ✅ 앱 인스턴스 생성
app = create_app()
