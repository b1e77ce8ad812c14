"""
FastAPI application factory
"""
import logging
import traceback

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from lifeos.config import get_settings
from lifeos.infrastructure.db.session import check_db_connection
from lifeos.api.v1 import categories, tracks, logs, finance, records, stats

logger = logging.getLogger(__name__)


class ErrorLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every unhandled exception with its traceback, sync routes included"""

    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "\n%s\nERROR on %s %s\n%s%s",
                "=" * 60, request.method, request.url.path, traceback.format_exc(), "=" * 60,
            )
            return Response(content=f"Internal Server Error: {exc}", status_code=500)


def create_app() -> FastAPI:
    """
    Application factory - builds and configures the FastAPI app

    Returns:
        Configured FastAPI app
    """
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    app = FastAPI(
        title="LifeOS",
        debug=settings.DEBUG,
    )

    app.add_middleware(ErrorLoggingMiddleware)

    app.include_router(categories.router)
    app.include_router(tracks.router)
    app.include_router(logs.router)
    app.include_router(finance.router)
    app.include_router(records.router)
    app.include_router(stats.router)

    # Health checks
    @app.get("/health", response_class=PlainTextResponse, tags=["system"])
    def health():
        """Health check endpoint"""
        return "ok"

    @app.get("/ready", response_class=PlainTextResponse, tags=["system"])
    def ready():
        """Readiness check endpoint (database reachable)"""
        check_db_connection()
        return "ok"

    logger.info("LifeOS app created (timezone=%s)", settings.TIMEZONE)
    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "lifeos.main:app",
        host="127.0.0.1",
        port=8000,
        reload=get_settings().DEBUG,
    )
