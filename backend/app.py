"""FastAPI application served by the Vercel entry point (api/index.py)."""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from . import config

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


class ServiceStatus(BaseModel):
    """Health check payload."""
    status: str
    service: str


class HealthStatus(ServiceStatus):
    """Health check payload with deployment details."""
    version: str
    environment: str


async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        duration_ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            "%s %s -> %s (%d ms)",
            request.method,
            request.url.path,
            status_code,
            duration_ms,
        )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log the traceback and return a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def create_app() -> FastAPI:
    """Build the application from the current configuration."""
    app = FastAPI(title=config.APP_NAME, version=config.APP_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.api_route("/", methods=["GET", "HEAD"], response_model=ServiceStatus)
    async def root():
        """Health check endpoint."""
        # Platforms commonly probe with HEAD /.
        return {"status": "ok", "service": config.APP_NAME}

    @app.get("/api/health", response_model=HealthStatus)
    async def health():
        """Health check reachable through the /api rewrite."""
        return {
            "status": "ok",
            "service": config.APP_NAME,
            "version": config.APP_VERSION,
            "environment": "vercel" if config.IS_VERCEL else "local",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
