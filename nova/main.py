import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from nova.api.endpoints.catalog import router as catalog_router
from nova.api.endpoints.contact import router as contact_router
from nova.api.endpoints.health import router as health_router
from nova.api.endpoints.pages import router as pages_router
from nova.core.config import Settings, settings as default_settings
from nova.core.database import DatabaseSessionManager
from nova.core.exceptions import MethodNotAllowed, NovaError, ValidationError

logger = logging.getLogger(__name__)

CORS_ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type, Authorization"


def apply_cors_headers(response: Response, settings: Settings) -> Response:
    response.headers["Access-Control-Allow-Origin"] = settings.CORS_ALLOW_ORIGIN
    response.headers["Access-Control-Allow-Methods"] = CORS_ALLOW_METHODS
    response.headers["Access-Control-Allow-Headers"] = CORS_ALLOW_HEADERS
    return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Async context manager for app lifespan events"""
    session_manager: DatabaseSessionManager = app.state.db

    try:
        logger.info(f"🚀 Starting {app.state.settings.APP_NAME}...")
        logger.info("📊 Opening contact store...")
        await session_manager.init()
        logger.info("✅ Contact store ready")
    except Exception as e:
        logger.critical(f"🔥 Application startup failed: {str(e)}")
        raise

    try:
        logger.info("🏁 Application startup complete")
        yield
    finally:
        logger.info("🔌 Closing database connections...")
        await session_manager.close()
        logger.info("👋 Application shutdown complete")


async def nova_error_handler(request: Request, exc: NovaError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        response = await nova_error_handler(request, MethodNotAllowed())
    else:
        response = JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
        )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Validation Error: {exc.errors()}")
    return await nova_error_handler(request, ValidationError("Invalid request body"))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
    response = await nova_error_handler(request, NovaError())
    # Runs outside the middleware stack, so CORS headers are added here
    apply_cors_headers(response, request.app.state.settings)
    return response


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around its own settings and store handle."""
    settings = settings or default_settings

    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    app = FastAPI(
        title=settings.APP_NAME,
        description="API for the NOVA wireless headphones marketing site",
        version=settings.APP_VERSION,
        lifespan=lifespan,
        docs_url=None if settings.IS_PRODUCTION else "/docs",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.db = DatabaseSessionManager(settings.DATABASE_URL, echo=settings.SQL_ECHO)

    app.add_exception_handler(NovaError, nova_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.middleware("http")
    async def cors(request: Request, call_next):
        # Pre-flight requests never reach routing
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        return apply_cors_headers(response, settings)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"Request: {request.method} {request.url}")
        response = await call_next(request)
        logger.info(f"Response status: {response.status_code}")
        return response

    app.include_router(health_router, prefix="/api")
    app.include_router(catalog_router, prefix="/api")
    app.include_router(contact_router, prefix="/api")

    if settings.SERVE_PAGES:
        app.include_router(pages_router)

    logger.info(f"✅ Loaded {len(app.routes)} routes")
    return app


app = create_app()


def run():
    """Console entry point: serve the API on the configured host and port."""
    logger.info(f"📡 Server: http://{default_settings.HOST}:{default_settings.PORT}")
    logger.info(f"📊 Database: {default_settings.DATABASE_URL}")
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
