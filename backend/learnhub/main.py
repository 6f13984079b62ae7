import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from learnhub.config import settings
from learnhub.api.endpoints import courses, enrollments
from learnhub.core.errors import AppError, StoreError
from learnhub.core.responses import error_response
from learnhub.core.store import MongoStore

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store: MongoStore = app.state.store
    try:
        await run_in_threadpool(store.connect)
    except StoreError as e:
        # Without a store there is nothing to serve
        logger.critical(f"Startup aborted, database unavailable: {e.error}")
        raise
    yield
    await run_in_threadpool(store.close)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return error_response(exc.status_code, exc.message, exc.error)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request body",
            str(exc.errors()),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return error_response(status.HTTP_404_NOT_FOUND, "Route not found")
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            str(exc),
        )


def get_application(store: Optional[MongoStore] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.store = store or MongoStore()

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/", tags=["health"])
    def root() -> dict:
        return {
            "success": True,
            "message": f"{settings.APP_NAME} Server is running successfully!",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/health", tags=["health"])
    def health_check(request: Request):
        try:
            request.app.state.store.ping()
        except StoreError as e:
            logger.error(f"Health check failed: {e.error}")
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message, e.error)
        return {"success": True, "message": "Database connection is healthy"}

    app.include_router(courses.router, prefix="/courses", tags=["courses"])
    app.include_router(enrollments.router, prefix="/enrollments", tags=["enrollments"])

    return app


app = get_application()
