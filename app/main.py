import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from app.api.v2.router import api_router
from app.core.config import Settings, settings as default_settings
from app.core.errors import ApiError
from app.core.logging import setup_logging
from app.db.store import Store

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    api = FastAPI(
        title="Student Enrollment API",
        version="2.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        swagger_ui_parameters={"displayRequestDuration": True, "persistAuthorization": True},
    )
    api.state.settings = settings
    api.state.store = store or Store()

    api.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # métricas /metrics (Prometheus)
    Instrumentator().instrument(api).expose(api, include_in_schema=False, should_gzip=True)

    api.include_router(api_router, prefix="/api/v2")

    @api.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    @api.exception_handler(ApiError)
    def handle_api_error(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @api.exception_handler(RequestValidationError)
    def handle_request_validation(request: Request, exc: RequestValidationError):
        issues = exc.errors()
        first = issues[0].get("msg") if issues else "Invalid request"
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Validation failed", "errors": first},
        )

    @api.exception_handler(StarletteHTTPException)
    def handle_http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @api.exception_handler(Exception)
    def handle_unexpected(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "Something is wrong, please try again",
                "error": str(exc),
            },
        )

    return api


api = create_app()
