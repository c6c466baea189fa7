from __future__ import annotations
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from blogexpress import __version__
from blogexpress.config import settings
from blogexpress.errors import BlogExpressError
from blogexpress.log_config import setup_logging
from blogexpress.routers import (
    calendar_router,
    category_router,
    comment_router,
    dashboard_router,
    post_router,
    user_router,
    ws_router,
)
from blogexpress.db import create_tables

# url segment -> entity named in "Invalid <entity> data"
_ENTITIES = {
    "users": "user",
    "categories": "category",
    "posts": "post",
    "comments": "comment",
    "calendar": "calendar",
    "dashboard": "dashboard",
}


def _entity(request: Request) -> str:
    prefix = settings.API_PREFIX.strip("/")
    parts = [p for p in request.url.path.strip("/").split("/") if p]
    if parts and parts[0] == prefix:
        parts = parts[1:]
    return _ENTITIES.get(parts[0], "request") if parts else "request"


def _action(request: Request) -> str:
    # endpoint names read as actions: fetch_users -> "fetch users"
    route = request.scope.get("route")
    name: Optional[str] = getattr(route, "name", None)
    return name.replace("_", " ") if name else "process request"


async def blogexpress_error_handler(request: Request, exc: BlogExpressError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"[{request.method} {request.url.path}] {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({
            "message": f"Invalid {_entity(request)} data",
            "errors": exc.errors(),
        }),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"[{request.method} {request.url.path}] unhandled error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": f"Failed to {_action(request)}", "error": str(exc)},
    )


# registered before CORSMiddleware so it sits inside it
async def catch_unexpected_errors(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        return await unexpected_error_handler(request, exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    create_tables()
    logger.info(f"[BOOT] {settings.PROJECT_NAME} {__version__} ready (prefix={settings.API_PREFIX})")
    yield
    logger.info("[BOOT] shutting down")


def create_app() -> FastAPI:
    app = FastAPI(title=settings.PROJECT_NAME, version=__version__, lifespan=lifespan)

    app.middleware("http")(catch_unexpected_errors)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(BlogExpressError, blogexpress_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, unexpected_error_handler)

    prefix = settings.API_PREFIX
    app.include_router(user_router.router, prefix=f"{prefix}/users", tags=["User API"])
    app.include_router(category_router.router, prefix=f"{prefix}/categories", tags=["Category API"])
    app.include_router(post_router.router, prefix=f"{prefix}/posts", tags=["Post API"])
    app.include_router(comment_router.router, prefix=f"{prefix}/comments", tags=["Comment API"])
    app.include_router(dashboard_router.router, prefix=f"{prefix}/dashboard", tags=["Dashboard API"])
    app.include_router(calendar_router.router, prefix=f"{prefix}/calendar", tags=["Calendar API"])
    app.include_router(ws_router.router, tags=["Broadcast"])

    @app.get("/")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
