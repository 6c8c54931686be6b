import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings as default_settings
from .logging import LOGGER_NAME, RequestLoggingMiddleware, init_logging
from .routes import router
from .store import StringStore

logger = logging.getLogger(LOGGER_NAME)

_JSON_ERROR_TYPES = {"json_invalid", "value_error.jsondecode"}


def _validation_status(request: Request, exc: RequestValidationError) -> int:
    # Unreadable JSON is a bad request; a readable body with a bad "value" is unprocessable
    if request.method == "POST" and request.url.path.rstrip("/").endswith("/strings"):
        if any(err.get("type") in _JSON_ERROR_TYPES for err in exc.errors()):
            return 400
        return 422
    return 400


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    log = logger.warning if exc.status_code < 500 else logger.error
    log("HTTPException: %s %s -> %s | detail=%s", request.method, request.url.path, exc.status_code, exc.detail)
    body = {"error": exc.detail if isinstance(exc.detail, str) else "Error"}
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    status = _validation_status(request, exc)
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    logger.warning("ValidationError: %s %s -> %s | errors=%s", request.method, request.url.path, status, details)
    message = "Invalid JSON body" if status == 400 and request.method == "POST" else "Validation failed"
    return JSONResponse(status_code=status, content={"error": message, "details": details})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(store: Optional[StringStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around its own store so instances never share state."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("%s started with %d stored string(s)", settings.APP_TITLE, len(app.state.store))
        yield

    app = FastAPI(
        title=settings.APP_TITLE,
        version="1.0.0",
        description=(
            "Stores strings, computes their properties and supports lookup, "
            "filtering (structured or natural language) and deletion by value."
        ),
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else StringStore()

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(router)
    return app


init_logging()
app = create_app()


def run() -> None:
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
