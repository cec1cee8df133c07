"""
Chat Relay - FastAPI application relaying chat messages to an LLM completion API.
Optionally enriches the prompt with live web search results.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Config
from cors import CORSHeadersMiddleware
from models.api_models import ErrorResponse
from routes import chat
from utils.exceptions import RelayError, ValidationError
from utils.http_client import HTTPClientManager
from utils.logger import app_logger, set_log_level


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    app.state.config.validate_keys()
    yield
    await HTTPClientManager.close_all()


def error_response(status_code: int, error: str, details: str) -> JSONResponse:
    """Render an {error, details} envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, details=details).model_dump(),
    )


async def relay_exception_handler(request: Request, exc: RelayError):
    """Map relay errors to their status codes."""
    app_logger.error(f"{type(exc).__name__} for {request.url.path}: {exc.details}")
    return error_response(exc.status_code, exc.error, exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors with user-friendly messages"""
    errors = exc.errors()
    app_logger.error(f"Validation error for {request.url.path}: {errors}")

    if not errors:
        return await relay_exception_handler(request, ValidationError("Validation error"))

    first_error = errors[0]
    error_type = first_error.get('type', '')
    loc = first_error.get('loc') or []
    field = loc[-1] if loc else 'body'

    if error_type == 'json_invalid':
        details = "Request body is not valid JSON"
    elif error_type == 'missing':
        details = f"{field}: field required"
    else:
        details = f"{field}: {first_error.get('msg', 'Validation error')}"

    return await relay_exception_handler(request, ValidationError(details))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render routing errors such as 404 and 405 in the {error, details} envelope."""
    app_logger.warning(f"HTTP {exc.status_code} for {request.method} {request.url.path}")
    response = error_response(exc.status_code, str(exc.detail), f"{request.method} {request.url.path}")
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def create_app(config: Config | None = None) -> FastAPI:
    """
    Build the application around a configuration loaded once.

    Args:
        config: Prebuilt configuration, read from the environment when omitted

    Returns:
        Configured FastAPI application
    """
    config = config or Config.from_env()
    set_log_level(app_logger, config.log_level)

    app = FastAPI(title=config.app_title, lifespan=lifespan)
    app.state.config = config

    app.add_middleware(CORSHeadersMiddleware)
    app.add_exception_handler(RelayError, relay_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    #root endpoint
    @app.get("/")
    async def root():
        """Root endpoint - health check."""
        return {"message": "Chat relay is running"}

    app.include_router(chat.router, tags=["chat"])
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
