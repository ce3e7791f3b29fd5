import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from deteksi.config import get_settings
from deteksi.exceptions import (
    AuthenticationError,
    IntegrationError,
    InvalidInputError,
    NotFoundError,
    RateLimitError,
    ServiceBusyError,
)
from deteksi.models.common import ErrorResponse
from deteksi.routers.countries import router as countries_router
from deteksi.routers.gemini import router as gemini_router
from deteksi.routers.pages import router as pages_router
from deteksi.routers.text_search import router as text_search_router

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# --- FastAPI app ---

api = FastAPI(title="Deteksi", version="0.1.0")
api.include_router(pages_router)
api.include_router(gemini_router)
api.include_router(text_search_router)
api.include_router(countries_router)


@api.get("/api/status")
def api_status() -> dict:
    settings = get_settings()
    return {
        "gemini": {
            "model": settings.gemini_model,
            "ready": bool(settings.google_ai_api_key),
            "max_retries": settings.max_retries,
        },
        "countries": {"base_url": settings.restcountries_base},
    }


# --- Exception handlers ---

def _error_response(status_code: int, error_code: str, exc: Exception) -> JSONResponse:
    body = ErrorResponse(error_code=error_code, message=str(exc))
    return JSONResponse(status_code=status_code, content=body.model_dump())


@api.exception_handler(AuthenticationError)
async def auth_error_handler(request: Request, exc: AuthenticationError):
    return _error_response(401, "auth_error", exc)


@api.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return _error_response(400, "invalid_input", exc)


@api.exception_handler(IntegrationError)
async def integration_error_handler(request: Request, exc: IntegrationError):
    return _error_response(500, "integration_error", exc)


@api.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return _error_response(404, "not_found", exc)


@api.exception_handler(RateLimitError)
async def rate_limit_error_handler(request: Request, exc: RateLimitError):
    return _error_response(429, "rate_limit", exc)


@api.exception_handler(ServiceBusyError)
async def service_busy_handler(request: Request, exc: ServiceBusyError):
    return _error_response(503, "service_busy", exc)


def run():
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "deteksi.main:api",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
