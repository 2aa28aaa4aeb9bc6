"""
Exception handlers da API.

Todas as respostas de erro seguem o formato {"error": <código>, "message": <texto>};
erros 429 incluem "retryAfter" e o header Retry-After.
"""
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.domain.exceptions import DomainException, ThrottledError


def domain_exception_response(exc: DomainException) -> JSONResponse:
    """Monta a resposta JSON de uma exceção de domínio."""
    content = {
        "error": exc.error_code,
        "message": exc.message
    }
    headers = None

    if isinstance(exc, ThrottledError):
        content["retryAfter"] = exc.retry_after
        headers = {"Retry-After": str(exc.retry_after)}

    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Configura exception handlers da aplicação.

    Args:
        app: Instância FastAPI
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        request_id = getattr(request.state, "request_id", "unknown")

        if exc.status_code >= 500:
            logger.error(
                f"[{request_id}] {exc.error_code} on {request.method} {request.url.path}: {exc.message}"
            )
        else:
            logger.warning(
                f"[{request_id}] {exc.error_code} on {request.method} {request.url.path}: {exc.message}"
            )

        return domain_exception_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "ValidationError",
                "message": "Request validation failed"
            }
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(f"HTTP {exc.status_code} on {request.method} {request.url.path}")

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": HTTPStatus(exc.status_code).phrase.replace(" ", ""),
                "message": str(exc.detail)
            },
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).critical(
            f"Unhandled exception on {request.method} {request.url.path}: {type(exc).__name__}"
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "InternalServerError",
                "message": "An unexpected error occurred"
            }
        )

    logger.info("Exception handlers configured")
