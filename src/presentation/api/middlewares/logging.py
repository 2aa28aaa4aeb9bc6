"""
Middleware para logging de requisições.
Registra todas as requisições e respostas da API.
"""
import time
import uuid
from typing import Callable
from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware para logging de requisições HTTP."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable
    ) -> Response:
        """
        Processa requisição e registra logs.

        Args:
            request: Requisição HTTP
            call_next: Próximo handler

        Returns:
            Response: Resposta HTTP
        """
        start_time = time.time()

        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        request.state.request_id = request_id

        client_host = request.client.host if request.client else "unknown"

        logger.info(
            f"[{request_id}] Request started: {request.method} {request.url.path} "
            f"from {client_host}"
        )

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"[{request_id}] Request failed: {request.method} {request.url.path} "
                f"error={type(e).__name__} time={process_time:.3f}s"
            )
            raise

        process_time = time.time() - start_time

        logger.info(
            f"[{request_id}] Request completed: {request.method} {request.url.path} "
            f"status={response.status_code} time={process_time:.3f}s"
        )

        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        response.headers["X-Request-ID"] = request_id

        return response
