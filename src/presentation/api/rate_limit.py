"""
Rate limiting da API com slowapi.

Uma única quota (padrão 100 requisições / 15 minutos) é compartilhada por
todas as requisições sob o prefixo da API, por cliente, inclusive caminhos
sem rota. Health check e preflight (OPTIONS) não passam pelo limite.
"""
import math
import time

from fastapi import Request
from fastapi.responses import JSONResponse
from limits import RateLimitItem, parse
from loguru import logger
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware

from src.config import settings


def get_client_key(request: Request) -> str:
    """
    Chave do cliente para o bucket de rate limit.

    Usa o endereço mais à esquerda de X-Forwarded-For; sem o header,
    o endereço do socket.
    """
    forwarded_for = request.headers.get("x-forwarded-for", "")
    client = forwarded_for.split(",")[0].strip()
    if client:
        return client
    return get_remote_address(request)


limiter = Limiter(
    key_func=get_client_key,
    storage_uri=settings.rate_limit_storage_uri,
    enabled=settings.rate_limit_enabled,
    headers_enabled=False
)

API_RATE_LIMIT: RateLimitItem = parse(settings.rate_limit)
API_RATE_LIMIT_SCOPE = "api"


def is_rate_limited_path(method: str, path: str) -> bool:
    """Tudo sob o prefixo da API conta, exceto health check e OPTIONS."""
    prefix = settings.api_prefix.rstrip("/")
    if method == "OPTIONS":
        return False
    if path.rstrip("/") == f"{prefix}/health":
        return False
    return path == prefix or path.startswith(f"{prefix}/")


def seconds_until_reset(client_key: str) -> int:
    """Segundos até a janela do cliente reabrir (mínimo 1)."""
    reset_at, _remaining = limiter.limiter.get_window_stats(
        API_RATE_LIMIT, client_key, API_RATE_LIMIT_SCOPE
    )
    return max(1, math.ceil(reset_at - time.time()))


def rate_limit_exceeded_response(request: Request, client_key: str) -> JSONResponse:
    """Resposta 429 padronizada, com retryAfter no corpo e no header."""
    retry_after = seconds_until_reset(client_key)

    logger.warning(
        f"Rate limit exceeded: client={client_key} "
        f"path={request.url.path} limit={API_RATE_LIMIT} retry_after={retry_after}s"
    )

    return JSONResponse(
        status_code=429,
        content={
            "error": "TooManyRequests",
            "message": "Too many requests, please try again later.",
            "retryAfter": retry_after
        },
        headers={"Retry-After": str(retry_after)}
    )


class ApiRateLimitMiddleware(BaseHTTPMiddleware):
    """
    Aplica a quota da API antes do roteamento.

    A decisão depende só do método e do caminho; a storage do limiter
    (memory:// por padrão) guarda os contadores por cliente.
    """

    async def dispatch(self, request: Request, call_next):
        if not limiter.enabled or not is_rate_limited_path(request.method, request.url.path):
            return await call_next(request)

        client_key = get_client_key(request)
        if not limiter.limiter.hit(API_RATE_LIMIT, client_key, API_RATE_LIMIT_SCOPE):
            return rate_limit_exceeded_response(request, client_key)

        return await call_next(request)
