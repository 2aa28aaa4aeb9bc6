"""
FastAPI Application - Main Entry Point
Configuração principal da API de legendas seguindo Clean Architecture e SOLID.
"""
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from src.config import settings
from src.presentation.api.routes import captions, system
from src.presentation.api.middlewares import LoggingMiddleware
from src.presentation.api.rate_limit import limiter, ApiRateLimitMiddleware
from src.presentation.api.exception_handlers import setup_exception_handlers
from src.presentation.api.dependencies import Container


# Configurar logging
logger.remove()
logger.add(
    sys.stderr,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    level=settings.log_level
)

if settings.log_file:
    try:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            settings.log_file,
            rotation="100 MB",
            retention="10 days",
            level=settings.log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
        )
        logger.info(f"File logging configured: {settings.log_file}")
    except OSError as e:
        logger.error(f"Failed to configure file logging: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gerencia o ciclo de vida da aplicação.
    Executado no startup e shutdown.
    """
    # Startup
    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.app_environment}")
    logger.info(
        f"Cache TTLs: captions={settings.captions_cache_ttl_seconds}s, "
        f"errors={settings.error_cache_ttl_seconds}s"
    )
    logger.info(
        f"Rate limit: {settings.rate_limit if settings.rate_limit_enabled else 'disabled'} "
        f"(prefix {settings.api_prefix})"
    )
    logger.info("=" * 60)

    # Caches criados no startup; o cliente do upstream continua lazy
    Container.get_captions_cache()
    Container.get_error_cache()

    yield

    # Shutdown
    logger.info("Shutting down application...")
    for cache in (Container.get_captions_cache(), Container.get_error_cache()):
        logger.info(f"Cache stats: {cache.get_stats()}")
        await cache.clear()
    logger.info("Application shutdown complete")


# Criar aplicação FastAPI
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Caching proxy for YouTube captions.

    * Normalized caption cues (`start`/`end` in seconds, `text`, `lang`)
    * Successful transcripts cached for 24 hours
    * Videos without captions cached as failures for 5 minutes
    * Per-client rate limit on every `/api` route except the health check
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Rate limiter
app.state.limiter = limiter
app.add_middleware(ApiRateLimitMiddleware)

# Adicionar middleware de logging
app.add_middleware(LoggingMiddleware)

# CORS por último: middleware mais externo, responde preflights e marca também os 429
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
    expose_headers=["Retry-After"]
)

setup_exception_handlers(app)

# Registrar rotas
app.include_router(system.root_router)
app.include_router(system.router, prefix=settings.api_prefix)
app.include_router(captions.router, prefix=settings.api_prefix)

logger.info("Routes registered successfully")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.presentation.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_environment == "development",
        log_level=settings.log_level.lower(),
        proxy_headers=True
    )
