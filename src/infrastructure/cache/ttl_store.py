"""
TTL Store - Cache chave-valor em memória com expiração, separado por namespace.

Features:
- TTL (Time-To-Live) configurável por instância
- Sem limite de chaves (apenas expiração por TTL)
- Estatísticas de hits/misses
- Thread-safe
"""
import math
import threading
import time
from typing import Any, Callable, Dict, Optional

from cachetools import TTLCache
from loguru import logger

from src.domain.interfaces import ICacheStore


class TTLStore(ICacheStore):
    """
    Store chave-valor com TTL sobre cachetools.TTLCache.

    O mesmo tipo atende ao cache de legendas (TTL longo) e ao cache de
    falhas (TTL curto); as instâncias diferem apenas pelo namespace e TTL.
    """

    def __init__(
        self,
        namespace: str,
        ttl_seconds: int,
        timer: Callable[[], float] = time.monotonic
    ):
        """
        Inicializa o store.

        Args:
            namespace: Nome lógico do store (prefixo das chaves)
            ttl_seconds: Time-To-Live das entradas em segundos
            timer: Relógio usado para expiração
        """
        self.namespace = namespace
        self.ttl_seconds = ttl_seconds

        self._cache: TTLCache = TTLCache(maxsize=math.inf, ttl=ttl_seconds, timer=timer)
        self._lock = threading.RLock()

        self._stats = {
            'hits': 0,
            'misses': 0,
            'sets': 0
        }

        logger.info(f"TTL store initialized: namespace={namespace}, ttl={ttl_seconds}s")

    async def get(self, key: str) -> Optional[Any]:
        cache_key = self._build_key(key)

        with self._lock:
            value = self._cache.get(cache_key)

            if value is None:
                self._stats['misses'] += 1
                logger.debug(f"Cache MISS: {cache_key}")
                return None

            self._stats['hits'] += 1
            logger.debug(f"Cache HIT: {cache_key}")
            return value

    async def set(self, key: str, value: Any) -> None:
        cache_key = self._build_key(key)

        with self._lock:
            self._cache[cache_key] = value
            self._stats['sets'] += 1

        logger.debug(f"Cache SET: {cache_key} (ttl={self.ttl_seconds}s)")

    async def delete(self, key: str) -> bool:
        cache_key = self._build_key(key)

        with self._lock:
            return self._cache.pop(cache_key, None) is not None

    async def clear(self) -> None:
        with self._lock:
            count = len(self._cache)
            self._cache.clear()
        logger.info(f"Cache CLEARED: namespace={self.namespace}, removed {count} entries")

    def get_stats(self) -> Dict[str, Any]:
        """
        Retorna estatísticas do store.

        Returns:
            Dict com tamanho atual, hits, misses e taxa de acerto
        """
        with self._lock:
            self._cache.expire()
            total_requests = self._stats['hits'] + self._stats['misses']
            hit_rate = (self._stats['hits'] / total_requests * 100) if total_requests > 0 else 0

            return {
                'namespace': self.namespace,
                'cache_size': len(self._cache),
                'ttl_seconds': self.ttl_seconds,
                'total_requests': total_requests,
                'hits': self._stats['hits'],
                'misses': self._stats['misses'],
                'sets': self._stats['sets'],
                'hit_rate_percent': round(hit_rate, 2)
            }

    def _build_key(self, key: str) -> str:
        return f"{self.namespace}:{key}"
