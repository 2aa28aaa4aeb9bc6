"""Cache module."""
from src.infrastructure.cache.ttl_store import TTLStore

__all__ = ['TTLStore']
