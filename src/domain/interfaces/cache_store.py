"""
Interface: ICacheStore
Define o contrato para stores chave-valor com expiração (TTL).
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class ICacheStore(ABC):
    """Interface para cache chave-valor com TTL."""

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Retorna o valor armazenado ou None se ausente/expirado."""
        pass

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Armazena o valor sob a chave (sobrescreve se existir)."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove a chave. Retorna True se existia."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove todas as entradas."""
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Retorna estatísticas do cache."""
        pass
