from typing import Optional

from redis import ConnectionPool, Redis

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class KvrocksClient:
    """
    Kvrocks Client with connection pool (Redis protocol).

    Usage:
        kvrocks_client.initialize()  # In startup
        client = kvrocks_client.get_client()  # In adapters
    """

    def __init__(self) -> None:
        self._client: Optional[Redis] = None

    def initialize(self) -> Redis:
        """Initialize connection pool (idempotent)"""
        if self._client is not None:
            return self._client

        pool = ConnectionPool.from_url(
            f'redis://{settings.KVROCKS_HOST}:{settings.KVROCKS_PORT}/{settings.KVROCKS_DB}',
            password=settings.KVROCKS_PASSWORD if settings.KVROCKS_PASSWORD else None,
            decode_responses=True,
            socket_timeout=settings.KVROCKS_SOCKET_TIMEOUT,
            socket_connect_timeout=settings.KVROCKS_SOCKET_TIMEOUT,
        )
        client = Redis(connection_pool=pool)
        client.ping()  # Fail-fast
        Logger.base.info(
            f'📡 Kvrocks connected at {settings.KVROCKS_HOST}:{settings.KVROCKS_PORT}'
        )
        self._client = client
        return client

    def get_client(self) -> Redis:
        """Get Redis client, connecting on first use"""
        if self._client is None:
            return self.initialize()
        return self._client

    def disconnect(self) -> None:
        """Close connection pool"""
        if self._client is not None:
            self._client.connection_pool.disconnect()
            self._client.close()
            self._client = None


# Global singleton
kvrocks_client = KvrocksClient()
