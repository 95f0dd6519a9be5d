"""
Store client capability consumed by the cache façade.

The protocol mirrors the subset of ``redis.asyncio.Redis`` the façade calls,
so a redis-py asyncio client satisfies it without an adapter and tests can
substitute an in-memory fake.
"""

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable

import redis.asyncio as redis

from shared.config import CacheConfig
from shared.logging import get_logger

Cursor = Union[int, str, bytes]

INITIAL_CURSOR: Cursor = 0

logger = get_logger("cache.store")


@runtime_checkable
class StoreClient(Protocol):
    """Minimal key-value and hash capability required by the façade."""

    async def get(self, name: str) -> Optional[str]: ...

    async def set(self, name: str, value: str, ex: Optional[int] = None) -> Any: ...

    async def delete(self, *names: str) -> int: ...

    async def scan(
        self,
        cursor: Cursor = 0,
        match: Optional[str] = None,
        count: Optional[int] = None,
    ) -> Tuple[Cursor, List[str]]: ...

    async def hget(self, name: str, key: str) -> Optional[str]: ...

    async def hmget(self, name: str, keys: Sequence[str]) -> List[Optional[str]]: ...

    async def hgetall(self, name: str) -> Dict[str, str]: ...

    async def hset(
        self,
        name: str,
        key: Optional[str] = None,
        value: Optional[str] = None,
        mapping: Optional[Mapping[str, str]] = None,
    ) -> int: ...

    async def hdel(self, name: str, *keys: str) -> int: ...

    async def expire(self, name: str, time: int) -> Any: ...

    async def ttl(self, name: str) -> int: ...


def is_scan_complete(cursor: Cursor) -> bool:
    """True when the store signals that key enumeration has finished."""
    if isinstance(cursor, bytes):
        cursor = cursor.decode("ascii")
    return int(cursor) == 0


def create_redis_client(config: CacheConfig) -> redis.Redis:
    """Build an asyncio Redis client from configuration.

    Responses are decoded to ``str`` so stored JSON text reaches the
    deserializer as text. Connection pooling is left to redis-py.
    """
    client = redis.from_url(
        config.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=config.redis_socket_connect_timeout,
        socket_timeout=config.redis_socket_timeout,
        health_check_interval=config.redis_health_check_interval,
    )
    logger.info("Redis client created", redis_url=_sanitize_url(config.redis_url))
    return client


async def close_redis_client(client: Optional[redis.Redis]) -> None:
    """Close a client built by ``create_redis_client``."""
    if client is None:
        return
    await client.aclose()
    logger.info("Redis client closed")


def _sanitize_url(url: str) -> str:
    """Remove credentials from a Redis URL for logging."""
    if "@" in url:
        scheme, _, rest = url.partition("://")
        return f"{scheme}://***@{rest.rsplit('@', 1)[-1]}"
    return url
