"""
Typed Redis cache façade.

Read paths and scalar writes are fail-soft: a store or decoding failure is
logged and turned into a sentinel (``None``/default, ``[]`` or ``0``) so an
unavailable cache behaves like an empty one. Hash mutations are fail-hard:
the failure is logged and raised as ``HashWriteError``. ``scan``, ``expire``
and ``ttl`` do no local error handling at all.
"""

from typing import Any, Dict, List, Optional, Sequence, TypeVar

from shared.config import CacheConfig
from shared.errors import CacheValidationError, HashWriteError, ScanLimitExceededError
from shared.logging import get_logger
from .serialization import deserialize, serialize
from .store import INITIAL_CURSOR, StoreClient, is_scan_complete

T = TypeVar("T")


class _Undefined:
    """Explicit non-value, distinct from None."""

    _instance: Optional["_Undefined"] = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


class RedisService:
    """Cache façade over a Redis-compatible store client."""

    def __init__(self, client: StoreClient, config: Optional[CacheConfig] = None):
        config = config or CacheConfig()
        self.redis = client
        self.logger = get_logger("cache.redis_service")
        self.scan_count = config.scan_count
        self.scan_max_iterations = config.scan_max_iterations

    async def get(self, key: str, default: Any = None) -> Any:
        """Get a cached value, or ``default`` on a miss or failure.

        A cached JSON ``null`` comes back as ``None``. Pass
        ``default=UNDEFINED`` to tell it apart from a miss.
        """
        try:
            data = await self.redis.get(key)
            if data:
                return deserialize(data)
        except Exception as e:
            self.logger.error(
                "Error getting value from redis cache",
                cache_key=key,
                error=str(e)
            )
        return default

    async def set(
        self,
        key: str,
        value: Any,
        ttl: Optional[int] = None,
        cache_nullable: bool = True
    ) -> Optional[bool]:
        """
        Cache a value.

        Nothing is written, and None is returned, when the value is
        UNDEFINED, when it is None and ``cache_nullable`` is false, or when
        ``ttl`` is given and not positive. A ``ttl`` of None stores the value
        without expiry.

        Returns:
            True once written, None when skipped or on failure.
        """
        if value is UNDEFINED:
            return None

        if not cache_nullable and value is None:
            return None

        if ttl is not None and ttl <= 0:
            return None

        try:
            data = serialize(value)
            if ttl is None:
                await self.redis.set(key, data)
            else:
                await self.redis.set(key, data, ex=ttl)
            return True
        except Exception as e:
            self.logger.error(
                "Error setting value in redis cache",
                cache_key=key,
                error=str(e)
            )
        return None

    async def delete(self, key: str) -> int:
        """Delete one key; returns the number removed, 0 on failure."""
        try:
            return await self.redis.delete(key)
        except Exception as e:
            self.logger.error(
                "Error deleting key from redis cache",
                cache_key=key,
                error=str(e)
            )
        return 0

    async def delete_many(self, keys: Sequence[str]) -> int:
        """Delete a batch of keys in one request."""
        if not keys:
            return 0

        try:
            return await self.redis.delete(*keys)
        except Exception as e:
            self.logger.error(
                "Error deleting multiple keys from redis cache",
                cache_keys=list(keys),
                error=str(e)
            )
        return 0

    async def get_or_set(
        self,
        key: str,
        value: T,
        ttl: Optional[int] = None,
        cache_nullable: bool = True
    ) -> T:
        """
        Return the cached value for ``key``, caching ``value`` on a miss.

        On a miss ``value`` is returned whether or not the write succeeded.
        Not atomic: concurrent callers may both miss and both write.
        """
        cached = await self.get(key, default=UNDEFINED)
        if cached is not UNDEFINED:
            return cached

        await self.set(key, value, ttl, cache_nullable)
        return value

    async def scan(self, pattern: str, count: Optional[int] = None) -> List[str]:
        """
        Collect every key matching ``pattern`` by walking the store cursor.

        Keys are returned in page order. Store errors propagate.

        Raises:
            ScanLimitExceededError: the cursor did not return to 0 within
                ``scan_max_iterations`` round trips.
        """
        found: List[str] = []
        cursor = INITIAL_CURSOR
        if count is None:
            count = self.scan_count

        for _ in range(self.scan_max_iterations):
            cursor, keys = await self.redis.scan(cursor, match=pattern, count=count)
            found.extend(keys)
            if is_scan_complete(cursor):
                return found

        self.logger.error(
            "Redis scan did not complete",
            pattern=pattern,
            iterations=self.scan_max_iterations,
            keys_found=len(found)
        )
        raise ScanLimitExceededError(
            f"Scan for '{pattern}' did not complete after {self.scan_max_iterations} iterations",
            {"pattern": pattern, "iterations": self.scan_max_iterations, "cursor": str(cursor)}
        )

    async def hget(self, hash_key: str, field: str) -> Any:
        """Get one hash field, or None on a miss or failure."""
        try:
            data = await self.redis.hget(hash_key, field)
            if data:
                return deserialize(data)
        except Exception as e:
            self.logger.error(
                "Error getting hash field from redis",
                hash=hash_key,
                field=field,
                exception=str(e)
            )
        return None

    async def hmget(self, hash_key: str, fields: Sequence[str]) -> List[Any]:
        """
        Get several hash fields in one request.

        Each slot holds the decoded value, or None when the field is absent.
        An empty list means the request failed, not that every field missed.
        """
        if not fields:
            return []

        try:
            results = await self.redis.hmget(hash_key, list(fields))
            return [deserialize(value) if value is not None else None for value in results]
        except Exception as e:
            self.logger.error(
                "Error getting hash fields from redis",
                hash=hash_key,
                fields=list(fields),
                exception=str(e)
            )
        return []

    async def hgetall(self, hash_key: str) -> Optional[Dict[str, Any]]:
        """Get every field of a hash; None on failure."""
        try:
            data = await self.redis.hgetall(hash_key)
            return {field: deserialize(value) for field, value in data.items()}
        except Exception as e:
            self.logger.error(
                "Error getting all hash fields from redis",
                hash=hash_key,
                exception=str(e)
            )
        return None

    async def hset(self, hash_key: str, field: str, value: Any, cache_nullable: bool = True) -> int:
        """
        Write one hash field.

        Returns:
            1 when the field was created, 0 when it was updated or skipped.

        Raises:
            CacheValidationError: the value cannot be encoded as JSON.
            HashWriteError: the write failed.
        """
        if value is UNDEFINED:
            return 0

        if not cache_nullable and value is None:
            return 0

        try:
            data = serialize(value)
        except (TypeError, ValueError) as e:
            raise CacheValidationError(
                f"Value for field '{field}' on hash '{hash_key}' is not JSON serializable",
                {"hash": hash_key, "field": field, "exception": str(e)}
            ) from e

        try:
            return await self.redis.hset(hash_key, field, data)
        except Exception as e:
            self.logger.error(
                "Error setting hash field in redis",
                hash=hash_key,
                field=field,
                value=value,
                exception=str(e)
            )
            raise HashWriteError(
                f"Failed to set field '{field}' on hash '{hash_key}'",
                {"hash": hash_key, "field": field, "exception": str(e)}
            ) from e

    async def hmset(self, hash_key: str, values: Sequence[str]) -> bool:
        """
        Write pre-encoded fields to a hash in one request.

        ``values`` alternates field and encoded value, as produced by
        ``encode_for_hash_bulk_write``.

        Raises:
            CacheValidationError: ``values`` has an odd length.
            HashWriteError: the write failed.
        """
        if len(values) % 2:
            raise CacheValidationError(
                "Bulk hash write needs alternating field/value pairs",
                {"hash": hash_key, "length": len(values)}
            )
        if not values:
            return True

        mapping = dict(zip(values[::2], values[1::2]))
        try:
            await self.redis.hset(hash_key, mapping=mapping)
            return True
        except Exception as e:
            self.logger.error(
                "Error bulk setting hash fields in redis",
                hash=hash_key,
                values=list(values),
                exception=str(e)
            )
            raise HashWriteError(
                f"Failed to bulk set fields on hash '{hash_key}'",
                {"hash": hash_key, "fields": list(mapping), "exception": str(e)}
            ) from e

    async def hdel(self, hash_key: str, fields: Sequence[str]) -> int:
        """
        Delete hash fields in one request.

        Raises:
            HashWriteError: the delete failed.
        """
        if not fields:
            return 0

        try:
            return await self.redis.hdel(hash_key, *fields)
        except Exception as e:
            self.logger.error(
                "Error deleting hash fields in redis",
                hash=hash_key,
                fields=list(fields),
                exception=str(e)
            )
            raise HashWriteError(
                f"Failed to delete fields from hash '{hash_key}'",
                {"hash": hash_key, "fields": list(fields), "exception": str(e)}
            ) from e

    async def expire(self, key: str, ttl: int) -> int:
        """Set a key's TTL; 1 if set, 0 if the key does not exist."""
        return int(await self.redis.expire(key, ttl))

    async def ttl(self, key: str) -> int:
        """Seconds left on a key; -1 without expiry, -2 when absent."""
        return await self.redis.ttl(key)
