"""
Cache package for the Redis cache layer.

Provides a typed façade over a Redis client: JSON serialization, TTL and
nullability policy, fail-soft reads and writes, fail-hard hash mutations,
and cursor-based key enumeration.
"""

from .hash_helpers import encode_for_hash_bulk_write, record_to_list
from .redis_service import UNDEFINED, RedisService
from .serialization import deserialize, serialize
from .store import StoreClient, close_redis_client, create_redis_client, is_scan_complete

__all__ = [
    "RedisService",
    "UNDEFINED",
    "StoreClient",
    "create_redis_client",
    "close_redis_client",
    "is_scan_complete",
    "serialize",
    "deserialize",
    "record_to_list",
    "encode_for_hash_bulk_write",
]
