"""
Cache Service package for the Redis cache layer.

- app.cache: Redis-backed cache façade, store client protocol, JSON
  serialization and hash bulk-write helpers.

Guidelines:
- The façade is stateless; the store client is injected.
- A cache failure must never be worse than a cache miss for readers.
- Hash mutations surface failures so callers can react.
"""
