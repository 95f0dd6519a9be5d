"""
Shared utilities for the Redis cache layer.

This package aggregates common building blocks consumed by the cache
component and its tests:

- config: Cache configuration via pydantic-settings
- logging: Structured logging with trace correlation
- errors: Canonical error types and responses
- test_helpers: In-memory store client and test data factories

Do not import from service_* packages into shared/.
"""
