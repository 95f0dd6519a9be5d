"""
Helpers for bulk hash writes.
"""

from typing import Any, Dict, Iterable, List, Mapping, TypeVar

from shared.errors import CacheValidationError
from .serialization import serialize

T = TypeVar("T")

_MISSING = object()


def record_to_list(data: Mapping[str, T]) -> List[T]:
    """Project a field -> value mapping onto its values, in insertion order."""
    return list(data.values())


def _field_value(item: Any, key_field: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key_field, _MISSING)
    return getattr(item, key_field, _MISSING)


def encode_for_hash_bulk_write(items: Iterable[Any], key_field: str) -> List[str]:
    """
    Encode records as a flat ``[field, json, field, json, ...]`` list.

    Each record contributes its ``key_field`` value as the hash field and its
    JSON serialization as the hash value. Records may be mappings or objects
    exposing ``key_field`` as an attribute.

    Raises:
        CacheValidationError: a record has no ``key_field`` or it is None.
    """
    data: List[str] = []
    for index, item in enumerate(items):
        field = _field_value(item, key_field)
        if field is _MISSING or field is None:
            details: Dict[str, Any] = {"index": index, "key_field": key_field}
            raise CacheValidationError(
                f"Record at index {index} has no value for key field '{key_field}'",
                details,
            )
        data.append(field if isinstance(field, str) else str(field))
        data.append(serialize(item))
    return data
