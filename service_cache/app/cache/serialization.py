"""
JSON text encoding for cached values.
"""

import dataclasses
import json
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Union
from uuid import UUID

from pydantic import BaseModel


def _encode_default(value: Any) -> Any:
    """Encode types the json module does not handle natively."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    if isinstance(value, (set, frozenset)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize(value: Any) -> str:
    """Serialize a value to compact JSON text.

    NaN and infinities raise ValueError; JSON has no literal for them.
    """
    return json.dumps(
        value,
        default=_encode_default,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False
    )


def deserialize(data: Union[str, bytes]) -> Any:
    """Parse JSON text written by ``serialize``."""
    return json.loads(data)
