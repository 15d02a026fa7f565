"""
models.py

pydantic value types for documents plus the strict adapters behind the typed
getters. strict mode keeps bool out of int and str out of numbers; an int is
still a valid float.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, JsonValue, TypeAdapter, ValidationError

from .errors import TypeMismatchError


Document = dict[str, JsonValue]

JSON_VALUE: TypeAdapter[Any] = TypeAdapter(JsonValue)


@dataclass(frozen=True)
class Kind:
    name: str
    adapter: TypeAdapter[Any]

    def check(self, key: str, value: Any) -> Any:
        try:
            return self.adapter.validate_python(value, strict=True)
        except ValidationError as e:
            raise TypeMismatchError(key, self.name, describe_type(value)) from e


STRING = Kind("string", TypeAdapter(str))
INT = Kind("integer", TypeAdapter(int))
FLOAT = Kind("float", TypeAdapter(float))
BOOL = Kind("boolean", TypeAdapter(bool))
VALUE = Kind("value", TypeAdapter(Any))
MAPPING = Kind("mapping", TypeAdapter(dict[str, Any]))

STRING_ARRAY = Kind("string array", TypeAdapter(list[str]))
INT_ARRAY = Kind("integer array", TypeAdapter(list[int]))
FLOAT_ARRAY = Kind("float array", TypeAdapter(list[float]))
BOOL_ARRAY = Kind("boolean array", TypeAdapter(list[bool]))
VALUE_ARRAY = Kind("array", TypeAdapter(list[Any]))
MAPPING_ARRAY = Kind("mapping array", TypeAdapter(list[dict[str, Any]]))


def describe_type(value: Any) -> str:
    if isinstance(value, list):
        kinds = sorted({type(v).__name__ for v in value})
        return f"list[{' | '.join(kinds)}]" if kinds else "list"
    return type(value).__name__


def plain_json(key: str, value: Any) -> Any:
    """
    tuples become lists (recursively). NaN and +/-inf have no json form and
    are rejected.
    """
    if isinstance(value, tuple):
        value = list(value)
    if isinstance(value, list):
        return [plain_json(key, v) for v in value]
    if isinstance(value, dict):
        return {k: plain_json(key, v) for k, v in value.items()}
    if isinstance(value, float) and not math.isfinite(value):
        raise TypeMismatchError(key, "finite number", repr(value))
    return value


def check_json(key: str, value: Any) -> JsonValue:
    value = plain_json(key, value)
    try:
        return JSON_VALUE.validate_python(value)
    except ValidationError as e:
        raise TypeMismatchError(key, "json value", describe_type(value)) from e


class ConfigInfo(BaseModel):
    name: str
    path: str = Field(..., description="backing file, as configured (not resolved)")
    exists: bool
    keys: int = Field(0, description="number of top-level fields in memory")
