"""
JSON projection of entities.

Keys are camelCase, datetimes ISO-8601, enums by value. An entity that is
already being written further up the current path is written as null, so
owner/member back-references never recurse.
"""

import json
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from organizer_companion.domain.entities.base import Entity


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(word[:1].upper() + word[1:] for word in rest)


def to_jsonable(value: Any, path: Optional[set[int]] = None) -> Any:
    path = path if path is not None else set()

    if isinstance(value, Entity):
        if id(value) in path:
            return None
        path.add(id(value))
        try:
            result = {}
            for name, field_value in value.json_fields().items():
                if field_value is None and name in value._JSON_OMIT_IF_NONE:
                    continue
                result[camel_case(name)] = to_jsonable(field_value, path)
            return result
        finally:
            path.discard(id(value))

    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if is_dataclass(value) and not isinstance(value, type):
        return {camel_case(k): v for k, v in asdict(value).items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item, path) for item in value]
    return value


def to_json(entity: Entity, indent: Optional[int] = None) -> str:
    return json.dumps(to_jsonable(entity), indent=indent, ensure_ascii=False)
