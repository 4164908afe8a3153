"""
Capability interfaces shared by entities and DTOs.

DomainEntity is the minimal contract every entity and DTO satisfies.
CastResult is the optional contract of entities that remember what they were
converted into; only types that actually track it implement it.
"""

from datetime import datetime
from typing import Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class DomainEntity(Protocol):
    id: int
    modified_date: Optional[datetime]

    @property
    def created_date(self) -> datetime: ...

    def cast(self, target: type[T]) -> T: ...

    def to_json(self) -> str: ...


@runtime_checkable
class CastResult(Protocol):
    is_cast: bool
    cast_id: int
    cast_type: Optional[str]
