"""Base DTO shared by every transfer object."""

from datetime import datetime, timezone
from typing import ClassVar, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from organizer_companion.config.settings import Config
from organizer_companion.domain.exceptions import UnsupportedCastError

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityDTO(BaseModel):
    """
    Behaviour-free counterpart of a domain entity.

    DTOs carry the same minimal capability as entities (id, timestamps, cast,
    to_json) so generic code can handle both. A DTO casts to its own type or
    one of its interfaces (deep copy) or to its paired domain type, which is
    rebuilt by the application mappers.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Interfaces this DTO satisfies as a cast target
    interfaces: ClassVar[tuple[type, ...]] = ()

    id: int = 0
    created_date: datetime = Field(default_factory=_utcnow)
    modified_date: Optional[datetime] = None

    @classmethod
    def domain_type(cls) -> Optional[type]:
        return None

    def cast(self, target: type[T]) -> T:
        if target is type(self) or target in self.interfaces:
            return self.model_copy(deep=True)

        domain_type = self.domain_type()
        if domain_type is not None and target is domain_type:
            from organizer_companion.application.mappers import to_domain

            return to_domain(self)

        raise UnsupportedCastError(
            type(self).__name__, getattr(target, "__name__", str(target))
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(
            by_alias=True, indent=indent if indent is not None else Config.JSON_INDENT
        )
