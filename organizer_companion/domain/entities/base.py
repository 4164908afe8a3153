"""
Entity base - identity, creation/modification timestamps, casting and JSON.

Every mutating property of an entity is a TrackedField: assigning it stores
the value and stamps modified_date from the entity's clock. created_date is
fixed at construction.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, ClassVar, Mapping, Optional, TypeVar

from organizer_companion.domain.casting.engine import cast_entity, projections_for
from organizer_companion.domain.exceptions import InvalidLengthError, OutOfRangeError
from organizer_companion.domain.ports.clock import Clock, get_default_clock

T = TypeVar("T")

Validator = Callable[[str, Any], None]


def non_negative(
    message: str = "Id must be a non-negative number.", *, optional: bool = False
) -> Validator:
    def check(field_name: str, value: Any) -> None:
        if value is None and optional:
            return
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise OutOfRangeError(field_name, message)

    return check


def text_length(
    max_length: int,
    too_long: str,
    *,
    min_length: int = 0,
    too_short: Optional[str] = None,
    required: bool = False,
    blank_is_empty: bool = False,
) -> Validator:
    """Length check for text fields. None passes unless the field is required.

    With blank_is_empty, whitespace-only text counts as empty for min_length.
    """

    def check(field_name: str, value: Any) -> None:
        if value is None:
            if required:
                raise InvalidLengthError(field_name, too_short or too_long)
            return
        measured = value.strip() if blank_is_empty else value
        if len(measured) < min_length:
            raise InvalidLengthError(field_name, too_short or too_long)
        if len(value) > max_length:
            raise InvalidLengthError(field_name, too_long)

    return check


class TrackedField:
    """Entity property whose setter stamps modified_date.

    The validator, when given, runs before anything is stored so a rejected
    value leaves both the field and modified_date untouched.
    """

    def __init__(self, default: Any = None, *, validator: Optional[Validator] = None):
        self.default = default
        self.validator = validator

    def __set_name__(self, owner, name):
        self.name = name
        self.attr = f"_{name}"

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return obj.__dict__.get(self.attr, self.default)

    def __set__(self, obj, value):
        if self.validator is not None:
            self.validator(self.name, value)
        obj.__dict__[self.attr] = value
        obj.touch()


class Entity:
    """Base for all domain entities.

    Subclasses declare their TrackedFields, the entity-to-entity projections
    they support in ``_projections`` and, optionally, computed properties to
    include in JSON.
    """

    # Computed (non-tracked) properties written by to_json, in order
    _JSON_COMPUTED: ClassVar[tuple[str, ...]] = ()
    # Fields left out of JSON when None
    _JSON_OMIT_IF_NONE: ClassVar[frozenset[str]] = frozenset()
    # Tracked fields never written to JSON
    _JSON_EXCLUDE: ClassVar[frozenset[str]] = frozenset()

    id = TrackedField(0, validator=non_negative())

    def __init__(
        self,
        *,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        id_field = type(self).id
        if id_field.validator is not None:
            id_field.validator("id", id)
        self._clock = clock or get_default_clock()
        self._id = id
        self._created_date = (
            created_date if created_date is not None else self._clock.now()
        )
        self.modified_date: Optional[datetime] = modified_date

    @property
    def created_date(self) -> datetime:
        return self._created_date

    @property
    def clock(self) -> Clock:
        return self._clock

    def touch(self) -> None:
        self.modified_date = self._clock.now()

    def _check(self, name: str, value: Any) -> None:
        """Run a field's validator on a constructor argument that was given."""
        field = getattr(type(self), name)
        if field.validator is not None and value is not None:
            field.validator(name, value)

    def restore(self, **values: Any) -> None:
        """Assign tracked fields without stamping modified_date.

        Used when rebuilding an entity from stored data; validators still run.
        """
        for name, value in values.items():
            field = getattr(type(self), name)
            if not isinstance(field, TrackedField):
                raise AttributeError(f"{type(self).__name__}.{name} is not a tracked field")
            if field.validator is not None:
                field.validator(name, value)
            self.__dict__[field.attr] = value

    # Casting

    def _projections(self) -> Mapping[type, Callable[[], Any]]:
        return {}

    def supported_cast_targets(self) -> tuple[type, ...]:
        return tuple(projections_for(self))

    def cast(self, target: type[T]) -> T:
        return cast_entity(self, target)

    # JSON

    @classmethod
    def _tracked_names(cls) -> list[str]:
        names: list[str] = []
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, TrackedField) and name not in names:
                    names.append(name)
        return names

    def json_fields(self) -> dict[str, Any]:
        fields = {
            name: getattr(self, name)
            for name in self._tracked_names()
            if name not in self._JSON_EXCLUDE
        }
        for name in self._JSON_COMPUTED:
            fields[name] = getattr(self, name)
        fields["created_date"] = self.created_date
        fields["modified_date"] = self.modified_date
        return fields

    def to_json(self, indent: Optional[int] = None) -> str:
        from organizer_companion.domain.entities.json_projection import to_json

        return to_json(self, indent=indent)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
