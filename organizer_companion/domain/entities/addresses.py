"""
Address Entities - US, Canadian and Mexican postal addresses.

Address holds the fields every variant shares and cannot be built on its own.
Country names default to the variant's country; state and province hold a
NationalSubdivision so any of the three subdivision enums can be stored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, ClassVar, Optional

from organizer_companion.domain.entities.base import Entity, TrackedField
from organizer_companion.domain.linking import OwnedValue
from organizer_companion.domain.ports.clock import Clock
from organizer_companion.domain.value_objects import (
    CAProvince,
    ContactType,
    MXState,
    NationalSubdivision,
    USState,
)


class Address(OwnedValue, Entity, ABC):
    """Fields common to every address variant."""

    DEFAULT_COUNTRY: ClassVar[Optional[str]] = None

    city = TrackedField()
    country = TrackedField()
    type = TrackedField()
    is_primary = TrackedField(False)

    def __init__(
        self,
        *,
        city: Optional[str] = None,
        country: Optional[str] = None,
        type: Optional[ContactType] = None,
        is_primary: bool = False,
        linked_entity: Any = None,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        self._city = city
        self._country = country if country is not None else self.DEFAULT_COUNTRY
        self._type = type
        self._is_primary = is_primary
        self._init_link(linked_entity)

    @abstractmethod
    def mailing_lines(self) -> list[Optional[str]]:
        """Lines of the address as written on an envelope."""

    def __str__(self) -> str:
        return "\n".join(line for line in self.mailing_lines() if line)


class USAddress(Address):
    DEFAULT_COUNTRY = "United States"

    street1 = TrackedField()
    street2 = TrackedField()
    state = TrackedField()
    zip_code = TrackedField()

    def __init__(
        self,
        street1: Optional[str] = None,
        street2: Optional[str] = None,
        city: Optional[str] = None,
        state: Optional[NationalSubdivision] = None,
        zip_code: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(city=city, **kwargs)
        self._street1 = street1
        self._street2 = street2
        self._state = state
        self._zip_code = zip_code

    def set_state(self, state: USState) -> None:
        self.state = state.to_subdivision()

    def mailing_lines(self) -> list[Optional[str]]:
        return [self.street1, self.street2, f"{self.city}, {self.state} {self.zip_code}"]


class CAAddress(Address):
    DEFAULT_COUNTRY = "Canada"

    street1 = TrackedField()
    street2 = TrackedField()
    province = TrackedField()
    zip_code = TrackedField()

    def __init__(
        self,
        street1: Optional[str] = None,
        street2: Optional[str] = None,
        city: Optional[str] = None,
        province: Optional[NationalSubdivision] = None,
        zip_code: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(city=city, **kwargs)
        self._street1 = street1
        self._street2 = street2
        self._province = province
        self._zip_code = zip_code

    def set_province(self, province: CAProvince) -> None:
        self.province = province.to_subdivision()

    def mailing_lines(self) -> list[Optional[str]]:
        return [self.street1, self.street2, f"{self.city}, {self.province} {self.zip_code}"]


class MXAddress(Address):
    DEFAULT_COUNTRY = "Mexico"

    street = TrackedField()
    neighborhood = TrackedField()
    postal_code = TrackedField()
    state = TrackedField()

    def __init__(
        self,
        street: Optional[str] = None,
        neighborhood: Optional[str] = None,
        postal_code: Optional[str] = None,
        city: Optional[str] = None,
        state: Optional[NationalSubdivision] = None,
        **kwargs: Any,
    ):
        super().__init__(city=city, **kwargs)
        self._street = street
        self._neighborhood = neighborhood
        self._postal_code = postal_code
        self._state = state

    def set_state(self, state: MXState) -> None:
        self.state = state.to_subdivision()

    def mailing_lines(self) -> list[Optional[str]]:
        return [
            self.street,
            self.neighborhood,
            f"{self.postal_code} {self.city}, {self.state}",
        ]
