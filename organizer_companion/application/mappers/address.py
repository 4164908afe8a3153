"""
Address mappers.

Every variant also answers casts to AddressDTO (and its interface) with its
own variant DTO, so a mixed address list casts in one pass.
"""

from typing import Any, Optional

from organizer_companion.application.dto.address import (
    AddressDTO,
    CAAddressDTO,
    MXAddressDTO,
    USAddressDTO,
)
from organizer_companion.application.dto.protocols import AddressDTOProtocol
from organizer_companion.application.mappers.base import DTOMapper, timestamps
from organizer_companion.domain.entities.addresses import (
    Address,
    CAAddress,
    MXAddress,
    USAddress,
)
from organizer_companion.domain.ports.clock import Clock


def _common(address: Any) -> dict[str, Any]:
    return {
        "city": address.city,
        "country": address.country,
        "type": address.type,
        "is_primary": address.is_primary,
        **timestamps(address),
    }


class _AddressMapper(DTOMapper):
    @property
    def targets(self) -> tuple[type, ...]:
        return (*super().targets, AddressDTO, AddressDTOProtocol)


class USAddressMapper(_AddressMapper):
    entity_type = USAddress
    dto_type = USAddressDTO

    def to_dto(self, address: USAddress) -> USAddressDTO:
        return USAddressDTO(
            street1=address.street1,
            street2=address.street2,
            state=address.state,
            zip_code=address.zip_code,
            **_common(address),
        )

    def to_domain(self, dto: USAddressDTO, linked_entity=None, *, clock=None) -> USAddress:
        return USAddress(
            dto.street1,
            dto.street2,
            state=dto.state,
            zip_code=dto.zip_code,
            linked_entity=linked_entity,
            clock=clock,
            **_common(dto),
        )


class CAAddressMapper(_AddressMapper):
    entity_type = CAAddress
    dto_type = CAAddressDTO

    def to_dto(self, address: CAAddress) -> CAAddressDTO:
        return CAAddressDTO(
            street1=address.street1,
            street2=address.street2,
            province=address.province,
            zip_code=address.zip_code,
            **_common(address),
        )

    def to_domain(self, dto: CAAddressDTO, linked_entity=None, *, clock=None) -> CAAddress:
        return CAAddress(
            dto.street1,
            dto.street2,
            province=dto.province,
            zip_code=dto.zip_code,
            linked_entity=linked_entity,
            clock=clock,
            **_common(dto),
        )


class MXAddressMapper(_AddressMapper):
    entity_type = MXAddress
    dto_type = MXAddressDTO

    def to_dto(self, address: MXAddress) -> MXAddressDTO:
        return MXAddressDTO(
            street=address.street,
            neighborhood=address.neighborhood,
            postal_code=address.postal_code,
            state=address.state,
            **_common(address),
        )

    def to_domain(self, dto: MXAddressDTO, linked_entity=None, *, clock=None) -> MXAddress:
        return MXAddress(
            dto.street,
            dto.neighborhood,
            dto.postal_code,
            state=dto.state,
            linked_entity=linked_entity,
            clock=clock,
            **_common(dto),
        )


_VARIANTS = {
    USAddressDTO: USAddressMapper(),
    CAAddressDTO: CAAddressMapper(),
    MXAddressDTO: MXAddressMapper(),
}


def address_to_domain(
    dto: AddressDTO, linked_entity: Any = None, *, clock: Optional[Clock] = None
) -> Address:
    """Rebuild the address variant matching the DTO's class."""
    mapper = _VARIANTS.get(type(dto))
    if mapper is None:
        raise TypeError(f"Unknown address type: {type(dto).__name__}.")
    return mapper.to_domain(dto, linked_entity, clock=clock)


def address_mappers() -> tuple[DTOMapper, ...]:
    return tuple(_VARIANTS.values())
