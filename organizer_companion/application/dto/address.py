"""
Address DTOs.

AddressDTO is the shared base every address variant casts to; the concrete
variants carry a ``kind`` discriminator so lists of mixed addresses parse
back into the right class.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from organizer_companion.application.dto.base import EntityDTO
from organizer_companion.application.dto.protocols import (
    AddressDTOProtocol,
    CAAddressDTOProtocol,
    MXAddressDTOProtocol,
    USAddressDTOProtocol,
)
from organizer_companion.domain.value_objects import ContactType, NationalSubdivision


class AddressDTO(EntityDTO):
    interfaces = (AddressDTOProtocol,)

    city: Optional[str] = None
    country: Optional[str] = None
    type: Optional[ContactType] = None
    is_primary: bool = False


class USAddressDTO(AddressDTO):
    interfaces = (AddressDTOProtocol, USAddressDTOProtocol)

    kind: Literal["USAddress"] = "USAddress"
    street1: Optional[str] = None
    street2: Optional[str] = None
    state: Optional[NationalSubdivision] = None
    zip_code: Optional[str] = None

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.addresses import USAddress

        return USAddress


class CAAddressDTO(AddressDTO):
    interfaces = (AddressDTOProtocol, CAAddressDTOProtocol)

    kind: Literal["CAAddress"] = "CAAddress"
    street1: Optional[str] = None
    street2: Optional[str] = None
    province: Optional[NationalSubdivision] = None
    zip_code: Optional[str] = None

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.addresses import CAAddress

        return CAAddress


class MXAddressDTO(AddressDTO):
    interfaces = (AddressDTOProtocol, MXAddressDTOProtocol)

    kind: Literal["MXAddress"] = "MXAddress"
    street: Optional[str] = None
    neighborhood: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[NationalSubdivision] = None

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.addresses import MXAddress

        return MXAddress


AnyAddressDTO = Annotated[
    Union[USAddressDTO, CAAddressDTO, MXAddressDTO], Field(discriminator="kind")
]
