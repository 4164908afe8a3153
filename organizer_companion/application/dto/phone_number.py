"""Phone number DTO."""

from typing import Optional

from organizer_companion.application.dto.base import EntityDTO
from organizer_companion.application.dto.protocols import PhoneNumberDTOProtocol
from organizer_companion.domain.value_objects import ContactType, Country


class PhoneNumberDTO(EntityDTO):
    interfaces = (PhoneNumberDTOProtocol,)

    phone: Optional[str] = None
    type: Optional[ContactType] = None
    country: Optional[Country] = None

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.phone_number import PhoneNumber

        return PhoneNumber
