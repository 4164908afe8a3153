"""Email DTO."""

from typing import Optional

from organizer_companion.application.dto.base import EntityDTO
from organizer_companion.application.dto.protocols import EmailDTOProtocol
from organizer_companion.domain.value_objects import ContactType


class EmailDTO(EntityDTO):
    interfaces = (EmailDTOProtocol,)

    email_address: Optional[str] = None
    type: Optional[ContactType] = None
    is_primary: bool = False
    is_confirmed: bool = False

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.email import Email

        return Email
