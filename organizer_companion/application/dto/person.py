"""Contact and User DTOs."""

from datetime import datetime
from typing import Literal, Optional

from organizer_companion.application.dto.address import AnyAddressDTO
from organizer_companion.application.dto.base import EntityDTO
from organizer_companion.application.dto.email import EmailDTO
from organizer_companion.application.dto.phone_number import PhoneNumberDTO
from organizer_companion.application.dto.protocols import (
    ContactDTOProtocol,
    UserDTOProtocol,
)
from organizer_companion.domain.value_objects import Pronoun


class PersonDTO(EntityDTO):
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    user_name: Optional[str] = None
    pronouns: Optional[Pronoun] = None
    birth_date: Optional[datetime] = None
    deceased_date: Optional[datetime] = None
    joined_date: Optional[datetime] = None
    emails: list[EmailDTO] = []
    phone_numbers: list[PhoneNumberDTO] = []
    addresses: list[AnyAddressDTO] = []
    is_active: Optional[bool] = None
    is_deceased: Optional[bool] = None
    is_admin: Optional[bool] = None
    is_super_user: Optional[bool] = None


class ContactDTO(PersonDTO):
    interfaces = (ContactDTOProtocol,)

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.contact import Contact

        return Contact


class UserDTO(PersonDTO):
    interfaces = (UserDTOProtocol,)

    # Discriminates the owner of a SubAccountDTO
    kind: Literal["User"] = "User"

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.user import User

        return User
