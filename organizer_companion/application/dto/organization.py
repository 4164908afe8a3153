"""Organization and group DTOs."""

from typing import Literal, Optional

from organizer_companion.application.dto.account import AccountDTO
from organizer_companion.application.dto.address import AnyAddressDTO
from organizer_companion.application.dto.base import EntityDTO
from organizer_companion.application.dto.email import EmailDTO
from organizer_companion.application.dto.person import ContactDTO
from organizer_companion.application.dto.phone_number import PhoneNumberDTO
from organizer_companion.application.dto.protocols import (
    GroupDTOProtocol,
    OrganizationDTOProtocol,
)


class OrganizationDTO(EntityDTO):
    interfaces = (OrganizationDTOProtocol,)

    kind: Literal["Organization"] = "Organization"
    organization_name: Optional[str] = None
    emails: list[EmailDTO] = []
    phone_numbers: list[PhoneNumberDTO] = []
    addresses: list[AnyAddressDTO] = []
    members: list[ContactDTO] = []
    contacts: list[ContactDTO] = []
    accounts: list[AccountDTO] = []

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.organization import Organization

        return Organization


class GroupDTO(EntityDTO):
    interfaces = (GroupDTOProtocol,)

    group_name: Optional[str] = None
    description: Optional[str] = None
    members: list[ContactDTO] = []
    account_id: int = 0
    account: Optional[AccountDTO] = None

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.group import Group

        return Group
