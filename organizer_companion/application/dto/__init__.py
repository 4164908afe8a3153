"""
DTOs - Data Transfer Objects

Serialization-facing counterparts of the domain entities:
- email.py → EmailDTO
- phone_number.py → PhoneNumberDTO
- address.py → AddressDTO, USAddressDTO, CAAddressDTO, MXAddressDTO
- person.py → ContactDTO, UserDTO
- account.py → AccountDTO, FeatureDTO, DatabaseConnectionDTO
- sub_account.py → SubAccountDTO
- organization.py → OrganizationDTO, GroupDTO
- anonymous_user.py → AnonymousUserDTO
- project.py → ProjectDTO, ProjectTaskDTO, ProjectAssignmentDTO, AssignmentDTO
- protocols.py → one runtime-checkable interface per DTO

Note: DTOs are produced by casting entities (or by parsing JSON); they never
own domain entities.
"""

from organizer_companion.application.dto.base import EntityDTO
from organizer_companion.application.dto.protocols import (
    AccountDTOProtocol,
    AddressDTOProtocol,
    AnonymousUserDTOProtocol,
    AssignmentDTOProtocol,
    CAAddressDTOProtocol,
    ContactDTOProtocol,
    DatabaseConnectionDTOProtocol,
    EmailDTOProtocol,
    FeatureDTOProtocol,
    GroupDTOProtocol,
    MXAddressDTOProtocol,
    OrganizationDTOProtocol,
    PhoneNumberDTOProtocol,
    ProjectAssignmentDTOProtocol,
    ProjectDTOProtocol,
    ProjectTaskDTOProtocol,
    SubAccountDTOProtocol,
    USAddressDTOProtocol,
    UserDTOProtocol,
)
from organizer_companion.application.dto.email import EmailDTO
from organizer_companion.application.dto.phone_number import PhoneNumberDTO
from organizer_companion.application.dto.address import (
    AddressDTO,
    AnyAddressDTO,
    CAAddressDTO,
    MXAddressDTO,
    USAddressDTO,
)
from organizer_companion.application.dto.person import ContactDTO, PersonDTO, UserDTO
from organizer_companion.application.dto.account import (
    AccountDTO,
    DatabaseConnectionDTO,
    FeatureDTO,
)
from organizer_companion.application.dto.organization import GroupDTO, OrganizationDTO
from organizer_companion.application.dto.anonymous_user import AnonymousUserDTO
from organizer_companion.application.dto.sub_account import OwnerDTO, SubAccountDTO
from organizer_companion.application.dto.project import (
    AssignmentDTO,
    ProjectAssignmentDTO,
    ProjectDTO,
    ProjectTaskDTO,
)

__all__ = [
    "EntityDTO",
    "EmailDTO",
    "PhoneNumberDTO",
    "AddressDTO",
    "AnyAddressDTO",
    "USAddressDTO",
    "CAAddressDTO",
    "MXAddressDTO",
    "PersonDTO",
    "ContactDTO",
    "UserDTO",
    "AccountDTO",
    "FeatureDTO",
    "SubAccountDTO",
    "OwnerDTO",
    "DatabaseConnectionDTO",
    "OrganizationDTO",
    "GroupDTO",
    "AnonymousUserDTO",
    "ProjectDTO",
    "ProjectTaskDTO",
    "ProjectAssignmentDTO",
    "AssignmentDTO",
    "EmailDTOProtocol",
    "PhoneNumberDTOProtocol",
    "AddressDTOProtocol",
    "USAddressDTOProtocol",
    "CAAddressDTOProtocol",
    "MXAddressDTOProtocol",
    "ContactDTOProtocol",
    "UserDTOProtocol",
    "FeatureDTOProtocol",
    "AccountDTOProtocol",
    "SubAccountDTOProtocol",
    "DatabaseConnectionDTOProtocol",
    "OrganizationDTOProtocol",
    "GroupDTOProtocol",
    "AnonymousUserDTOProtocol",
    "ProjectDTOProtocol",
    "ProjectTaskDTOProtocol",
    "ProjectAssignmentDTOProtocol",
    "AssignmentDTOProtocol",
]
