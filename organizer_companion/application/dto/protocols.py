"""
Interfaces of the DTOs.

Generic code can depend on these instead of the concrete pydantic models.
Entities accept an interface as a cast target and return the matching
concrete DTO; a DTO accepts its own interfaces and returns a copy of itself.
"""

from datetime import datetime
from typing import Any, Optional, Protocol, runtime_checkable

from organizer_companion.domain.entities.capabilities import DomainEntity
from organizer_companion.domain.value_objects import (
    ContactType,
    Country,
    NationalSubdivision,
    Pronoun,
    SupportedDatabase,
)


@runtime_checkable
class EmailDTOProtocol(DomainEntity, Protocol):
    email_address: Optional[str]
    type: Optional[ContactType]
    is_primary: bool
    is_confirmed: bool


@runtime_checkable
class PhoneNumberDTOProtocol(DomainEntity, Protocol):
    phone: Optional[str]
    type: Optional[ContactType]
    country: Optional[Country]


@runtime_checkable
class AddressDTOProtocol(DomainEntity, Protocol):
    city: Optional[str]
    country: Optional[str]
    type: Optional[ContactType]
    is_primary: bool


@runtime_checkable
class USAddressDTOProtocol(AddressDTOProtocol, Protocol):
    street1: Optional[str]
    street2: Optional[str]
    state: Optional[NationalSubdivision]
    zip_code: Optional[str]


@runtime_checkable
class CAAddressDTOProtocol(AddressDTOProtocol, Protocol):
    street1: Optional[str]
    street2: Optional[str]
    province: Optional[NationalSubdivision]
    zip_code: Optional[str]


@runtime_checkable
class MXAddressDTOProtocol(AddressDTOProtocol, Protocol):
    street: Optional[str]
    neighborhood: Optional[str]
    postal_code: Optional[str]
    state: Optional[NationalSubdivision]


@runtime_checkable
class ContactDTOProtocol(DomainEntity, Protocol):
    first_name: Optional[str]
    middle_name: Optional[str]
    last_name: Optional[str]
    full_name: Optional[str]
    pronouns: Optional[Pronoun]
    birth_date: Optional[datetime]
    emails: list[Any]
    phone_numbers: list[Any]
    addresses: list[Any]


@runtime_checkable
class UserDTOProtocol(ContactDTOProtocol, Protocol):
    kind: str
    user_name: Optional[str]
    is_admin: Optional[bool]


@runtime_checkable
class FeatureDTOProtocol(DomainEntity, Protocol):
    feature_name: Optional[str]
    is_enabled: bool


@runtime_checkable
class AccountDTOProtocol(DomainEntity, Protocol):
    account_name: Optional[str]
    account_number: Optional[str]
    license: Optional[str]
    features: list[Any]
    accounts: Optional[list[Any]]


@runtime_checkable
class SubAccountDTOProtocol(DomainEntity, Protocol):
    linked_entity_id: Optional[int]
    linked_entity_type: Optional[str]
    linked_entity: Any
    account_id: Optional[int]
    account: Any


@runtime_checkable
class DatabaseConnectionDTOProtocol(DomainEntity, Protocol):
    connection_string: Optional[str]
    database_type: Optional[SupportedDatabase]
    account_id: Optional[int]
    account: Any


@runtime_checkable
class OrganizationDTOProtocol(DomainEntity, Protocol):
    kind: str
    organization_name: Optional[str]
    members: list[Any]
    contacts: list[Any]
    accounts: list[Any]


@runtime_checkable
class GroupDTOProtocol(DomainEntity, Protocol):
    group_name: Optional[str]
    description: Optional[str]
    members: list[Any]
    account_id: int


@runtime_checkable
class AnonymousUserDTOProtocol(DomainEntity, Protocol):
    kind: str
    is_cast: bool
    cast_id: int
    cast_type: Optional[str]


@runtime_checkable
class ProjectDTOProtocol(DomainEntity, Protocol):
    project_name: Optional[str]
    description: Optional[str]
    groups: list[Any]
    tasks: list[Any]
    is_completed: bool
    due_date: Optional[datetime]
    completed_date: Optional[datetime]


@runtime_checkable
class ProjectTaskDTOProtocol(DomainEntity, Protocol):
    project_task_name: Optional[str]
    description: Optional[str]
    assignments: list[Any]
    is_completed: bool
    due_date: Optional[datetime]
    completed_date: Optional[datetime]


@runtime_checkable
class ProjectAssignmentDTOProtocol(DomainEntity, Protocol):
    project_assignment_name: Optional[str]
    description: Optional[str]
    assignee_id: Optional[int]
    location_id: Optional[int]
    location_type: Optional[str]
    groups: list[Any]
    task_id: Optional[int]
    is_completed: bool
    due_date: Optional[datetime]
    completed_date: Optional[datetime]


@runtime_checkable
class AssignmentDTOProtocol(DomainEntity, Protocol):
    name: Optional[str]
    description: Optional[str]
    assignees: list[Any]
    contacts: list[Any]
    is_completed: bool
    due_date: Optional[datetime]
    completed_date: Optional[datetime]
