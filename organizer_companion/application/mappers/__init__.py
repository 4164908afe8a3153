"""
MAPPERS - Entity <-> DTO conversion

Importing this package registers every mapper, which makes each DTO (and its
interface) a cast target of its entity.
"""

from organizer_companion.application.mappers.account import (
    AccountFeatureMapper,
    AccountMapper,
    DatabaseConnectionMapper,
    FeatureMapper,
    SubAccountMapper,
)
from organizer_companion.application.mappers.address import (
    CAAddressMapper,
    MXAddressMapper,
    USAddressMapper,
    address_mappers,
    address_to_domain,
)
from organizer_companion.application.mappers.anonymous_user import AnonymousUserMapper
from organizer_companion.application.mappers.base import (
    DTOMapper,
    EntityMapper,
    get_mapper,
    register_mapper,
    to_domain,
)
from organizer_companion.application.mappers.email import EmailMapper
from organizer_companion.application.mappers.organization import (
    GroupMapper,
    OrganizationMapper,
)
from organizer_companion.application.mappers.person import ContactMapper, UserMapper
from organizer_companion.application.mappers.phone_number import PhoneNumberMapper
from organizer_companion.application.mappers.project import (
    AssignmentMapper,
    ProjectAssignmentMapper,
    ProjectMapper,
    ProjectTaskMapper,
)

for _mapper in (
    EmailMapper(),
    PhoneNumberMapper(),
    *address_mappers(),
    ContactMapper(),
    UserMapper(),
    FeatureMapper(),
    AccountFeatureMapper(),
    AccountMapper(),
    SubAccountMapper(),
    DatabaseConnectionMapper(),
    OrganizationMapper(),
    GroupMapper(),
    AnonymousUserMapper(),
    ProjectMapper(),
    ProjectTaskMapper(),
    ProjectAssignmentMapper(),
    AssignmentMapper(),
):
    register_mapper(_mapper)

__all__ = [
    "EntityMapper",
    "DTOMapper",
    "register_mapper",
    "get_mapper",
    "to_domain",
    "address_to_domain",
    "EmailMapper",
    "PhoneNumberMapper",
    "USAddressMapper",
    "CAAddressMapper",
    "MXAddressMapper",
    "ContactMapper",
    "UserMapper",
    "FeatureMapper",
    "AccountFeatureMapper",
    "AccountMapper",
    "SubAccountMapper",
    "DatabaseConnectionMapper",
    "OrganizationMapper",
    "GroupMapper",
    "AnonymousUserMapper",
    "ProjectMapper",
    "ProjectTaskMapper",
    "ProjectAssignmentMapper",
    "AssignmentMapper",
]
