"""Sub-account DTO.

The owner travels as the DTO of a user, organization or anonymous user and
is told apart by its ``kind`` on parse. Owners without a DTO travel only as
linked_entity_id and linked_entity_type.
"""

from typing import Annotated, Optional, Union

from pydantic import Field

from organizer_companion.application.dto.account import AccountDTO, DatabaseConnectionDTO
from organizer_companion.application.dto.anonymous_user import AnonymousUserDTO
from organizer_companion.application.dto.base import EntityDTO
from organizer_companion.application.dto.organization import GroupDTO, OrganizationDTO
from organizer_companion.application.dto.person import UserDTO
from organizer_companion.application.dto.protocols import SubAccountDTOProtocol

OwnerDTO = Annotated[
    Union[UserDTO, OrganizationDTO, AnonymousUserDTO], Field(discriminator="kind")
]


class SubAccountDTO(EntityDTO):
    interfaces = (SubAccountDTOProtocol,)

    linked_entity_id: Optional[int] = None
    linked_entity_type: Optional[str] = None
    linked_entity: Optional[OwnerDTO] = None
    account_id: Optional[int] = None
    account: Optional[AccountDTO] = None

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.sub_account import SubAccount

        return SubAccount


for _model in (AccountDTO, SubAccountDTO, OrganizationDTO, GroupDTO, DatabaseConnectionDTO):
    _model.model_rebuild(force=True)
