"""Anonymous user DTO."""

from typing import Literal, Optional

from organizer_companion.application.dto.base import EntityDTO
from organizer_companion.application.dto.protocols import AnonymousUserDTOProtocol


class AnonymousUserDTO(EntityDTO):
    interfaces = (AnonymousUserDTOProtocol,)

    kind: Literal["AnonymousUser"] = "AnonymousUser"
    is_cast: bool = False
    cast_id: int = 0
    cast_type: Optional[str] = None

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.anonymous_user import AnonymousUser

        return AnonymousUser
