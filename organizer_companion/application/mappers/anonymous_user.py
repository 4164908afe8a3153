"""Anonymous user mapper."""

from organizer_companion.application.dto.anonymous_user import AnonymousUserDTO
from organizer_companion.application.mappers.base import DTOMapper, timestamps
from organizer_companion.domain.entities.anonymous_user import AnonymousUser


class AnonymousUserMapper(DTOMapper):
    entity_type = AnonymousUser
    dto_type = AnonymousUserDTO

    def to_dto(self, anonymous_user: AnonymousUser) -> AnonymousUserDTO:
        return AnonymousUserDTO(
            is_cast=anonymous_user.is_cast,
            cast_id=anonymous_user.cast_id,
            cast_type=anonymous_user.cast_type,
            **timestamps(anonymous_user),
        )

    def to_domain(
        self, dto: AnonymousUserDTO, linked_entity=None, *, clock=None
    ) -> AnonymousUser:
        return AnonymousUser(
            is_cast=dto.is_cast,
            cast_id=dto.cast_id,
            cast_type=dto.cast_type,
            clock=clock,
            **timestamps(dto),
        )
