"""Email mapper."""

from organizer_companion.application.dto.email import EmailDTO
from organizer_companion.application.mappers.base import DTOMapper, timestamps
from organizer_companion.domain.entities.email import Email


class EmailMapper(DTOMapper):
    entity_type = Email
    dto_type = EmailDTO

    def to_dto(self, email: Email) -> EmailDTO:
        return EmailDTO(
            email_address=email.email_address,
            type=email.type,
            is_primary=email.is_primary,
            is_confirmed=email.is_confirmed,
            **timestamps(email),
        )

    def to_domain(self, dto: EmailDTO, linked_entity=None, *, clock=None) -> Email:
        return Email(
            dto.email_address,
            dto.type,
            dto.is_primary,
            linked_entity,
            dto.is_confirmed,
            clock=clock,
            **timestamps(dto),
        )
