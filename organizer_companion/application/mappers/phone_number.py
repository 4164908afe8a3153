"""Phone number mapper."""

from organizer_companion.application.dto.phone_number import PhoneNumberDTO
from organizer_companion.application.mappers.base import DTOMapper, timestamps
from organizer_companion.domain.entities.phone_number import PhoneNumber


class PhoneNumberMapper(DTOMapper):
    entity_type = PhoneNumber
    dto_type = PhoneNumberDTO

    def to_dto(self, phone: PhoneNumber) -> PhoneNumberDTO:
        return PhoneNumberDTO(
            phone=phone.phone,
            type=phone.type,
            country=phone.country,
            **timestamps(phone),
        )

    def to_domain(
        self, dto: PhoneNumberDTO, linked_entity=None, *, clock=None
    ) -> PhoneNumber:
        return PhoneNumber(
            dto.phone, dto.type, dto.country, linked_entity, clock=clock, **timestamps(dto)
        )
