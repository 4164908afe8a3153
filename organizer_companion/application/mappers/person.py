"""Contact and User mappers.

Emails, phone numbers and addresses are rebuilt owned by the person being
rebuilt; attaching them does not stamp the person's modified_date.
"""

from typing import Any, Optional

from organizer_companion.application.dto.address import AddressDTO
from organizer_companion.application.dto.email import EmailDTO
from organizer_companion.application.dto.person import ContactDTO, PersonDTO, UserDTO
from organizer_companion.application.dto.phone_number import PhoneNumberDTO
from organizer_companion.application.mappers.address import address_to_domain
from organizer_companion.application.mappers.base import DTOMapper, timestamps
from organizer_companion.application.mappers.email import EmailMapper
from organizer_companion.application.mappers.phone_number import PhoneNumberMapper
from organizer_companion.domain.casting import cast_all
from organizer_companion.domain.entities.contact import Contact
from organizer_companion.domain.entities.person import PERSON_FIELDS, Person
from organizer_companion.domain.entities.user import User
from organizer_companion.domain.ports.clock import Clock

_emails = EmailMapper()
_phone_numbers = PhoneNumberMapper()


def person_to_dto(person: Person, dto_type: type[PersonDTO]) -> Any:
    return dto_type(
        full_name=person.full_name,
        emails=cast_all(person.emails, EmailDTO),
        phone_numbers=cast_all(person.phone_numbers, PhoneNumberDTO),
        addresses=cast_all(person.addresses, AddressDTO),
        **person.person_values(),
        **timestamps(person),
    )


def restore_contact_data(owner: Any, dto: Any, clock: Optional[Clock]) -> None:
    """Rebuild the emails, phone numbers and addresses of ``dto`` onto ``owner``."""
    owner.restore(
        emails=[_emails.to_domain(email, owner, clock=clock) for email in dto.emails],
        phone_numbers=[
            _phone_numbers.to_domain(phone, owner, clock=clock)
            for phone in dto.phone_numbers
        ],
        addresses=[
            address_to_domain(address, owner, clock=clock) for address in dto.addresses
        ],
    )


def _person_values(dto: PersonDTO) -> dict[str, Any]:
    return {name: getattr(dto, name) for name in PERSON_FIELDS}


class ContactMapper(DTOMapper):
    entity_type = Contact
    dto_type = ContactDTO

    def to_dto(self, contact: Contact) -> ContactDTO:
        return person_to_dto(contact, ContactDTO)

    def to_domain(self, dto: ContactDTO, linked_entity=None, *, clock=None) -> Contact:
        contact = Contact(
            linked_entity=linked_entity,
            linked_entity_id=linked_entity.id if linked_entity is not None else 0,
            clock=clock,
            **_person_values(dto),
            **timestamps(dto),
        )
        restore_contact_data(contact, dto, clock)
        return contact


class UserMapper(DTOMapper):
    entity_type = User
    dto_type = UserDTO

    def to_dto(self, user: User) -> UserDTO:
        return person_to_dto(user, UserDTO)

    def to_domain(self, dto: UserDTO, linked_entity=None, *, clock=None) -> User:
        user = User(clock=clock, **_person_values(dto), **timestamps(dto))
        restore_contact_data(user, dto, clock)
        return user
