"""Organization and group mappers."""

from organizer_companion.application.dto.account import AccountDTO
from organizer_companion.application.dto.address import AddressDTO
from organizer_companion.application.dto.email import EmailDTO
from organizer_companion.application.dto.organization import GroupDTO, OrganizationDTO
from organizer_companion.application.dto.person import ContactDTO
from organizer_companion.application.dto.phone_number import PhoneNumberDTO
from organizer_companion.application.mappers.base import DTOMapper, timestamps, to_domain
from organizer_companion.application.mappers.person import (
    ContactMapper,
    restore_contact_data,
)
from organizer_companion.domain.casting import cast_all, cast_optional
from organizer_companion.domain.entities.group import Group
from organizer_companion.domain.entities.organization import Organization

_contacts = ContactMapper()


class OrganizationMapper(DTOMapper):
    entity_type = Organization
    dto_type = OrganizationDTO

    def to_dto(self, organization: Organization) -> OrganizationDTO:
        return OrganizationDTO(
            organization_name=organization.organization_name,
            emails=cast_all(organization.emails, EmailDTO),
            phone_numbers=cast_all(organization.phone_numbers, PhoneNumberDTO),
            addresses=cast_all(organization.addresses, AddressDTO),
            members=cast_all(organization.members, ContactDTO),
            contacts=cast_all(organization.contacts, ContactDTO),
            accounts=cast_all(organization.accounts, AccountDTO),
            **timestamps(organization),
        )

    def to_domain(
        self, dto: OrganizationDTO, linked_entity=None, *, clock=None
    ) -> Organization:
        organization = Organization(dto.organization_name, clock=clock, **timestamps(dto))
        restore_contact_data(organization, dto, clock)
        organization.restore(
            members=[
                _contacts.to_domain(member, organization, clock=clock)
                for member in dto.members
            ],
            contacts=[
                _contacts.to_domain(contact, organization, clock=clock)
                for contact in dto.contacts
            ],
            accounts=[to_domain(account, clock=clock) for account in dto.accounts],
        )
        return organization


class GroupMapper(DTOMapper):
    entity_type = Group
    dto_type = GroupDTO

    def to_dto(self, group: Group) -> GroupDTO:
        return GroupDTO(
            group_name=group.group_name,
            description=group.description,
            members=cast_all(group.members, ContactDTO),
            account_id=group.account_id,
            account=cast_optional(group.account, AccountDTO),
            **timestamps(group),
        )

    def to_domain(self, dto: GroupDTO, linked_entity=None, *, clock=None) -> Group:
        group = Group(
            dto.group_name,
            dto.description,
            account_id=dto.account_id,
            account=to_domain(dto.account, clock=clock) if dto.account is not None else None,
            clock=clock,
            **timestamps(dto),
        )
        group.restore(
            members=[_contacts.to_domain(member, group, clock=clock) for member in dto.members]
        )
        return group
