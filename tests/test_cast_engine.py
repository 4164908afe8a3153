"""
Unit tests for casting entities into DTOs and other entities.

Run with: pytest tests/test_cast_engine.py -v
"""

import pytest

from organizer_companion.application.dto import (
    AccountDTO,
    AddressDTO,
    AnonymousUserDTO,
    AnonymousUserDTOProtocol,
    ContactDTO,
    EmailDTO,
    FeatureDTO,
    FeatureDTOProtocol,
    GroupDTO,
    PhoneNumberDTO,
    USAddressDTO,
    UserDTO,
)
from organizer_companion.domain.casting import cast_all, cast_optional
from organizer_companion.domain.entities import (
    Account,
    AnonymousUser,
    Contact,
    Email,
    Feature,
    Group,
    Organization,
    PhoneNumber,
    USAddress,
    User,
)
from organizer_companion.domain.exceptions import UnsupportedCastError
from organizer_companion.domain.value_objects import ContactType, Country, USState


class TestSupportedCasts:
    """Test casts inside each entity's projection map."""

    def test_email_to_dto(self):
        """Fields and timestamps are copied onto a new EmailDTO."""
        email = Email("test@example.com", ContactType.WORK, id=1)

        dto = email.cast(EmailDTO)

        assert isinstance(dto, EmailDTO)
        assert dto.id == 1
        assert dto.email_address == "test@example.com"
        assert dto.type is ContactType.WORK
        assert dto.created_date == email.created_date
        assert dto.modified_date == email.modified_date

    def test_each_cast_returns_independent_instance(self):
        """Two casts give two equal but distinct DTOs."""
        phone = PhoneNumber("555-0100", ContactType.MOBILE, Country.CANADA, id=2)

        first = phone.cast(PhoneNumberDTO)
        second = phone.cast(PhoneNumberDTO)

        assert first is not second
        assert first == second

    def test_cast_does_not_mutate_source(self):
        """Casting leaves the source's modified_date alone."""
        contact = Contact("Ada", None, "Lovelace")

        contact.cast(ContactDTO)

        assert contact.modified_date is None

    def test_address_casts_to_own_dto_and_shared_base(self):
        """An address casts to its variant DTO and to AddressDTO."""
        address = USAddress("1 Main St", None, "Austin", zip_code="73301", id=3)
        address.set_state(USState.TEXAS)

        variant = address.cast(USAddressDTO)
        shared = address.cast(AddressDTO)

        assert isinstance(variant, USAddressDTO)
        assert isinstance(shared, AddressDTO)
        assert variant.state.abbreviation == "TX"
        assert variant.country == "United States"

    def test_supported_targets_listed(self):
        """Each entity reports its closed set of targets."""
        assert set(AnonymousUser().supported_cast_targets()) == {
            AnonymousUserDTO,
            AnonymousUserDTOProtocol,
            User,
            Organization,
        }
        assert set(Feature().supported_cast_targets()) == {FeatureDTO, FeatureDTOProtocol}


class TestUnsupportedCasts:
    """Test targets outside the projection map."""

    def test_account_to_organization(self):
        """The error names the source and the requested type."""
        with pytest.raises(UnsupportedCastError) as exc_info:
            Account().cast(Organization)

        assert str(exc_info.value) == "Cannot cast Account to type Organization."
        assert exc_info.value.source_type == "Account"
        assert exc_info.value.target_type == "Organization"
        assert exc_info.value.__cause__ is None

    def test_is_a_type_error(self):
        """Unsupported casts can be caught as TypeError."""
        with pytest.raises(TypeError, match="Cannot cast Account to type Feature."):
            Account().cast(Feature)

    @pytest.mark.parametrize(
        "entity, target",
        [
            (Email(), PhoneNumberDTO),
            (Feature(), Feature),
            (Contact(), UserDTO),
            (Group(), Contact),
        ],
    )
    def test_other_unsupported_pairs(self, entity, target):
        with pytest.raises(UnsupportedCastError, match=target.__name__):
            entity.cast(target)


class TestNestedCasting:
    """Test collections and owner links inside a cast."""

    def test_collections_keep_order_and_length(self):
        """Nested emails come out in the same order."""
        contact = Contact(
            "Ada",
            None,
            "Lovelace",
            emails=[Email("a@example.com", id=1), Email("b@example.com", id=2)],
        )

        dto = contact.cast(ContactDTO)

        assert [email.id for email in dto.emails] == [1, 2]
        assert dto.full_name == "Ada Lovelace"

    def test_empty_collection_yields_empty_list(self):
        """An empty collection casts to an empty list."""
        assert cast_all([], EmailDTO) == []
        assert Contact().cast(ContactDTO).emails == []

    def test_none_collection_fails(self):
        """A collection explicitly set to None is not guarded."""
        contact = Contact()
        contact.emails = None

        with pytest.raises(TypeError):
            contact.cast(ContactDTO)

    def test_absent_owner_stays_none(self):
        """A None account stays None on the DTO."""
        dto = Group("Friends").cast(GroupDTO)

        assert dto.account is None
        assert cast_optional(None, AccountDTO) is None

    def test_present_owner_is_cast(self):
        """A present account is cast into the DTO's account field."""
        group = Group("Friends", account=Account("Main", id=5), account_id=5)

        dto = group.cast(GroupDTO)

        assert isinstance(dto.account, AccountDTO)
        assert dto.account.id == 5

    def test_mixed_addresses_keep_their_variant(self):
        """Each address is cast to its own variant DTO inside a person DTO."""
        from organizer_companion.application.dto import MXAddressDTO
        from organizer_companion.domain.entities import MXAddress

        user = User(addresses=[USAddress("1 Main St"), MXAddress("Reforma 1")])

        dto = user.cast(UserDTO)

        assert [type(address) for address in dto.addresses] == [USAddressDTO, MXAddressDTO]


class TestEntityToEntity:
    """Test casts whose target is another domain entity."""

    def test_user_to_contact_is_lossy(self):
        """The contact keeps the person data but not the identity."""
        email = Email("ada@example.com")
        user = User("Ada", None, "Lovelace", id=10, user_name="ada", emails=[email])

        contact = user.cast(Contact)

        assert isinstance(contact, Contact)
        assert contact.id == 0
        assert contact.linked_entity is None
        assert contact.linked_entity_id == 0
        assert contact.full_name == "Ada Lovelace"
        assert contact.user_name == "ada"
        assert contact.emails == [email]
        assert contact.emails is not user.emails
        assert contact.created_date == user.created_date

    def test_anonymous_user_cast_is_pure(self):
        """cast() builds a user without recording anything."""
        anonymous = AnonymousUser(id=3)

        user = anonymous.cast(User)

        assert isinstance(user, User)
        assert user.id == 0
        assert user.created_date == anonymous.created_date
        assert anonymous.is_cast is False
        assert anonymous.modified_date is None

    def test_anonymous_user_convert_records_metadata(self):
        """convert_to() remembers what the anonymous user became."""
        anonymous = AnonymousUser(id=3)

        organization = anonymous.convert_to(Organization)

        assert isinstance(organization, Organization)
        assert anonymous.is_cast is True
        assert anonymous.cast_id == 0
        assert anonymous.cast_type == "Organization"
        assert anonymous.modified_date is not None

    def test_convert_to_unsupported_target_changes_nothing(self):
        """A failed conversion leaves the metadata untouched."""
        anonymous = AnonymousUser()

        with pytest.raises(UnsupportedCastError):
            anonymous.convert_to(Contact)

        assert anonymous.is_cast is False
        assert anonymous.cast_type is None
