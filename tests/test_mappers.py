"""
Unit tests for the mappers between entities and DTOs, the DTO interfaces and
the layering of the domain package.

Run with: pytest tests/test_mappers.py -v
"""

import ast
from pathlib import Path

import pytest

import organizer_companion.domain as domain_package
from organizer_companion.application.dto import (
    AccountDTO,
    AddressDTO,
    AddressDTOProtocol,
    AnonymousUserDTO,
    ContactDTO,
    ContactDTOProtocol,
    EmailDTO,
    EmailDTOProtocol,
    EntityDTO,
    OrganizationDTO,
    SubAccountDTO,
    SubAccountDTOProtocol,
    USAddressDTO,
    USAddressDTOProtocol,
    UserDTO,
    UserDTOProtocol,
)
from organizer_companion.application.mappers import (
    EmailMapper,
    EntityMapper,
    get_mapper,
    to_domain,
)
from organizer_companion.domain.entities import (
    Account,
    Address,
    AnonymousUser,
    Contact,
    Email,
    Organization,
    SubAccount,
    USAddress,
    User,
)
from organizer_companion.domain.exceptions import UnsupportedCastError


class TestInterfaceCasts:
    """Test casting entities and DTOs to the DTO interfaces."""

    def test_entity_cast_to_interface_gives_concrete_dto(self):
        email = Email("a@example.com", id=1)

        dto = email.cast(EmailDTOProtocol)

        assert type(dto) is EmailDTO
        assert isinstance(dto, EmailDTOProtocol)
        assert dto.email_address == "a@example.com"

    def test_address_cast_to_shared_and_variant_interfaces(self):
        address = USAddress("1 Main St", id=2)

        assert type(address.cast(AddressDTOProtocol)) is USAddressDTO
        assert type(address.cast(USAddressDTOProtocol)) is USAddressDTO

    def test_interfaces_are_listed_as_targets(self):
        targets = set(Contact().supported_cast_targets())

        assert {ContactDTO, ContactDTOProtocol} <= targets

    def test_dto_cast_to_own_interface_is_copy(self):
        dto = UserDTO(first_name="Ada")

        copy = dto.cast(UserDTOProtocol)

        assert copy == dto
        assert copy is not dto

    def test_dto_rejects_foreign_interface(self):
        with pytest.raises(UnsupportedCastError, match="EmailDTOProtocol"):
            ContactDTO().cast(EmailDTOProtocol)

    def test_user_dto_satisfies_only_user_shapes(self):
        assert isinstance(UserDTO(), UserDTOProtocol)
        assert not isinstance(ContactDTO(), UserDTOProtocol)
        assert isinstance(SubAccountDTO(), SubAccountDTOProtocol)


class TestSubAccountOwner:
    """Test the owner of a sub-account surviving JSON."""

    def test_user_owner_survives_json_round_trip(self):
        sub_account = SubAccount(User("Ada", None, "Lovelace", id=7), Account(id=3), id=4)

        json_text = sub_account.cast(SubAccountDTO).to_json()
        parsed = SubAccountDTO.model_validate_json(json_text)
        rebuilt = parsed.cast(SubAccount)

        assert isinstance(parsed.linked_entity, UserDTO)
        assert isinstance(rebuilt.user, User)
        assert rebuilt.user_id == 7
        assert rebuilt.user.full_name == "Ada Lovelace"
        assert rebuilt.account.id == 3
        assert rebuilt.linked_entity_type == "User"

    @pytest.mark.parametrize(
        "owner, dto_type",
        [
            (Organization("Acme", id=5), OrganizationDTO),
            (AnonymousUser(id=6), AnonymousUserDTO),
        ],
        ids=["organization", "anonymous_user"],
    )
    def test_other_owner_kinds_parse_back(self, owner, dto_type):
        json_text = SubAccount(owner).cast(SubAccountDTO).to_json()

        parsed = SubAccountDTO.model_validate_json(json_text)

        assert type(parsed.linked_entity) is dto_type
        assert type(parsed.cast(SubAccount).linked_entity) is type(owner)

    def test_owner_kind_is_written(self):
        dto = SubAccount(User(id=7)).cast(SubAccountDTO)

        assert '"kind":"User"' in dto.to_json().replace(" ", "")


class TestMapperRegistry:
    """Test the registered mappers."""

    def test_mapper_satisfies_protocol(self):
        assert isinstance(EmailMapper(), EntityMapper)
        assert isinstance(get_mapper(Email), EmailMapper)

    def test_to_domain_passes_owner(self):
        owner = Contact(id=2)

        email = to_domain(EmailDTO(email_address="a@example.com"), owner)

        assert email.contact is owner

    def test_to_domain_without_paired_type(self):
        with pytest.raises(UnsupportedCastError, match="AddressDTO"):
            to_domain(AddressDTO())

    def test_nested_account_dtos_rebuild_their_account(self):
        dto = AccountDTO(id=1, accounts=[SubAccountDTO(id=2, account_id=1)])

        account = dto.cast(Account)

        assert account.accounts[0].account is account
        assert account.modified_date is None

    def test_dto_has_no_dict_export(self):
        assert not hasattr(EntityDTO, "to_dict")


class TestAddressBase:
    """Test that only the address variants can be built."""

    def test_base_address_is_abstract(self):
        with pytest.raises(TypeError):
            Address(city="Nowhere")

    def test_unmapped_variant_has_no_dto(self):
        class PostOfficeBox(Address):
            def mailing_lines(self):
                return [self.city]

        box = PostOfficeBox(city="Austin")

        assert str(box) == "Austin"
        with pytest.raises(UnsupportedCastError, match="Cannot cast PostOfficeBox"):
            box.cast(AddressDTO)


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    modules = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            modules.add(node.module)
    return modules


class TestDomainLayering:
    """Test that the domain package depends on the standard library only."""

    FORBIDDEN = (
        "pydantic",
        "dishka",
        "dotenv",
        "organizer_companion.application",
        "organizer_companion.config",
        "organizer_companion.setup",
    )

    def test_domain_imports_no_framework_or_outer_layer(self):
        root = Path(domain_package.__file__).parent
        offenders = {
            f"{path.relative_to(root)}: {module}"
            for path in root.rglob("*.py")
            for module in _imported_modules(path)
            if module.startswith(self.FORBIDDEN)
        }

        assert offenders == set()
