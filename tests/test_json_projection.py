"""
Unit tests for entity JSON output.

Run with: pytest tests/test_json_projection.py -v
"""

import json

from organizer_companion.domain.entities import (
    Account,
    AccountFeature,
    Contact,
    Email,
    Feature,
    USAddress,
    User,
)
from organizer_companion.domain.value_objects import ContactType, Pronoun, USState


class TestJsonShape:
    """Test key names and value formats."""

    def test_camel_case_keys_and_iso_dates(self):
        email = Email("test@example.com", ContactType.WORK, id=1)

        data = json.loads(email.to_json())

        assert data["id"] == 1
        assert data["emailAddress"] == "test@example.com"
        assert data["type"] == "Work"
        assert data["isPrimary"] is False
        assert data["linkedEntity"] is None
        assert data["createdDate"] == "2024-01-01T12:00:00+00:00"
        assert data["modifiedDate"] is None

    def test_enum_and_subdivision_values(self):
        user = User("Ada", None, "Lovelace", pronouns=Pronoun.SHE_HER)
        address = USAddress("1 Main St")
        address.set_state(USState.TEXAS)

        user_data = json.loads(user.to_json())
        address_data = json.loads(address.to_json())

        assert user_data["pronouns"] == "she/her"
        assert user_data["fullName"] == "Ada Lovelace"
        assert address_data["state"] == {"name": "Texas", "abbreviation": "TX"}

    def test_indent(self):
        assert "\n" in Feature("Reports").to_json(indent=2)


class TestSkipIfNull:
    """Test fields left out when None."""

    def test_optional_person_fields_omitted(self):
        data = json.loads(User("Ada", None, "Lovelace").to_json())

        assert "userName" not in data
        assert "deceasedDate" not in data
        assert "isSuperUser" not in data
        assert "isAdmin" in data

    def test_optional_person_fields_written_when_set(self):
        data = json.loads(User(user_name="ada", is_super_user=True).to_json())

        assert data["userName"] == "ada"
        assert data["isSuperUser"] is True

    def test_null_sub_accounts_omitted(self):
        assert "accounts" not in json.loads(Account("Main").to_json())
        assert json.loads(Account("Main", accounts=[]).to_json())["accounts"] == []

    def test_account_feature_writes_ids_not_objects(self):
        join = AccountFeature(Account(id=2), Feature(id=3))

        data = json.loads(join.to_json())

        assert data["accountId"] == 2
        assert data["featureId"] == 3
        assert "account" not in data
        assert "feature" not in data


class TestCycles:
    """Test owner/value back-references."""

    def test_back_reference_written_as_null(self):
        contact = Contact("Ada", None, "Lovelace", id=123)
        email = Email("ada@example.com", linked_entity=contact)
        contact.emails = [email]

        data = json.loads(email.to_json())

        assert data["linkedEntityId"] == 123
        assert data["linkedEntityType"] == "Contact"
        assert data["linkedEntity"]["fullName"] == "Ada Lovelace"
        assert data["linkedEntity"]["emails"] == [None]

    def test_shared_entity_outside_cycle_written_twice(self):
        """An entity referenced twice on different paths is not a cycle."""
        feature = Feature("Reports", id=1)
        account = Account(id=1)
        account.features = [AccountFeature(account, feature), AccountFeature(account, feature)]

        data = json.loads(account.to_json())

        assert [item["featureId"] for item in data["features"]] == [1, 1]
