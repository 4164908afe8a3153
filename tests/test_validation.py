"""
Unit tests for the validation rules and the entity validation run.

Run with: pytest tests/test_validation.py -v
"""

import time

import pytest

from organizer_companion.application.validation import (
    EntityValidator,
    are_valid_emails,
    are_valid_phone_numbers,
    check_connection_string,
    is_valid_connection_string_for_any,
    is_valid_email,
    is_valid_guid,
    is_valid_password,
    is_valid_phone_number,
    is_valid_url,
    is_valid_user_name,
    validate_entity,
)
from organizer_companion.domain.entities import (
    Account,
    Contact,
    DatabaseConnection,
    Email,
    Password,
    PhoneNumber,
    User,
)
from organizer_companion.domain.exceptions import DomainValidationError
from organizer_companion.domain.value_objects import SupportedDatabase


class TestValueRules:
    """Test the single-value rules."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("test@example.com", True),
            ("first.last@sub.example.org", True),
            ("not-an-email", False),
            ("a@b", False),
            (None, True),
        ],
    )
    def test_email(self, value, expected):
        assert is_valid_email(value) is expected

    @pytest.mark.parametrize(
        "value",
        ["a" * 5000 + "!", "a@" + "b" * 5000 + "!", "a." * 2500 + "@example.com!"],
        ids=["local-part", "domain", "dotted"],
    )
    def test_long_malformed_email_fails_fast(self, value):
        """Rejecting a long near-miss takes linear time."""
        started = time.perf_counter()

        assert is_valid_email(value) is False
        assert time.perf_counter() - started < 1.0

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("Passw0rd!", True),
            ("Sh0!", True),
            ("password", False),
            ("PASSWORD1!", False),
            ("Passw0rd", False),
            ("A1!a" * 6, False),
            (None, True),
        ],
    )
    def test_password(self, value, expected):
        assert is_valid_password(value) is expected

    def test_guid(self):
        assert is_valid_guid("d36ddcfd-5161-4c20-80aa-b312ef161433")
        assert not is_valid_guid("d36ddcfd51614c2080aab312ef161433")
        assert not is_valid_guid("zzzzzzzz-5161-4c20-80aa-b312ef161433")

    def test_user_name(self):
        assert is_valid_user_name("john.doe")
        assert not is_valid_user_name("abc")
        assert not is_valid_user_name("has space")
        assert not is_valid_user_name("")

    def test_url(self):
        assert is_valid_url("https://example.com/path?q=1")
        assert is_valid_url("ftp://files.example.com")
        assert not is_valid_url("example.com")

    def test_long_malformed_url_fails_fast(self):
        started = time.perf_counter()

        assert not is_valid_url("https://" + "a-" * 250 + "a!")
        assert time.perf_counter() - started < 1.0

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("555-123-4567", True),
            ("(555) 123-4567", True),
            ("+1 555 123 4567", True),
            ("+52 55 1234 5678", True),
            ("555-123-4567 ext 12", True),
            ("phone", False),
            ("12", False),
        ],
    )
    def test_phone_number(self, value, expected):
        assert is_valid_phone_number(value) is expected

    def test_lists_reject_empty_entries(self):
        assert are_valid_emails(["a@example.com", "b@example.com"])
        assert not are_valid_emails(["a@example.com", ""])
        assert not are_valid_emails([None])
        assert are_valid_phone_numbers([])
        assert not are_valid_phone_numbers(["555-123-4567", "nope"])


class TestConnectionStrings:
    """Test connection string formats per database."""

    @pytest.mark.parametrize(
        "database, connection_string",
        [
            (SupportedDatabase.SQL_SERVER, "Server=localhost;Database=app;User Id=sa;Password=secret;"),
            (SupportedDatabase.SQLITE, "Data Source=app.db;Version=3"),
            (SupportedDatabase.MYSQL, "Server=localhost;Port=3306;Database=app;UID=me;PWD=pw;"),
            (SupportedDatabase.POSTGRESQL, "Host=localhost;Port=5432;Database=app;Username=me;Password=pw;"),
            (SupportedDatabase.SQLITE, "data source=app.db"),
        ],
    )
    def test_valid(self, database, connection_string):
        assert check_connection_string(database, connection_string) == (True, "")

    def test_invalid_for_database(self):
        is_valid, message = check_connection_string(SupportedDatabase.SQLITE, "Server=localhost")

        assert is_valid is False
        assert message == "The connection string is not in a valid format for SQLite database."

    def test_missing_parts(self):
        assert check_connection_string(None, "Data Source=app.db") == (
            False,
            "Database type must be specified.",
        )
        assert check_connection_string(SupportedDatabase.MYSQL, "  ") == (
            False,
            "Connection string cannot be null or empty.",
        )

    def test_any_database(self):
        assert is_valid_connection_string_for_any("Data Source=app.db")
        assert not is_valid_connection_string_for_any("")
        assert not is_valid_connection_string_for_any("just text")


class TestValidateEntity:
    """Test the validation run over entities."""

    def test_valid_contact(self):
        contact = Contact(
            "Ada",
            None,
            "Lovelace",
            user_name="ada.l",
            emails=[Email("ada@example.com")],
            phone_numbers=[PhoneNumber("555-123-4567")],
        )

        assert validate_entity(contact) == []

    def test_invalid_contact_collects_every_error(self):
        contact = Contact(
            user_name="ab",
            emails=[Email("bad")],
            phone_numbers=[PhoneNumber("nope")],
        )

        assert validate_entity(contact) == [
            "The username is not in a valid format.",
            "One or more email addresses are not in a valid format.",
            "One or more phone numbers are not in a valid format.",
        ]

    def test_unchecked_negative_id_reported(self):
        assert "Id must be a non-negative number." in validate_entity(User(id=-1))

    def test_account_license(self):
        assert validate_entity(Account(license="d36ddcfd-5161-4c20-80aa-b312ef161433")) == []
        assert validate_entity(Account(license="not-a-guid")) == ["The license is not a valid GUID."]

    def test_email_and_phone(self):
        assert validate_entity(Email("a@example.com")) == []
        assert validate_entity(Email()) == ["The email address is not in a valid format."]
        assert validate_entity(PhoneNumber("x")) == ["The phone number is not in a valid format."]

    def test_password(self):
        assert validate_entity(Password("Passw0rd!")) == []
        assert validate_entity(Password()) == ["The password is not in a valid format."]
        assert validate_entity(Password("weak")) == ["The password is not in a valid format."]

    def test_database_connection(self):
        connection = DatabaseConnection("garbage", SupportedDatabase.POSTGRESQL)

        assert validate_entity(connection) == [
            "The connection string is not in a valid format for PostgreSQL database."
        ]


class TestEntityValidator:
    """Test the raising wrapper."""

    def test_ensure_valid_passes(self):
        EntityValidator().ensure_valid(Email("a@example.com"))

    def test_ensure_valid_raises_with_errors(self):
        with pytest.raises(DomainValidationError) as exc_info:
            EntityValidator().ensure_valid(Account(license="nope"))

        assert exc_info.value.errors == ["The license is not a valid GUID."]
        assert "Account is not valid" in str(exc_info.value)

    def test_is_valid(self):
        validator = EntityValidator()

        assert validator.is_valid(Email("a@example.com"))
        assert not validator.is_valid(Email("nope"))
