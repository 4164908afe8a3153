"""
Validation rules for single values.

A None value passes the single-value checks (an absent optional field is not
malformed); an empty string does not. List checks reject empty or missing
entries.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from organizer_companion.application.validation.patterns import (
    CONNECTION_STRING_REGEXES,
    EMAIL_REGEX,
    GUID_REGEX,
    NANP_PHONE_NUMBER_REGEX,
    PASSWORD_REGEX,
    URL_REGEX,
    USER_NAME_REGEX,
)
from organizer_companion.domain.value_objects import SupportedDatabase


def _matches(regex, value: Optional[str]) -> bool:
    if value is None:
        return True
    return regex.fullmatch(value) is not None


def is_valid_email(value: Optional[str]) -> bool:
    return _matches(EMAIL_REGEX, value)


def is_valid_guid(value: Optional[str]) -> bool:
    return _matches(GUID_REGEX, value)


def is_valid_password(value: Optional[str]) -> bool:
    return _matches(PASSWORD_REGEX, value)


def is_valid_user_name(value: Optional[str]) -> bool:
    return _matches(USER_NAME_REGEX, value)


def is_valid_url(value: Optional[str]) -> bool:
    return _matches(URL_REGEX, value)


def is_valid_phone_number(value: Optional[str]) -> bool:
    return _matches(NANP_PHONE_NUMBER_REGEX, value)


def are_valid_emails(addresses: Iterable[Optional[str]]) -> bool:
    return all(address and is_valid_email(address) for address in addresses)


def are_valid_phone_numbers(numbers: Iterable[Optional[str]]) -> bool:
    return all(number and is_valid_phone_number(number) for number in numbers)


def check_connection_string(
    database_type: Optional[SupportedDatabase], connection_string: Optional[str]
) -> Tuple[bool, str]:
    """
    Check a connection string against the format of its database.

    Returns (is_valid, error_message).
    """
    if database_type is None:
        return False, "Database type must be specified."
    if not connection_string or not connection_string.strip():
        return False, "Connection string cannot be null or empty."

    regex = CONNECTION_STRING_REGEXES.get(database_type)
    if regex is None:
        return False, f"Unsupported database type: {database_type.value}"
    if regex.fullmatch(connection_string) is None:
        return (
            False,
            f"The connection string is not in a valid format for {database_type.value} database.",
        )
    return True, ""


def is_valid_connection_string_for_any(connection_string: Optional[str]) -> bool:
    if not connection_string or not connection_string.strip():
        return False
    return any(
        regex.fullmatch(connection_string) is not None
        for regex in CONNECTION_STRING_REGEXES.values()
    )
