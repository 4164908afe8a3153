"""Validation rules and the entity validation run."""

from organizer_companion.application.validation.entity_validator import (
    EntityValidator,
    validate_entity,
)
from organizer_companion.application.validation.rules import (
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
)

__all__ = [
    "EntityValidator",
    "validate_entity",
    "are_valid_emails",
    "are_valid_phone_numbers",
    "check_connection_string",
    "is_valid_connection_string_for_any",
    "is_valid_email",
    "is_valid_guid",
    "is_valid_password",
    "is_valid_phone_number",
    "is_valid_url",
    "is_valid_user_name",
]
