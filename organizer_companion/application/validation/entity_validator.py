"""
Validation run over a whole entity.

Setters only guard ids and a few references; the format rules (email
addresses, user names, licenses, phone numbers, passwords, connection strings)
are checked here on demand. validate_entity collects every violation;
EntityValidator.ensure_valid raises when there is at least one.
"""

from __future__ import annotations

import logging
from typing import Any, List

from organizer_companion.application.validation import rules
from organizer_companion.domain.entities import (
    Account,
    DatabaseConnection,
    Email,
    Entity,
    Group,
    Password,
    Person,
    PhoneNumber,
)
from organizer_companion.domain.exceptions import DomainValidationError

logger = logging.getLogger(__name__)


def _person_errors(person: Person) -> List[str]:
    errors = []
    if person.user_name is not None and not rules.is_valid_user_name(person.user_name):
        errors.append("The username is not in a valid format.")
    if not rules.are_valid_emails(email.email_address for email in person.emails or []):
        errors.append("One or more email addresses are not in a valid format.")
    if not rules.are_valid_phone_numbers(phone.phone for phone in person.phone_numbers or []):
        errors.append("One or more phone numbers are not in a valid format.")
    return errors


def validate_entity(entity: Any) -> List[str]:
    """Return the rule violations of an entity, empty when it is valid."""
    errors: List[str] = []

    if isinstance(entity, Entity) and entity.id < 0:
        errors.append("Id must be a non-negative number.")

    match entity:
        case Person():
            errors.extend(_person_errors(entity))
        case Email():
            if not entity.email_address or not rules.is_valid_email(entity.email_address):
                errors.append("The email address is not in a valid format.")
        case PhoneNumber():
            if not entity.phone or not rules.is_valid_phone_number(entity.phone):
                errors.append("The phone number is not in a valid format.")
        case Account():
            if not rules.is_valid_guid(entity.license):
                errors.append("The license is not a valid GUID.")
        case DatabaseConnection():
            is_valid, message = rules.check_connection_string(
                entity.database_type, entity.connection_string
            )
            if not is_valid:
                errors.append(message)
        case Password():
            if not entity.password_value or not rules.is_valid_password(
                entity.password_value
            ):
                errors.append("The password is not in a valid format.")
        case Group():
            if entity.account_id < 0:
                errors.append("Account Id must be a non-negative number.")

    if errors:
        logger.debug(
            "%s failed validation: %s",
            type(entity).__name__,
            "; ".join(errors),
            extra={"entity_type": type(entity).__name__},
        )
    return errors


class EntityValidator:
    """Runs validate_entity and turns violations into DomainValidationError."""

    def validate(self, entity: Any) -> List[str]:
        return validate_entity(entity)

    def is_valid(self, entity: Any) -> bool:
        return not validate_entity(entity)

    def ensure_valid(self, entity: Any) -> None:
        errors = validate_entity(entity)
        if errors:
            raise DomainValidationError(
                f"{type(entity).__name__} is not valid: {'; '.join(errors)}",
                errors=errors,
            )
