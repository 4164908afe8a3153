"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised synchronously by entities and the cast engine.
None of them is retried; callers surface them directly.
"""

from organizer_companion.domain.exceptions.unsupported_cast import UnsupportedCastError
from organizer_companion.domain.exceptions.out_of_range import OutOfRangeError
from organizer_companion.domain.exceptions.invalid_length import InvalidLengthError
from organizer_companion.domain.exceptions.missing_name_part import MissingNamePartError
from organizer_companion.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "UnsupportedCastError",
    "OutOfRangeError",
    "InvalidLengthError",
    "MissingNamePartError",
    "DomainValidationError",
]
