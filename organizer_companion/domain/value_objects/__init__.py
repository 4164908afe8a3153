"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (enum member or frozen dataclass)
- Pure Python (no framework dependencies)
"""

from organizer_companion.domain.value_objects.contact_type import ContactType
from organizer_companion.domain.value_objects.country import Country
from organizer_companion.domain.value_objects.pronoun import Pronoun
from organizer_companion.domain.value_objects.subdivisions import (
    CAProvince,
    MXState,
    NationalSubdivision,
    USState,
)
from organizer_companion.domain.value_objects.supported_database import (
    SupportedDatabase,
)

__all__ = [
    "ContactType",
    "Country",
    "Pronoun",
    "NationalSubdivision",
    "USState",
    "CAProvince",
    "MXState",
    "SupportedDatabase",
]
