"""
LINKING - Single-owner association for emails, phone numbers and addresses
"""

from organizer_companion.domain.linking.linked_entity import (
    Link,
    LinkedEntityHost,
    OwnedValue,
    OwnerKind,
    classify,
    resolve_link,
)

__all__ = [
    "Link",
    "LinkedEntityHost",
    "OwnedValue",
    "OwnerKind",
    "classify",
    "resolve_link",
]
