"""
Linked-entity resolution for values owned by exactly one entity.

An email, phone number or address belongs to a single owner. The owner is
stored as one Link whose kind is either a dedicated kind of the host (User,
Contact, Organization, SubAccount for the leaf hosts) or OTHER for any other
entity. Holding a single Link makes "at most one slot occupied" hold by
construction; id and type name are read off the link on every access.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Optional

logger = logging.getLogger(__name__)


class OwnerKind(str, Enum):
    USER = "User"
    CONTACT = "Contact"
    ORGANIZATION = "Organization"
    SUB_ACCOUNT = "SubAccount"
    ANONYMOUS_USER = "AnonymousUser"
    OTHER = "Other"


@dataclass(frozen=True)
class Link:
    kind: OwnerKind
    entity: Any

    @property
    def entity_id(self) -> Optional[int]:
        return self.entity.id

    @property
    def entity_type(self) -> str:
        return type(self.entity).__name__


def classify(entity: Any) -> OwnerKind:
    # Imported here: the owner types themselves hold linked values
    from organizer_companion.domain.entities.anonymous_user import AnonymousUser
    from organizer_companion.domain.entities.contact import Contact
    from organizer_companion.domain.entities.organization import Organization
    from organizer_companion.domain.entities.sub_account import SubAccount
    from organizer_companion.domain.entities.user import User

    match entity:
        case User():
            return OwnerKind.USER
        case Contact():
            return OwnerKind.CONTACT
        case Organization():
            return OwnerKind.ORGANIZATION
        case SubAccount():
            return OwnerKind.SUB_ACCOUNT
        case AnonymousUser():
            return OwnerKind.ANONYMOUS_USER
        case _:
            return OwnerKind.OTHER


def resolve_link(entity: Any, dedicated: frozenset[OwnerKind]) -> Optional[Link]:
    """Build the link for an owner, or None when there is no owner.

    Owner ids are not range-checked here.
    """
    if entity is None:
        return None

    kind = classify(entity)
    if kind not in dedicated:
        kind = OwnerKind.OTHER

    logger.debug(
        "Linked %s as %s",
        type(entity).__name__,
        kind.value,
        extra={"entity_type": type(entity).__name__},
    )
    return Link(kind, entity)


class LinkedEntityHost:
    """Mixin for entities owned by one linked entity.

    Must be combined with Entity (uses touch()).
    """

    LINK_KINDS: ClassVar[frozenset[OwnerKind]] = frozenset()

    _link: Optional[Link] = None

    def _init_link(self, linked_entity: Any) -> None:
        self._link = resolve_link(linked_entity, self.LINK_KINDS)

    @property
    def link(self) -> Optional[Link]:
        return self._link

    @property
    def linked_entity(self) -> Any:
        return self._link.entity if self._link is not None else None

    @linked_entity.setter
    def linked_entity(self, value: Any) -> None:
        self._link = resolve_link(value, self.LINK_KINDS)
        self.touch()

    @property
    def linked_entity_id(self) -> Optional[int]:
        return self._link.entity_id if self._link is not None else None

    @property
    def linked_entity_type(self) -> Optional[str]:
        return self._link.entity_type if self._link is not None else None

    def _slot(self, kind: OwnerKind) -> Any:
        if self._link is not None and self._link.kind is kind:
            return self._link.entity
        return None

    def _slot_id(self, kind: OwnerKind) -> Optional[int]:
        entity = self._slot(kind)
        return entity.id if entity is not None else None

    @property
    def other_entity(self) -> Any:
        """Fallback slot: an owner outside the host's dedicated kinds."""
        return self._slot(OwnerKind.OTHER)


class OwnedValue(LinkedEntityHost):
    """Linked-entity host for emails, phone numbers and addresses."""

    LINK_KINDS = frozenset(
        {
            OwnerKind.USER,
            OwnerKind.CONTACT,
            OwnerKind.ORGANIZATION,
            OwnerKind.SUB_ACCOUNT,
        }
    )

    _JSON_COMPUTED = ("linked_entity", "linked_entity_id", "linked_entity_type")

    @property
    def user(self) -> Any:
        return self._slot(OwnerKind.USER)

    @property
    def user_id(self) -> Optional[int]:
        return self._slot_id(OwnerKind.USER)

    @property
    def contact(self) -> Any:
        return self._slot(OwnerKind.CONTACT)

    @property
    def contact_id(self) -> Optional[int]:
        return self._slot_id(OwnerKind.CONTACT)

    @property
    def organization(self) -> Any:
        return self._slot(OwnerKind.ORGANIZATION)

    @property
    def organization_id(self) -> Optional[int]:
        return self._slot_id(OwnerKind.ORGANIZATION)

    @property
    def sub_account(self) -> Any:
        return self._slot(OwnerKind.SUB_ACCOUNT)

    @property
    def sub_account_id(self) -> Optional[int]:
        return self._slot_id(OwnerKind.SUB_ACCOUNT)
