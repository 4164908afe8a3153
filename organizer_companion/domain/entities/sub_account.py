"""
SubAccount Entity - Ties an owner (user, organization or anonymous user) to
an account.

The owner goes through the same linked-entity resolution as emails, with its
own closed set of dedicated kinds.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from organizer_companion.domain.entities.base import Entity, TrackedField
from organizer_companion.domain.linking import LinkedEntityHost, OwnerKind
from organizer_companion.domain.ports.clock import Clock


class SubAccount(LinkedEntityHost, Entity):
    LINK_KINDS = frozenset(
        {OwnerKind.USER, OwnerKind.ORGANIZATION, OwnerKind.ANONYMOUS_USER}
    )

    _JSON_COMPUTED = ("linked_entity", "linked_entity_id", "linked_entity_type")

    account_id = TrackedField()
    account = TrackedField()

    def __init__(
        self,
        linked_entity: Any = None,
        account: Any = None,
        account_id: Optional[int] = None,
        *,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        self._init_link(linked_entity)
        self._account = account
        if account_id is None and account is not None:
            account_id = account.id
        self._account_id = account_id

    @property
    def user(self) -> Any:
        return self._slot(OwnerKind.USER)

    @property
    def user_id(self) -> Optional[int]:
        return self._slot_id(OwnerKind.USER)

    @property
    def organization(self) -> Any:
        return self._slot(OwnerKind.ORGANIZATION)

    @property
    def organization_id(self) -> Optional[int]:
        return self._slot_id(OwnerKind.ORGANIZATION)

    @property
    def anonymous_user(self) -> Any:
        return self._slot(OwnerKind.ANONYMOUS_USER)

    @property
    def anonymous_user_id(self) -> Optional[int]:
        return self._slot_id(OwnerKind.ANONYMOUS_USER)

    def __str__(self) -> str:
        return f"SubAccount.Id:{self.id}.LinkedEntityType:{self.linked_entity_type}"
