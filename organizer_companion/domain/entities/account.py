"""
Account Entity - A licensed account with features and sub-accounts.

accounts is nullable and stays None through casts and JSON (where it is
omitted).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from organizer_companion.domain.entities.account_feature import AccountFeature
from organizer_companion.domain.entities.base import Entity, TrackedField
from organizer_companion.domain.ports.clock import Clock


class Account(Entity):
    _JSON_OMIT_IF_NONE = frozenset({"accounts"})

    account_name = TrackedField()
    account_number = TrackedField()
    license = TrackedField()
    features = TrackedField()
    accounts = TrackedField()

    def __init__(
        self,
        account_name: Optional[str] = None,
        account_number: Optional[str] = None,
        license: Optional[str] = None,
        features: Optional[list[AccountFeature]] = None,
        accounts: Optional[list[Any]] = None,
        *,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        self._account_name = account_name
        self._account_number = account_number
        self._license = license
        self._features = features if features is not None else []
        self._accounts = accounts

    def __str__(self) -> str:
        return f"Account.Id:{self.id}.AccountName:{self.account_name}"
