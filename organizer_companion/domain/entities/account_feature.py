"""
AccountFeature Entity - Join between an account and one of its features.

account_id and feature_id are read off the joined entities (0 when absent).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from organizer_companion.domain.entities.base import Entity, TrackedField
from organizer_companion.domain.exceptions import OutOfRangeError
from organizer_companion.domain.ports.clock import Clock


def _non_negative_ref(message: str):
    def check(field_name: str, value: Any) -> None:
        if value is not None and value.id < 0:
            raise OutOfRangeError(field_name, message)

    return check


class AccountFeature(Entity):
    _JSON_COMPUTED = ("account_id", "feature_id")
    _JSON_EXCLUDE = frozenset({"account", "feature"})

    account = TrackedField(
        validator=_non_negative_ref("AccountId must be a non-negative number.")
    )
    feature = TrackedField(
        validator=_non_negative_ref("FeatureId must be a non-negative number.")
    )

    def __init__(
        self,
        account: Any = None,
        feature: Any = None,
        *,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        self._check("account", account)
        self._check("feature", feature)
        self._account = account
        self._feature = feature

    @property
    def account_id(self) -> int:
        return self.account.id if self.account is not None else 0

    @property
    def feature_id(self) -> int:
        return self.feature.id if self.feature is not None else 0

    def __str__(self) -> str:
        return f"AccountFeature.Id:{self.id}.AccountId:{self.account_id}.FeatureId:{self.feature_id}"
