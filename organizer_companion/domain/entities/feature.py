"""
Feature Entity - A switchable capability that accounts can carry.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from organizer_companion.domain.entities.base import Entity, TrackedField
from organizer_companion.domain.ports.clock import Clock


class Feature(Entity):
    feature_name = TrackedField()
    is_enabled = TrackedField(False)

    def __init__(
        self,
        feature_name: Optional[str] = None,
        is_enabled: bool = False,
        *,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        self._feature_name = feature_name
        self._is_enabled = is_enabled

    def __str__(self) -> str:
        return f"Feature.Id:{self.id}.FeatureName:{self.feature_name}"
