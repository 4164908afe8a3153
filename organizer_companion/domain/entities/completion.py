"""
Completion tracking for projects, tasks and assignments.

Marking an item completed stamps completed_date from the entity's clock;
clearing the flag clears the date.
"""

from organizer_companion.domain.entities.base import TrackedField


class CompletionField(TrackedField):
    def __init__(self):
        super().__init__(False)

    def __set__(self, obj, value):
        obj.__dict__["_completed_date"] = obj.clock.now() if value else None
        super().__set__(obj, value)


class Completable:
    """Mixin exposing the read-only completed_date set by CompletionField."""

    is_completed = CompletionField()
    due_date = TrackedField()

    @property
    def completed_date(self):
        return self.__dict__.get("_completed_date")
