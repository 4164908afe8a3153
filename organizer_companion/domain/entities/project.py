"""
Project Entities - A project, its tasks and the assignments inside each task.

A task and its assignments reference each other; JSON writes the inner
back-reference as null and DTO projections carry the task only by id on
assignments nested inside a task.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from organizer_companion.domain.entities.base import (
    Entity,
    TrackedField,
    non_negative,
    text_length,
)
from organizer_companion.domain.entities.completion import Completable
from organizer_companion.domain.ports.clock import Clock

_DESCRIPTION_TOO_LONG = "Description cannot exceed 1000 characters."


class Project(Completable, Entity):
    _JSON_COMPUTED = ("completed_date",)

    project_name = TrackedField(
        validator=text_length(
            100,
            "ProjectName cannot exceed 100 characters.",
            min_length=1,
            too_short="ProjectName must be at least 1 character long.",
            required=True,
            blank_is_empty=True,
        )
    )
    description = TrackedField(
        validator=text_length(
            1000,
            _DESCRIPTION_TOO_LONG,
            min_length=1,
            too_short="Description must be at least 1 character long.",
            required=True,
            blank_is_empty=True,
        )
    )
    groups = TrackedField()
    tasks = TrackedField()

    def __init__(
        self,
        project_name: Optional[str] = None,
        description: Optional[str] = None,
        groups: Optional[list[Any]] = None,
        tasks: Optional[list[ProjectTask]] = None,
        is_completed: bool = False,
        due_date: Optional[datetime] = None,
        completed_date: Optional[datetime] = None,
        *,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        self._check("project_name", project_name)
        self._check("description", description)
        self._project_name = project_name
        self._description = description
        self._groups = groups if groups is not None else []
        self._tasks = tasks if tasks is not None else []
        self._is_completed = is_completed
        self._due_date = due_date
        self._completed_date = completed_date

    def __str__(self) -> str:
        return f"Project.Id:{self.id}.Name:{self.project_name}.IsCompleted:{self.is_completed}"


class ProjectTask(Completable, Entity):
    _JSON_COMPUTED = ("completed_date",)

    project_task_name = TrackedField(
        validator=text_length(
            100,
            "Name cannot exceed 100 characters.",
            min_length=1,
            too_short="Name must be at least 1 character long.",
            required=True,
            blank_is_empty=True,
        )
    )
    description = TrackedField(
        validator=text_length(
            1000,
            _DESCRIPTION_TOO_LONG,
            min_length=1,
            too_short="Description must be at least 1 character long.",
            required=True,
            blank_is_empty=True,
        )
    )
    assignments = TrackedField()

    def __init__(
        self,
        project_task_name: Optional[str] = None,
        description: Optional[str] = None,
        assignments: Optional[list[ProjectAssignment]] = None,
        is_completed: bool = False,
        due_date: Optional[datetime] = None,
        completed_date: Optional[datetime] = None,
        *,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        self._check("project_task_name", project_task_name)
        self._check("description", description)
        self._project_task_name = project_task_name
        self._description = description
        self._assignments = assignments if assignments is not None else []
        self._is_completed = is_completed
        self._due_date = due_date
        self._completed_date = completed_date

    def __str__(self) -> str:
        return f"ProjectTask.Id:{self.id}.Name:{self.project_task_name}.IsCompleted:{self.is_completed}"


class ProjectAssignment(Completable, Entity):
    _JSON_COMPUTED = ("assignee_id", "completed_date")
    _JSON_OMIT_IF_NONE = frozenset(
        {"assignee", "assignee_id", "location_id", "location_type", "location"}
    )

    project_assignment_name = TrackedField(
        validator=text_length(
            100,
            "ProjectAssignmentName must be between 1 and 100 characters long.",
            min_length=1,
        )
    )
    description = TrackedField(validator=text_length(1000, _DESCRIPTION_TOO_LONG))
    assignee = TrackedField()
    location_id = TrackedField(
        validator=non_negative("Location Id must be a non-negative number.", optional=True)
    )
    location_type = TrackedField()
    location = TrackedField()
    groups = TrackedField()
    task_id = TrackedField(
        validator=non_negative("Task Id must be a non-negative number.", optional=True)
    )
    task = TrackedField()

    def __init__(
        self,
        project_assignment_name: Optional[str] = None,
        description: Optional[str] = None,
        assignee: Any = None,
        location_id: Optional[int] = None,
        location_type: Optional[str] = None,
        location: Any = None,
        groups: Optional[list[Any]] = None,
        task_id: Optional[int] = None,
        task: Optional[ProjectTask] = None,
        is_completed: bool = False,
        due_date: Optional[datetime] = None,
        completed_date: Optional[datetime] = None,
        *,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        for name, value in (
            ("project_assignment_name", project_assignment_name),
            ("description", description),
            ("location_id", location_id),
            ("task_id", task_id),
        ):
            self._check(name, value)
        if task_id is None and task is not None:
            task_id = task.id
        self._project_assignment_name = project_assignment_name
        self._description = description
        self._assignee = assignee
        self._location_id = location_id
        self._location_type = location_type
        self._location = location
        self._groups = groups if groups is not None else []
        self._task_id = task_id
        self._task = task
        self._is_completed = is_completed
        self._due_date = due_date
        self._completed_date = completed_date

    @property
    def assignee_id(self) -> Optional[int]:
        return self.assignee.id if self.assignee is not None else None

    def __str__(self) -> str:
        return (
            f"ProjectAssignment.Id:{self.id}.Name:{self.project_assignment_name}"
            f".IsCompleted:{self.is_completed}"
        )
