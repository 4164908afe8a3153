"""Project, project task, project assignment and assignment DTOs.

Assignments nested inside a ProjectTaskDTO carry their task only as task_id.
"""

from datetime import datetime
from typing import Optional

from organizer_companion.application.dto.address import AnyAddressDTO
from organizer_companion.application.dto.base import EntityDTO
from organizer_companion.application.dto.organization import GroupDTO
from organizer_companion.application.dto.person import ContactDTO
from organizer_companion.application.dto.protocols import (
    AssignmentDTOProtocol,
    ProjectAssignmentDTOProtocol,
    ProjectDTOProtocol,
    ProjectTaskDTOProtocol,
)
from organizer_companion.application.dto.sub_account import SubAccountDTO


class CompletableDTO(EntityDTO):
    is_completed: bool = False
    due_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None


class ProjectAssignmentDTO(CompletableDTO):
    interfaces = (ProjectAssignmentDTOProtocol,)

    project_assignment_name: Optional[str] = None
    description: Optional[str] = None
    assignee_id: Optional[int] = None
    assignee: Optional[SubAccountDTO] = None
    location_id: Optional[int] = None
    location_type: Optional[str] = None
    location: Optional[AnyAddressDTO] = None
    groups: list[GroupDTO] = []
    task_id: Optional[int] = None
    task: Optional["ProjectTaskDTO"] = None

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.project import ProjectAssignment

        return ProjectAssignment


class ProjectTaskDTO(CompletableDTO):
    interfaces = (ProjectTaskDTOProtocol,)

    project_task_name: Optional[str] = None
    description: Optional[str] = None
    assignments: list[ProjectAssignmentDTO] = []

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.project import ProjectTask

        return ProjectTask


ProjectAssignmentDTO.model_rebuild()


class ProjectDTO(CompletableDTO):
    interfaces = (ProjectDTOProtocol,)

    project_name: Optional[str] = None
    description: Optional[str] = None
    groups: list[GroupDTO] = []
    tasks: list[ProjectTaskDTO] = []

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.project import Project

        return Project


class AssignmentDTO(CompletableDTO):
    interfaces = (AssignmentDTOProtocol,)

    name: Optional[str] = None
    description: Optional[str] = None
    assignees: list[ContactDTO] = []
    contacts: list[ContactDTO] = []

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.assignment import Assignment

        return Assignment
