"""
Project mappers.

A task DTO nests its assignments without their task (task_id only), and an
assignment DTO nests its task, so casting either side terminates.
"""

from typing import Optional

from organizer_companion.application.dto.address import AddressDTO
from organizer_companion.application.dto.organization import GroupDTO
from organizer_companion.application.dto.person import ContactDTO
from organizer_companion.application.dto.project import (
    AssignmentDTO,
    ProjectAssignmentDTO,
    ProjectDTO,
    ProjectTaskDTO,
)
from organizer_companion.application.dto.sub_account import SubAccountDTO
from organizer_companion.application.mappers.address import address_to_domain
from organizer_companion.application.mappers.base import DTOMapper, timestamps, to_domain
from organizer_companion.application.mappers.person import ContactMapper
from organizer_companion.domain.casting import cast_all, cast_optional
from organizer_companion.domain.entities.assignment import Assignment
from organizer_companion.domain.entities.project import (
    Project,
    ProjectAssignment,
    ProjectTask,
)


def _completion(source) -> dict:
    return {
        "is_completed": source.is_completed,
        "due_date": source.due_date,
        "completed_date": source.completed_date,
    }


class ProjectAssignmentMapper(DTOMapper):
    entity_type = ProjectAssignment
    dto_type = ProjectAssignmentDTO

    def to_nested_dto(self, assignment: ProjectAssignment) -> ProjectAssignmentDTO:
        """DTO without the task object, for use inside a ProjectTaskDTO."""
        return ProjectAssignmentDTO(
            project_assignment_name=assignment.project_assignment_name,
            description=assignment.description,
            assignee_id=assignment.assignee_id,
            assignee=cast_optional(assignment.assignee, SubAccountDTO),
            location_id=assignment.location_id,
            location_type=assignment.location_type,
            location=cast_optional(assignment.location, AddressDTO),
            groups=cast_all(assignment.groups, GroupDTO),
            task_id=assignment.task_id,
            **_completion(assignment),
            **timestamps(assignment),
        )

    def to_dto(self, assignment: ProjectAssignment) -> ProjectAssignmentDTO:
        return self.to_nested_dto(assignment).model_copy(
            update={"task": cast_optional(assignment.task, ProjectTaskDTO)}
        )

    def to_domain(
        self, dto: ProjectAssignmentDTO, linked_entity=None, *, clock=None
    ) -> ProjectAssignment:
        """Rebuild an assignment; ``linked_entity`` is the task it belongs to."""
        task = linked_entity
        if task is None and dto.task is not None:
            task = to_domain(dto.task, clock=clock)
        return ProjectAssignment(
            dto.project_assignment_name,
            dto.description,
            to_domain(dto.assignee, clock=clock) if dto.assignee is not None else None,
            dto.location_id,
            dto.location_type,
            address_to_domain(dto.location, clock=clock) if dto.location is not None else None,
            [to_domain(group, clock=clock) for group in dto.groups],
            dto.task_id,
            task,
            clock=clock,
            **_completion(dto),
            **timestamps(dto),
        )


class ProjectTaskMapper(DTOMapper):
    entity_type = ProjectTask
    dto_type = ProjectTaskDTO

    def __init__(self, assignments: Optional[ProjectAssignmentMapper] = None):
        self.assignments = assignments or ProjectAssignmentMapper()

    def to_dto(self, task: ProjectTask) -> ProjectTaskDTO:
        return ProjectTaskDTO(
            project_task_name=task.project_task_name,
            description=task.description,
            assignments=[self.assignments.to_nested_dto(a) for a in task.assignments],
            **_completion(task),
            **timestamps(task),
        )

    def to_domain(self, dto: ProjectTaskDTO, linked_entity=None, *, clock=None) -> ProjectTask:
        task = ProjectTask(
            dto.project_task_name,
            dto.description,
            clock=clock,
            **_completion(dto),
            **timestamps(dto),
        )
        task.restore(
            assignments=[
                self.assignments.to_domain(assignment, task, clock=clock)
                for assignment in dto.assignments
            ]
        )
        return task


class ProjectMapper(DTOMapper):
    entity_type = Project
    dto_type = ProjectDTO

    def __init__(self, tasks: Optional[ProjectTaskMapper] = None):
        self.tasks = tasks or ProjectTaskMapper()

    def to_dto(self, project: Project) -> ProjectDTO:
        return ProjectDTO(
            project_name=project.project_name,
            description=project.description,
            groups=cast_all(project.groups, GroupDTO),
            tasks=cast_all(project.tasks, ProjectTaskDTO),
            **_completion(project),
            **timestamps(project),
        )

    def to_domain(self, dto: ProjectDTO, linked_entity=None, *, clock=None) -> Project:
        return Project(
            dto.project_name,
            dto.description,
            [to_domain(group, clock=clock) for group in dto.groups],
            [self.tasks.to_domain(task, clock=clock) for task in dto.tasks],
            clock=clock,
            **_completion(dto),
            **timestamps(dto),
        )


class AssignmentMapper(DTOMapper):
    entity_type = Assignment
    dto_type = AssignmentDTO

    def __init__(self, contacts: Optional[ContactMapper] = None):
        self.contacts = contacts or ContactMapper()

    def to_dto(self, assignment: Assignment) -> AssignmentDTO:
        return AssignmentDTO(
            name=assignment.name,
            description=assignment.description,
            assignees=cast_all(assignment.assignees, ContactDTO),
            contacts=cast_all(assignment.contacts, ContactDTO),
            **_completion(assignment),
            **timestamps(assignment),
        )

    def to_domain(self, dto: AssignmentDTO, linked_entity=None, *, clock=None) -> Assignment:
        return Assignment(
            dto.name,
            dto.description,
            [self.contacts.to_domain(contact, clock=clock) for contact in dto.assignees],
            [self.contacts.to_domain(contact, clock=clock) for contact in dto.contacts],
            clock=clock,
            **_completion(dto),
            **timestamps(dto),
        )
