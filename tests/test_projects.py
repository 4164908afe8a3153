"""
Unit tests for projects, project tasks, project assignments, assignments and
passwords.

Run with: pytest tests/test_projects.py -v
"""

import json
from datetime import datetime, timezone

import pytest

from conftest import START
from organizer_companion.application.dto import (
    AssignmentDTO,
    ContactDTO,
    GroupDTO,
    ProjectAssignmentDTO,
    ProjectAssignmentDTOProtocol,
    ProjectDTO,
    ProjectTaskDTO,
    SubAccountDTO,
    USAddressDTO,
)
from organizer_companion.domain.entities import (
    Account,
    Assignment,
    Contact,
    Group,
    Password,
    Project,
    ProjectAssignment,
    ProjectTask,
    SubAccount,
    USAddress,
    User,
)
from organizer_companion.domain.exceptions import (
    InvalidLengthError,
    OutOfRangeError,
    UnsupportedCastError,
)

DUE = datetime(2024, 6, 30, tzinfo=timezone.utc)


class TestCompletion:
    """Test the completed flag and its date."""

    @pytest.mark.parametrize(
        "entity_type",
        [Project, ProjectTask, ProjectAssignment, Assignment],
        ids=lambda t: t.__name__,
    )
    def test_completing_stamps_completed_date(self, entity_type):
        entity = entity_type()

        entity.is_completed = True

        assert entity.completed_date > START
        assert entity.modified_date >= entity.completed_date

    def test_reopening_clears_completed_date(self):
        project = Project("Launch", "Ship it")
        project.is_completed = True

        project.is_completed = False

        assert project.completed_date is None
        assert project.is_completed is False

    def test_completed_date_kept_from_constructor(self):
        task = ProjectTask("Write", "Docs", is_completed=True, completed_date=DUE)

        assert task.completed_date == DUE
        assert task.modified_date is None


class TestNameRules:
    """Test the length rules of names and descriptions."""

    @pytest.mark.parametrize("value", ["", "   "])
    def test_project_name_cannot_be_blank(self, value):
        project = Project("Launch")

        with pytest.raises(InvalidLengthError, match="ProjectName must be at least 1 character long."):
            project.project_name = value

        assert project.project_name == "Launch"
        assert project.modified_date is None

    def test_project_name_too_long(self):
        with pytest.raises(InvalidLengthError, match="ProjectName cannot exceed 100 characters."):
            Project("x" * 101)

    def test_task_description_too_long(self):
        task = ProjectTask("Write")

        with pytest.raises(InvalidLengthError, match="Description cannot exceed 1000 characters."):
            task.description = "x" * 1001

    def test_project_assignment_name_range(self):
        assignment = ProjectAssignment("Review")

        with pytest.raises(InvalidLengthError, match="between 1 and 100 characters"):
            assignment.project_assignment_name = ""
        with pytest.raises(InvalidLengthError, match="between 1 and 100 characters"):
            assignment.project_assignment_name = "x" * 101

    def test_assignment_name_range(self):
        with pytest.raises(InvalidLengthError, match="Name must be between 1 and 100 characters long."):
            Assignment("")

    def test_invalid_length_error_is_value_error(self):
        with pytest.raises(ValueError):
            Assignment("x" * 101)


class TestProjectAssignment:
    """Test project assignment references."""

    def test_assignee_id_is_derived(self):
        assignment = ProjectAssignment("Review")
        assert assignment.assignee_id is None

        assignment.assignee = SubAccount(User(id=2), id=9)

        assert assignment.assignee_id == 9

    def test_task_id_defaults_to_task(self):
        task = ProjectTask("Write", id=4)

        assert ProjectAssignment("Review", task=task).task_id == 4

    @pytest.mark.parametrize("field", ["location_id", "task_id"])
    def test_reference_ids_must_be_non_negative(self, field):
        assignment = ProjectAssignment("Review")

        with pytest.raises(OutOfRangeError, match="Id must be a non-negative number."):
            setattr(assignment, field, -1)

        setattr(assignment, field, None)
        assert getattr(assignment, field) is None

    def test_string_form(self):
        assignment = ProjectAssignment("Review", id=3)

        assert str(assignment) == "ProjectAssignment.Id:3.Name:Review.IsCompleted:False"

    def test_json_omits_missing_assignee_and_location(self):
        data = json.loads(ProjectAssignment("Review").to_json())

        assert "assignee" not in data
        assert "locationId" not in data
        assert data["projectAssignmentName"] == "Review"
        assert data["completedDate"] is None

    def test_json_of_task_cycle_terminates(self):
        task = ProjectTask("Write", id=1)
        assignment = ProjectAssignment("Review", task=task)
        task.assignments = [assignment]

        data = json.loads(task.to_json())

        assert data["assignments"][0]["task"] is None
        assert data["assignments"][0]["taskId"] == 1


class TestProjectCasting:
    """Test project DTO projections."""

    def test_project_graph_casts(self):
        task = ProjectTask("Write", "Docs", id=2, due_date=DUE)
        assignment = ProjectAssignment(
            "Review",
            assignee=SubAccount(User(id=5), id=6),
            location=USAddress("1 Main St", id=7),
            groups=[Group("Editors", id=8)],
            task=task,
            id=3,
        )
        task.assignments = [assignment]
        project = Project("Launch", "Ship it", groups=[Group("Team")], tasks=[task], id=1)

        dto = project.cast(ProjectDTO)

        nested = dto.tasks[0].assignments[0]
        assert dto.project_name == "Launch"
        assert dto.tasks[0].due_date == DUE
        assert nested.task is None
        assert nested.task_id == 2
        assert nested.assignee_id == 6
        assert isinstance(nested.location, USAddressDTO)
        assert isinstance(nested.groups[0], GroupDTO)

    def test_assignment_dto_carries_its_task(self):
        task = ProjectTask("Write", id=2)
        assignment = ProjectAssignment("Review", task=task)
        task.assignments = [assignment]

        dto = assignment.cast(ProjectAssignmentDTOProtocol)

        assert type(dto) is ProjectAssignmentDTO
        assert isinstance(dto.task, ProjectTaskDTO)
        assert dto.task.assignments[0].task is None

    def test_project_rebuilt_from_json(self):
        task = ProjectTask("Write", "Docs", id=2)
        task.assignments = [
            ProjectAssignment("Review", assignee=SubAccount(User(id=5), id=6), task=task)
        ]
        project = Project("Launch", "Ship it", tasks=[task], id=1)

        parsed = ProjectDTO.model_validate_json(project.cast(ProjectDTO).to_json())
        rebuilt = parsed.cast(Project)

        rebuilt_task = rebuilt.tasks[0]
        assert rebuilt.project_name == "Launch"
        assert rebuilt_task.assignments[0].task is rebuilt_task
        assert rebuilt_task.assignments[0].assignee.user_id == 5
        assert isinstance(parsed.tasks[0].assignments[0].assignee, SubAccountDTO)

    def test_assignment_round_trip(self):
        assignment = Assignment(
            "Call back",
            assignees=[Contact("Ada", None, "Lovelace")],
            contacts=[Contact("Grace", None, "Hopper")],
            due_date=DUE,
        )

        dto = assignment.cast(AssignmentDTO)
        rebuilt = dto.cast(Assignment)

        assert isinstance(dto.assignees[0], ContactDTO)
        assert rebuilt.assignees[0].full_name == "Ada Lovelace"
        assert rebuilt.contacts[0].full_name == "Grace Hopper"
        assert rebuilt.due_date == DUE


class TestPassword:
    """Test the password entity."""

    def test_account_id_defaults_to_account(self):
        assert Password("Secr3t!", account=Account(id=4)).account_id == 4
        assert Password().account_id == 0

    def test_value_not_written_to_json(self):
        data = json.loads(Password("Secr3t!", "pet name").to_json())

        assert "passwordValue" not in data
        assert data["passwordHint"] == "pet name"

    def test_has_no_cast_targets(self):
        password = Password("Secr3t!")

        assert password.supported_cast_targets() == ()
        with pytest.raises(UnsupportedCastError):
            password.cast(User)

    def test_mutation_stamps_modified_date(self):
        password = Password("Secr3t!")

        password.password_hint = "hint"

        assert password.modified_date is not None
