"""
Domain entities.

Import order matters only for readers: owners (User, Contact, Organization,
SubAccount) depend on the owned values (Email, PhoneNumber, addresses).
"""

from organizer_companion.domain.entities.base import (
    Entity,
    TrackedField,
    non_negative,
    text_length,
)
from organizer_companion.domain.entities.capabilities import CastResult, DomainEntity
from organizer_companion.domain.entities.email import Email
from organizer_companion.domain.entities.phone_number import PhoneNumber
from organizer_companion.domain.entities.addresses import (
    Address,
    CAAddress,
    MXAddress,
    USAddress,
)
from organizer_companion.domain.entities.person import Person
from organizer_companion.domain.entities.contact import Contact
from organizer_companion.domain.entities.user import User
from organizer_companion.domain.entities.feature import Feature
from organizer_companion.domain.entities.account_feature import AccountFeature
from organizer_companion.domain.entities.account import Account
from organizer_companion.domain.entities.sub_account import SubAccount
from organizer_companion.domain.entities.organization import Organization
from organizer_companion.domain.entities.group import Group
from organizer_companion.domain.entities.database_connection import DatabaseConnection
from organizer_companion.domain.entities.anonymous_user import AnonymousUser
from organizer_companion.domain.entities.password import Password
from organizer_companion.domain.entities.project import Project, ProjectAssignment, ProjectTask
from organizer_companion.domain.entities.assignment import Assignment

__all__ = [
    "Entity",
    "TrackedField",
    "non_negative",
    "text_length",
    "DomainEntity",
    "CastResult",
    "Email",
    "PhoneNumber",
    "Address",
    "USAddress",
    "CAAddress",
    "MXAddress",
    "Person",
    "Contact",
    "User",
    "Feature",
    "AccountFeature",
    "Account",
    "SubAccount",
    "Organization",
    "Group",
    "DatabaseConnection",
    "AnonymousUser",
    "Password",
    "Project",
    "ProjectTask",
    "ProjectAssignment",
    "Assignment",
]
