"""
User Entity - An account holder of the organizer.

A user can be turned into a Contact. The conversion keeps the person data but
not the identity: the new contact has id 0 and no owner.
"""

from __future__ import annotations

from organizer_companion.domain.entities.base import TrackedField
from organizer_companion.domain.entities.contact import Contact
from organizer_companion.domain.entities.person import Person


class User(Person):
    id = TrackedField(0)

    def _projections(self):
        return {Contact: self._to_contact}

    def _to_contact(self) -> Contact:
        return Contact(
            id=0,
            emails=list(self.emails),
            phone_numbers=list(self.phone_numbers),
            addresses=list(self.addresses),
            linked_entity_id=0,
            linked_entity=None,
            created_date=self.created_date,
            modified_date=self.modified_date,
            clock=self.clock,
            **self.person_values(),
        )
