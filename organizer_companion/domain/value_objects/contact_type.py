"""
ContactType Value Object - Category of an email, phone number or address.
"""

from enum import Enum


class ContactType(str, Enum):
    HOME = "Home"
    WORK = "Work"
    MOBILE = "Mobile"
    CELL = "Cell"
    FAX = "Fax"
    BILLING = "Billing"
    OTHER = "Other"
