"""
Pronoun Value Object - Preferred pronouns of a person, keyed by display form.
"""

from enum import Enum


class Pronoun(str, Enum):
    def __new__(cls, subject: str, object_form: str, possessive: str, display: str):
        obj = str.__new__(cls, display)
        obj._value_ = display
        obj.subject = subject
        obj.object_form = object_form
        obj.possessive = possessive
        return obj

    # Traditional pronouns
    HE_HIM = ("he", "him", "his", "he/him")
    SHE_HER = ("she", "her", "hers", "she/her")
    # Gender-neutral pronouns
    THEY_THEM = ("they", "them", "theirs", "they/them")
    # Neo-pronouns
    XE_XIR = ("xe", "xir", "xirs", "xe/xir")
    ZE_ZIR = ("ze", "zir", "zirs", "ze/zir")
    EY_EM = ("ey", "em", "eirs", "ey/em")
    FAE_FAER = ("fae", "faer", "faers", "fae/faer")
    VE_VER = ("ve", "ver", "vers", "ve/ver")
    PER_PER = ("per", "per", "pers", "per/per")
    # Other options
    PREFER_NOT_TO_SAY = ("", "", "", "Prefer not to say")
    OTHER = ("", "", "", "Other")

    @property
    def display(self) -> str:
        return self.value
