"""
MissingNamePartError - Raised when a full name is read from partial name data.
"""


class MissingNamePartError(ValueError):
    """Exception raised when first and/or last name is missing but some part is set."""

    def __init__(
        self, message: str = "FirstName and/or LastName properties cannot be null."
    ):
        super().__init__(message)
