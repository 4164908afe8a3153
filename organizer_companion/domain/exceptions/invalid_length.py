"""
InvalidLengthError - Raised by setters when text is shorter or longer than allowed.
"""


class InvalidLengthError(ValueError):
    """Exception raised before any state change when a text value has the wrong length."""

    def __init__(self, field_name: str, message: str):
        super().__init__(f"{message} (Parameter '{field_name}')")
        self.field_name = field_name
        self.message = message
