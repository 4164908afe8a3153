"""
OutOfRangeError - Raised by setters when a value violates a documented range.
"""


class OutOfRangeError(ValueError):
    """Exception raised before any state change when a value is out of range."""

    def __init__(self, field_name: str, message: str):
        super().__init__(f"{message} (Parameter '{field_name}')")
        self.field_name = field_name
        self.message = message
