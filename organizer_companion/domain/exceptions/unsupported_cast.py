"""
UnsupportedCastError - Raised when an entity is cast to a type outside its
projection map.
"""


class UnsupportedCastError(TypeError):
    """Exception raised when a cast target is not supported by the source type."""

    def __init__(self, source_type: str, target_type: str):
        super().__init__(f"Cannot cast {source_type} to type {target_type}.")
        self.source_type = source_type
        self.target_type = target_type
