"""
APPLICATION LAYER - DTOs, the mappers between DTOs and entities, and the
validation run over domain entities

Importing the layer registers the mappers, so any code holding a DTO class
can cast entities to it.
"""

from organizer_companion.application import mappers  # noqa: F401
