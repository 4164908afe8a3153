"""
Organizer Companion core - domain entities, DTO projections and casting.
"""

__version__ = "0.1.0"
