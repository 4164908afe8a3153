"""
SupportedDatabase Value Object - Database engines an account can connect to.
"""

from enum import Enum
from typing import Optional


class SupportedDatabase(str, Enum):
    def __new__(cls, display_name: str, default_port: Optional[int]):
        obj = str.__new__(cls, display_name)
        obj._value_ = display_name
        # None for file-based engines
        obj.default_port = default_port
        return obj

    SQLITE = ("SQLite", None)
    SQL_SERVER = ("Microsoft SQL Server", 1433)
    MYSQL = ("MySQL", 3306)
    POSTGRESQL = ("PostgreSQL", 5432)

    @property
    def display_name(self) -> str:
        return self.value
