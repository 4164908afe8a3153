"""Account, feature and database connection DTOs.

AccountDTO refers to SubAccountDTO by name; the reference is resolved once
sub_account.py has defined it.
"""

from typing import Optional

from organizer_companion.application.dto.base import EntityDTO
from organizer_companion.application.dto.protocols import (
    AccountDTOProtocol,
    DatabaseConnectionDTOProtocol,
    FeatureDTOProtocol,
)
from organizer_companion.domain.value_objects import SupportedDatabase


class FeatureDTO(EntityDTO):
    interfaces = (FeatureDTOProtocol,)

    feature_name: Optional[str] = None
    is_enabled: bool = False

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.feature import Feature

        return Feature


class AccountDTO(EntityDTO):
    interfaces = (AccountDTOProtocol,)

    account_name: Optional[str] = None
    account_number: Optional[str] = None
    license: Optional[str] = None
    features: list[FeatureDTO] = []
    accounts: Optional[list["SubAccountDTO"]] = None

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.account import Account

        return Account


class DatabaseConnectionDTO(EntityDTO):
    interfaces = (DatabaseConnectionDTOProtocol,)

    connection_string: Optional[str] = None
    database_type: Optional[SupportedDatabase] = None
    account_id: Optional[int] = None
    account: Optional[AccountDTO] = None

    @classmethod
    def domain_type(cls):
        from organizer_companion.domain.entities.database_connection import (
            DatabaseConnection,
        )

        return DatabaseConnection
