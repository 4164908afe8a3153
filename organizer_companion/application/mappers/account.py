"""
Account mappers: features, accounts, sub-accounts and database connections.

Sub-accounts nested in an AccountDTO carry ids only, not their account or
owner objects, so casting an account graph always terminates.
"""

from typing import Any, Optional

from organizer_companion.application.dto.account import (
    AccountDTO,
    DatabaseConnectionDTO,
    FeatureDTO,
)
from organizer_companion.application.dto.anonymous_user import AnonymousUserDTO
from organizer_companion.application.dto.organization import OrganizationDTO
from organizer_companion.application.dto.person import UserDTO
from organizer_companion.application.dto.sub_account import SubAccountDTO
from organizer_companion.application.mappers.base import DTOMapper, timestamps, to_domain
from organizer_companion.domain.casting import cast_all, cast_optional
from organizer_companion.domain.entities.account import Account
from organizer_companion.domain.entities.account_feature import AccountFeature
from organizer_companion.domain.entities.database_connection import DatabaseConnection
from organizer_companion.domain.entities.feature import Feature
from organizer_companion.domain.entities.sub_account import SubAccount
from organizer_companion.domain.linking import OwnerKind
from organizer_companion.domain.ports.clock import Clock

_OWNER_DTOS = {
    OwnerKind.USER: UserDTO,
    OwnerKind.ORGANIZATION: OrganizationDTO,
    OwnerKind.ANONYMOUS_USER: AnonymousUserDTO,
}


class FeatureMapper(DTOMapper):
    entity_type = Feature
    dto_type = FeatureDTO

    def to_dto(self, feature: Feature) -> FeatureDTO:
        return FeatureDTO(
            feature_name=feature.feature_name,
            is_enabled=feature.is_enabled,
            **timestamps(feature),
        )

    def to_domain(self, dto: FeatureDTO, linked_entity=None, *, clock=None) -> Feature:
        return Feature(dto.feature_name, dto.is_enabled, clock=clock, **timestamps(dto))


class AccountFeatureMapper(DTOMapper):
    """Casts the join as the FeatureDTO of its feature, under the join's id."""

    entity_type = AccountFeature
    dto_type = FeatureDTO

    def __init__(self, features: Optional[FeatureMapper] = None):
        self.features = features or FeatureMapper()

    def to_dto(self, account_feature: AccountFeature) -> FeatureDTO:
        feature = account_feature.feature
        return FeatureDTO(
            feature_name=feature.feature_name if feature is not None else None,
            is_enabled=feature.is_enabled if feature is not None else False,
            **timestamps(account_feature),
        )

    def to_domain(
        self, dto: FeatureDTO, linked_entity=None, *, clock=None
    ) -> AccountFeature:
        """Join ``linked_entity`` (the account) to the feature rebuilt from ``dto``."""
        return AccountFeature(
            linked_entity, self.features.to_domain(dto, clock=clock), clock=clock
        )


class SubAccountMapper(DTOMapper):
    entity_type = SubAccount
    dto_type = SubAccountDTO

    def _owner_dto(self, sub_account: SubAccount) -> Any:
        # Owners in the fallback slot have no DTO; only their id and type travel
        link = sub_account.link
        if link is None or link.kind not in _OWNER_DTOS:
            return None
        return link.entity.cast(_OWNER_DTOS[link.kind])

    def to_nested_dto(self, sub_account: SubAccount) -> SubAccountDTO:
        """DTO without the account and owner objects, for use inside an AccountDTO."""
        return SubAccountDTO(
            linked_entity_id=sub_account.linked_entity_id,
            linked_entity_type=sub_account.linked_entity_type,
            account_id=sub_account.account_id,
            **timestamps(sub_account),
        )

    def to_dto(self, sub_account: SubAccount) -> SubAccountDTO:
        return self.to_nested_dto(sub_account).model_copy(
            update={
                "linked_entity": self._owner_dto(sub_account),
                "account": cast_optional(sub_account.account, AccountDTO),
            }
        )

    def to_domain(
        self,
        dto: SubAccountDTO,
        linked_entity=None,
        *,
        clock: Optional[Clock] = None,
        account: Any = None,
    ) -> SubAccount:
        if linked_entity is None and dto.linked_entity is not None:
            linked_entity = to_domain(dto.linked_entity, clock=clock)
        if account is None and dto.account is not None:
            account = to_domain(dto.account, clock=clock)
        return SubAccount(
            linked_entity, account, dto.account_id, clock=clock, **timestamps(dto)
        )


class AccountMapper(DTOMapper):
    entity_type = Account
    dto_type = AccountDTO

    def __init__(
        self,
        account_features: Optional[AccountFeatureMapper] = None,
        sub_accounts: Optional[SubAccountMapper] = None,
    ):
        self.account_features = account_features or AccountFeatureMapper()
        self.sub_accounts = sub_accounts or SubAccountMapper()

    def to_dto(self, account: Account) -> AccountDTO:
        accounts = account.accounts
        return AccountDTO(
            account_name=account.account_name,
            account_number=account.account_number,
            license=account.license,
            features=cast_all(account.features, FeatureDTO),
            accounts=(
                [self.sub_accounts.to_nested_dto(sub) for sub in accounts]
                if accounts is not None
                else None
            ),
            **timestamps(account),
        )

    def to_domain(self, dto: AccountDTO, linked_entity=None, *, clock=None) -> Account:
        account = Account(
            dto.account_name, dto.account_number, dto.license, clock=clock, **timestamps(dto)
        )
        account.restore(
            features=[
                self.account_features.to_domain(feature, account, clock=clock)
                for feature in dto.features
            ]
        )
        if dto.accounts is not None:
            account.restore(
                accounts=[
                    self.sub_accounts.to_domain(sub, clock=clock, account=account)
                    for sub in dto.accounts
                ]
            )
        return account


class DatabaseConnectionMapper(DTOMapper):
    entity_type = DatabaseConnection
    dto_type = DatabaseConnectionDTO

    def to_dto(self, connection: DatabaseConnection) -> DatabaseConnectionDTO:
        return DatabaseConnectionDTO(
            connection_string=connection.connection_string,
            database_type=connection.database_type,
            account_id=connection.account_id,
            account=cast_optional(connection.account, AccountDTO),
            **timestamps(connection),
        )

    def to_domain(
        self, dto: DatabaseConnectionDTO, linked_entity=None, *, clock=None
    ) -> DatabaseConnection:
        return DatabaseConnection(
            dto.connection_string,
            dto.database_type,
            to_domain(dto.account, clock=clock) if dto.account is not None else None,
            clock=clock,
            **timestamps(dto),
        )
