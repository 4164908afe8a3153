"""
Dishka DI Container Setup.

- Config, Clock, TypeRegistry, EntityFactory and EntityValidator are APP scoped (one per
  container)
- Clock is provided through the abstract port; SystemClock is the concrete
  implementation, in UTC unless USE_UTC_CLOCK is off

Flow:
  Container → provides → SystemClock → to → EntityFactory
                              ↓
                      uses Clock interface
"""

from dishka import Container, Provider, Scope, make_container, provide

from organizer_companion.application.entity_factory import EntityFactory
from organizer_companion.application.type_registry import TypeRegistry, type_registry
from organizer_companion.application.validation import EntityValidator
from organizer_companion.config.settings import Config
from organizer_companion.domain.ports.clock import Clock, SystemClock


class AppProvider(Provider):
    """Application dependency provider."""

    @provide(scope=Scope.APP)
    def get_config(self) -> Config:
        return Config()

    @provide(scope=Scope.APP)
    def get_clock(self, config: Config) -> Clock:
        return SystemClock(utc=config.USE_UTC_CLOCK)

    @provide(scope=Scope.APP)
    def get_type_registry(self) -> TypeRegistry:
        return type_registry

    @provide(scope=Scope.APP)
    def get_entity_factory(self, clock: Clock, registry: TypeRegistry) -> EntityFactory:
        return EntityFactory(clock=clock, registry=registry)

    @provide(scope=Scope.APP)
    def get_entity_validator(self) -> EntityValidator:
        return EntityValidator()


def create_container(*providers: Provider) -> Container:
    """
    Create the DI container.

    Extra providers are registered after AppProvider, so tests can override
    the clock with their own provider.
    """
    return make_container(AppProvider(), *providers)
