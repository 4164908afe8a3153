"""
DOMAIN LAYER - Organizer entities and the rules that keep them consistent

This layer contains:
- Entities: Business objects with identity (Account, Contact, User, Email, ...)
- Value Objects: Immutable types (enums, national subdivisions)
- Ports: Abstractions the outer layers implement (Clock)
- Linking: Resolution of the single owner of an email, phone number or address
- Casting: Type-directed projection of entities into other types
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no Pydantic, no DI container, no config loading)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib; DTO projections are registered from the
   application layer
4. Entities are mutated in place; every mutation stamps modified_date
"""
