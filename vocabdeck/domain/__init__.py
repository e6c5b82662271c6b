"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Cards and the unit/lesson hierarchy
- Value Objects: Immutable objects defined by attributes
- Domain Services: Stateless operations across cards
"""
