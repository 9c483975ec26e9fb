"""
Domain layer.

The domain layer contains the core business rules of the application.
It has no dependencies on storage, AI providers or configuration.

This layer contains:
- Entities: Objects with identity and lifecycle (User, Flashcard)
- Value Objects: Immutable objects defined by attributes (ids)
- Domain exceptions
"""
