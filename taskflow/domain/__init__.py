"""
Domain layer.

The domain layer contains the core logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: The immutable task document model
- Value Objects: Flow items derived from the document
- Domain Services: Flattening, resolution and navigation
"""
