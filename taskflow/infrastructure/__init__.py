"""
Infrastructure layer.

The infrastructure layer contains implementations of ports defined
in the application layer. It handles all external concerns:

- Task document sources (file, HTTP) and their pydantic schemas
- Session storage
- Web framework (FastAPI, routers)
- Dependency injection

This layer depends on domain and application layers,
but they do not depend on it.
"""
