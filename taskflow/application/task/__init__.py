"""
Task bounded context - Application layer.

Contains use cases for loading task documents:
- Queries: Load and flatten the configured task
"""
