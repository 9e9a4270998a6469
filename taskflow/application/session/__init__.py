"""
Session bounded context - Application layer.

Contains use cases for driving task sessions:
- Commands: Create, start, answer, continue, restart, delete
- Queries: Get session state
"""
