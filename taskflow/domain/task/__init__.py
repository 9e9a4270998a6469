"""
Task bounded context - Domain layer.

This context handles the task document and everything derived from it:
- The immutable task package model (phases, steps, questions, task model)
- Flow items and phase guidance items
- Flattening the document into one navigable sequence
- Resolving id references into the task model

Aggregates:
- TaskPackage: The root of one loaded task document
"""
