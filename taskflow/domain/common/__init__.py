"""
Domain common module.

Contains the exception hierarchy shared by every bounded context.
"""

from .exceptions import DomainError, InvalidTransitionError, PracticeStateError

__all__ = [
    "DomainError",
    "InvalidTransitionError",
    "PracticeStateError",
]
