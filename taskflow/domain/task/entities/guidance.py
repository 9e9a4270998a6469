"""Guidance block attached to phases, steps and questions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Guidance:
    """Design intent of a phase, step or question."""

    purpose: str
    description: str
