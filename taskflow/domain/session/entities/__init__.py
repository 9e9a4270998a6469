from .dialogue_practice import DialogueChoice, DialoguePractice
from .navigation_controller import NavigationController, Screen
from .roleplay_practice import RoleplayFeedback, RoleplayPractice

__all__ = [
    "DialogueChoice",
    "DialoguePractice",
    "NavigationController",
    "RoleplayFeedback",
    "RoleplayPractice",
    "Screen",
]
