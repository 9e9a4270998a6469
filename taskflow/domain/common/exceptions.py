"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
a state machine is driven outside of its contract.
They should be caught and translated to appropriate responses
by the infrastructure layer.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvalidTransitionError(DomainError):
    """
    Raised when the navigation controller receives an event its
    current screen does not accept.

    Example: Continuing past a question that has not been answered.
    """

    def __init__(self, screen: str, action: str, reason: str | None = None) -> None:
        message = reason or f"Cannot {action} from screen '{screen}'"
        super().__init__(message, {"screen": screen, "action": action})
        self.screen = screen
        self.action = action


class PracticeStateError(DomainError):
    """
    Raised when a dialogue or roleplay practice is driven out of order.

    Example: Choosing a line while the partner role is speaking.
    """

    def __init__(self, practice: str, message: str) -> None:
        super().__init__(message, {"practice": practice})
        self.practice = practice
