"""DTOs for session use cases."""

import threading
import time
from dataclasses import dataclass, field
from uuid import uuid4

from taskflow.domain.session.entities import NavigationController


@dataclass
class TaskSession:
    """A live session: one navigation controller plus the lock serializing its events."""

    id: str
    controller: NavigationController
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)
    last_active_at: float = field(default_factory=time.monotonic, compare=False)

    @classmethod
    def create(cls, controller: NavigationController | None = None) -> "TaskSession":
        """Create a new session at the Welcome screen."""
        return cls(id=uuid4().hex, controller=controller or NavigationController())
