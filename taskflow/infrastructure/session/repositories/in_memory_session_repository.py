"""In-memory repository for live task sessions."""

import logging
import threading
import time
from collections.abc import Callable

from taskflow.application.session.use_cases.dtos import TaskSession

logger = logging.getLogger(__name__)


class InMemorySessionRepository:
    """
    Keeps sessions in process memory; nothing survives a restart.

    With an ``idle_timeout`` (seconds), a session nobody looked up for that
    long is dropped. Expired sessions are purged whenever a session is added
    and are never returned by ``find_by_id``.
    """

    def __init__(
        self,
        idle_timeout: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.idle_timeout = idle_timeout
        self._clock = clock
        self._sessions: dict[str, TaskSession] = {}
        self._lock = threading.Lock()

    def add(self, session: TaskSession) -> TaskSession:
        with self._lock:
            self._purge_expired()
            session.last_active_at = self._clock()
            self._sessions[session.id] = session
        return session

    def find_by_id(self, session_id: str) -> TaskSession | None:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if self._is_expired(session):
                del self._sessions[session_id]
                logger.info(f"Session {session_id} expired after {self.idle_timeout}s idle")
                return None
            session.last_active_at = self._clock()
            return session

    def delete(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _is_expired(self, session: TaskSession) -> bool:
        if self.idle_timeout is None:
            return False
        return self._clock() - session.last_active_at > self.idle_timeout

    def _purge_expired(self) -> None:
        expired = [sid for sid, session in self._sessions.items() if self._is_expired(session)]
        for session_id in expired:
            del self._sessions[session_id]
        if expired:
            logger.info(f"Purged {len(expired)} idle sessions")
