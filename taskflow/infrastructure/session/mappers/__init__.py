from .session_mapper import SessionMapper

__all__ = ["SessionMapper"]
