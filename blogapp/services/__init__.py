from blogapp.services import sessions, store

__all__ = ["sessions", "store"]
