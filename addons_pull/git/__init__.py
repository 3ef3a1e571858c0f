"""Git helpers for the upstream checkout."""

from .sync import RepositorySync, SyncError

__all__ = ["RepositorySync", "SyncError"]
