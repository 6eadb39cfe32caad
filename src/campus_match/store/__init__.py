"""Local storage for startups, users and reviews."""

from campus_match.store.sqlite_store import RecordStore

__all__ = ["RecordStore"]
