"""Registry for discovering and instantiating record sources."""

from typing import Type

from campus_match.sources.api import PlatformClient
from campus_match.sources.base import RecordSource
from campus_match.store.sqlite_store import RecordStore


class SourceRegistry:
    """Provides record sources by kind."""

    _sources: dict[str, Type[RecordSource]] = {
        "sqlite": RecordStore,
        "api": PlatformClient,
    }

    @classmethod
    def get(cls, kind: str, **kwargs) -> RecordSource:
        """Get a source instance for the given kind. kwargs passed to the source __init__."""
        source_cls = cls._sources.get(kind.lower())
        if not source_cls:
            raise ValueError(f"Unknown source: {kind}. Available: {list(cls._sources.keys())}")
        return source_cls(**kwargs)

    @classmethod
    def available_sources(cls) -> list[str]:
        """Return list of available source kinds."""
        return list(cls._sources.keys())
