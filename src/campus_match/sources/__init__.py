"""Record sources: where the engine reads startups and investors from."""

from campus_match.sources.api import PlatformClient
from campus_match.sources.base import RecordSource

__all__ = ["PlatformClient", "RecordSource"]
