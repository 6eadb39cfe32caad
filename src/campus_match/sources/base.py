"""Abstract record source consumed by the chatbot and the CLI."""

from abc import ABC, abstractmethod
from typing import Optional

from campus_match.models.investor import InvestorProfile
from campus_match.models.startup import Startup


class RecordSource(ABC):
    """
    Read access to platform records.
    The engine only borrows records for one call; it never writes through a source.
    """

    source_id: str = ""

    @abstractmethod
    def find_startups(self, category: Optional[str] = None, limit: Optional[int] = None) -> list[Startup]:
        """
        Approved startups, most upvoted first; optionally restricted to one category.
        """
        pass

    @abstractmethod
    def find_investors(self, limit: Optional[int] = None) -> list[InvestorProfile]:
        """
        Investors whose accounts are approved.
        """
        pass

    def all_startups(self) -> list[Startup]:
        """
        Every approved startup (corpus for similarity search).
        Default implementation: find_startups without filters.
        """
        return self.find_startups()

    def close(self) -> None:
        """
        Release connections held by the source.
        Default implementation: nothing to release.
        """
        pass
