"""Record source backed by the platform's REST API.

Endpoints used:
- GET /api/startups?category=...   approved startups, sorted by upvotes
- GET /api/users/investors         approved investors (requires auth cookie)
"""

import logging
import os
from typing import Any, Optional

import httpx

from campus_match.models.investor import InvestorProfile
from campus_match.models.startup import Startup
from campus_match.sources.base import RecordSource

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5001"


class PlatformClient(RecordSource):
    """
    Fetches startups and investors over HTTP.
    Base URL from argument or CAMPUS_MATCH_API_URL; auth token (sent as the
    'jwt' cookie) from argument or CAMPUS_MATCH_API_TOKEN.
    """

    source_id = "api"

    STARTUPS_PATH = "/api/startups"
    INVESTORS_PATH = "/api/users/investors"

    DEFAULT_HEADERS = {
        "User-Agent": "campus-match/0.1",
        "Accept": "application/json",
    }

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ):
        self._base_url = (base_url or os.environ.get("CAMPUS_MATCH_API_URL") or DEFAULT_BASE_URL).rstrip("/")
        token = token or os.environ.get("CAMPUS_MATCH_API_TOKEN")
        self._client = client or httpx.Client(
            timeout=30.0,
            follow_redirects=True,
            headers=self.DEFAULT_HEADERS,
            cookies={"jwt": token} if token else None,
        )

    def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        resp = self._client.get(self._base_url + path, params=params)
        resp.raise_for_status()
        return resp.json()

    def find_startups(self, category: Optional[str] = None, limit: Optional[int] = None) -> list[Startup]:
        """Startups from the API (the endpoint only lists approved ones), most upvoted first."""
        params = {"category": category.lower()} if category else None
        payload = self._get_json(self.STARTUPS_PATH, params)
        items = payload if isinstance(payload, list) else payload.get("startups", [])
        startups = [Startup.model_validate(item) for item in items if isinstance(item, dict)]
        startups.sort(key=lambda s: s.engagement, reverse=True)
        return startups[:limit] if limit is not None else startups

    def find_investors(self, limit: Optional[int] = None) -> list[InvestorProfile]:
        """Approved investors from the API."""
        try:
            payload = self._get_json(self.INVESTORS_PATH)
        except httpx.HTTPStatusError as e:
            if e.response.status_code in (401, 403):
                logger.warning("Investor listing requires authentication: %s", e)
                return []
            raise
        items = payload if isinstance(payload, list) else payload.get("investors", [])
        investors = [
            InvestorProfile.model_validate({"role": "investor", **item})
            for item in items
            if isinstance(item, dict)
        ]
        investors = [i for i in investors if i.is_approved_investor]
        return investors[:limit] if limit is not None else investors

    def close(self) -> None:
        self._client.close()
