# Area: Services
"""
twentyq._services.enricher — Context enricher
=============================================

Fetches a short encyclopedia summary of the secret answer to ground
the oracle. Failures degrade to a placeholder string; ``fetch_summary``
never raises.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from urllib.parse import quote

import requests

from .._game.session import DEFAULT_ANSWER

logger = logging.getLogger("twentyq.enricher")

SUMMARY_URL = "https://en.wikipedia.org/api/rest_v1/page/summary/{term}"
USER_AGENT = "twentyq-server/1.0 (daily 20 questions game)"

NO_CONTEXT = "No specific context available."
RETRIEVAL_FAILED = "Context retrieval failed."
RETRIEVAL_ERROR = "Error retrieving context."
EMPTY_EXTRACT = "No summary extract found in Wikipedia response."


class BaseEnricher(ABC):
    @abstractmethod
    async def fetch_summary(self, term: str) -> str:
        ...


class WikipediaEnricher(BaseEnricher):
    """Wikipedia REST summary endpoint, called through ``requests``."""

    def __init__(self, timeout_seconds: float = 10.0, session: requests.Session = None):
        self.timeout_seconds = timeout_seconds
        self._http = session or requests.Session()
        self._http.headers.update({"User-Agent": USER_AGENT})

    async def fetch_summary(self, term: str) -> str:
        if not term or term.lower() == DEFAULT_ANSWER:
            return NO_CONTEXT
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._fetch_blocking, term)

    def _fetch_blocking(self, term: str) -> str:
        logger.info(f"Fetching Wikipedia summary for: {term}")
        try:
            response = self._http.get(
                SUMMARY_URL.format(term=quote(term, safe="")),
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as e:
            logger.error(f"Error fetching wiki summary for {term!r}: {e}")
            return RETRIEVAL_ERROR

        if response.status_code == 404:
            logger.warning(f"Wikipedia page not found for {term!r}")
            return NO_CONTEXT
        if not response.ok:
            logger.warning(f"Wikipedia API non-OK response for {term!r}: {response.status_code}")
            return RETRIEVAL_FAILED

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON in wiki summary for {term!r}: {e}")
            return RETRIEVAL_ERROR

        summary = data.get("extract", "") if isinstance(data, dict) else ""
        logger.info(f"Fetched summary length: {len(summary)}")
        return summary or EMPTY_EXTRACT
