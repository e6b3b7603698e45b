"""
Remote word validator.

Protocol:
  POST <endpoint>
  Content-Type: application/json
  {"word": "<candidate>"}

  -> 200 {"isValid": true | false, ...}

Anything else (connection error, timeout, non-2xx status, a body that is not
JSON, a missing or non-boolean `isValid`) is reported as "not valid" and
logged; the search keeps going.

`requests` is blocking, so each call runs in a worker thread via
asyncio.to_thread. The search awaits one call at a time, so there is never
more than one request in flight.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import requests

from packages.config import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT
from .base import BaseValidator, register

logger = logging.getLogger(__name__)


@register
class HttpWordValidator(BaseValidator):
    id = "http"
    name = "HTTP endpoint"

    def __init__(
            self,
            endpoint: str = DEFAULT_ENDPOINT,
            *,
            timeout: float = DEFAULT_TIMEOUT,
            session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def check(self, word: str) -> bool:
        """Blocking validation of a single word."""
        try:
            r = self.session.post(self.endpoint, json={"word": word}, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            logger.warning("validation request for %r failed: %s", word, e)
            return False
        except ValueError as e:
            # plain json decode errors (json.JSONDecodeError) are ValueErrors
            logger.warning("validation response for %r is not JSON: %s", word, e)
            return False

        verdict = data.get("isValid") if isinstance(data, dict) else None
        if not isinstance(verdict, bool):
            logger.warning("validation response for %r has no boolean isValid: %r", word, data)
            return False
        return verdict

    async def validate(self, word: str) -> bool:
        return await asyncio.to_thread(self.check, word)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()
