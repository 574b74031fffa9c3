"""Roster data API connector.

Thin wrapper around one bearer-authenticated GET against an Airtable-style
table endpoint, plus parsing of its ``{"records": [{"fields": ...}]}`` body.
"""

from __future__ import annotations

import time

import requests
import structlog
from pydantic import ValidationError

from hsaroster.core.config import UpstreamConfig
from hsaroster.core.exceptions import UpstreamFetchError, UpstreamSchemaError
from hsaroster.models.employee import Employee, RosterResponse

logger = structlog.get_logger(__name__)


class RosterAPIClient:
    """Production IRosterSource backed by ``requests``."""

    def __init__(
        self,
        *,
        url: str,
        api_key: str,
        timeout_seconds: int = 30,
        max_attempts: int = 1,
        retry_backoff_seconds: float = 0.0,
    ) -> None:
        self._url = url
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._max_attempts = max(1, max_attempts)
        self._retry_backoff_seconds = retry_backoff_seconds

    @classmethod
    def from_config(cls, config: UpstreamConfig) -> "RosterAPIClient":
        return cls(
            url=config.url,
            api_key=config.key,
            timeout_seconds=config.timeout,
            max_attempts=config.max_attempts,
            retry_backoff_seconds=config.retry_backoff_seconds,
        )

    def fetch(self) -> bytes:
        """Return the raw response body, retrying only when configured to."""
        attempt = 1
        while True:
            try:
                return self._fetch_once()
            except UpstreamFetchError as exc:
                retryable = exc.status_code is None or exc.status_code >= 500
                if not retryable or attempt >= self._max_attempts:
                    raise
                logger.warning(
                    "upstream_fetch_retry",
                    attempt=attempt,
                    max_attempts=self._max_attempts,
                    error=str(exc),
                )
                if self._retry_backoff_seconds:
                    time.sleep(self._retry_backoff_seconds * attempt)
                attempt += 1

    def _fetch_once(self) -> bytes:
        try:
            resp = requests.get(
                self._url,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Accept": "application/json",
                },
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            raise UpstreamFetchError(f"Roster API request failed: {exc}") from exc

        if resp.status_code >= 400:
            raise UpstreamFetchError(
                f"Roster API returned HTTP {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
            )
        return resp.content

    def parse_response(self, body: bytes) -> list[Employee]:
        try:
            parsed = RosterResponse.model_validate_json(body)
        except ValidationError as exc:
            raise UpstreamSchemaError(f"Unexpected roster API response: {exc}") from exc
        return [record.fields for record in parsed.records]
