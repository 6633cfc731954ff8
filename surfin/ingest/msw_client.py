"""Magicseaweed forecast API client with retry and rate limit handling."""

import logging
import os
import time

import httpx

from surfin.config.defaults import MSW_API_KEY_ENV, MSW_BASE_URL
from surfin.config.schema import MswConfig
from surfin.models.common import SpotId

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "surfin/0.1.0"


class MswClientError(Exception):
    """Raised when the MSW API can't produce a forecast."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MswClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = MSW_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 2.0,
    ):
        self.api_key = api_key or os.environ.get(MSW_API_KEY_ENV, "")
        if not self.api_key:
            raise MswClientError(f"{MSW_API_KEY_ENV} not set")
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    @classmethod
    def from_config(cls, config: MswConfig) -> "MswClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=config.max_retries,
            retry_base_delay=config.retry_base_delay,
        )

    def get_forecast(self, spot_id: SpotId) -> list[dict]:
        """Fetch the raw forecast records for a spot.

        Retries on 503/429 and transport errors with exponential backoff.
        The API key is part of the URL, so only the spot id is logged.
        """
        url = f"{self.base_url}/{self.api_key}/forecast/"
        params = {"spot_id": spot_id}
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "MSW request error for spot %d, retrying in %.1fs: %s",
                        spot_id, delay, e,
                    )
                    time.sleep(delay)
                    continue
                logger.error("MSW request failed for spot %d: %s", spot_id, e)
                raise MswClientError(f"Request failed: {e}") from e

            if resp.status_code in (503, 429) and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "MSW returned %d for spot %d, retrying in %.1fs (attempt %d/%d)",
                    resp.status_code, spot_id, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue
            if resp.status_code >= 400:
                logger.error("MSW API %d for spot %d", resp.status_code, spot_id)
                raise MswClientError(f"HTTP {resp.status_code}", resp.status_code)
            return _forecast_records(resp.json(), spot_id)

        raise MswClientError(f"Retries exhausted for spot {spot_id}")


def _forecast_records(payload: object, spot_id: SpotId) -> list[dict]:
    # Errors come back as 200 {"error_response": {"code": ..., "error_msg": ...}}
    if isinstance(payload, dict) and "error_response" in payload:
        error = payload["error_response"] or {}
        raise MswClientError(
            f"MSW error for spot {spot_id}: {error.get('error_msg', 'unknown error')}"
        )
    if not isinstance(payload, list):
        raise MswClientError(f"Unexpected forecast payload for spot {spot_id}")
    return payload
