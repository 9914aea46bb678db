from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import httpx
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from .config import HttpSettings
from .errors import ConfigurationError, TransportError, UpstreamError

REDACTED = '***'


class HttpApiClient:
    """
    Base for the provider clients: owns the httpx client, turns HTTP and
    decoding failures into wui errors and optionally retries network errors.
    """

    provider = 'api'
    # Query parameters that carry credentials and must not be logged.
    secret_params: Tuple[str, ...] = ()
    retry_wait = wait_exponential(multiplier=0.5, max=10)

    def __init__(self, api_key: str, *, http: Optional[HttpSettings] = None):
        if not api_key:
            raise ConfigurationError(f"{self.provider} api key cannot be empty")
        self.api_key = api_key
        self.http = http or HttpSettings()
        self._client = httpx.Client(timeout=self.http.timeout, follow_redirects=True)
        self._log = logging.getLogger(self.__class__.__module__)

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    # ---------------- Internal Helpers -----------------
    def _redact(self, url: httpx.URL) -> str:
        for name in self.secret_params:
            if name in url.params:
                url = url.copy_set_param(name, REDACTED)
        return str(url)

    def _send(self, url: str, params: Dict[str, Any] | None, headers: Dict[str, str] | None,
              what: str) -> httpx.Response:
        try:
            return self._client.get(url, params=params, headers=headers)
        except httpx.RequestError as e:
            raise TransportError(f"failed to do {what} http request: {e}") from e

    def _get(self, url: str, params: Dict[str, Any] | None = None,
             headers: Dict[str, str] | None = None, what: str = 'request') -> Dict[str, Any]:
        """GET ``url`` and return its decoded JSON object.

        ``what`` names the operation in error messages, e.g. "current weather request".
        """
        retrying = Retrying(
            reraise=True,
            stop=stop_after_attempt(self.http.max_attempts),
            wait=self.retry_wait,
            retry=retry_if_exception_type(TransportError),
        )
        resp = retrying(self._send, url, params, headers, what)
        self._log.debug("%s %s -> %s", resp.request.method, self._redact(resp.request.url), resp.status_code)

        if not resp.is_success:
            raise UpstreamError(
                f"{what} failed with status code {resp.status_code} and had body {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            )
        if not resp.content:
            raise UpstreamError(f"{what} returned {resp.status_code} but had an empty body")
        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamError(f"{what} was OK but failed to decode body: {resp.text[:200]}") from e
        if not isinstance(data, dict):
            raise UpstreamError(f"{what} was OK but body was not a JSON object: {resp.text[:200]}")
        return data


__all__ = ['HttpApiClient']
