import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from fflogs.config import FFLogsConfig
from fflogs.errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)

_REDACTED = "***"


def encode_component(value: Any) -> str:
    """Percent-encode a single path segment or query component.

    Booleans serialize as ``true``/``false``; everything else goes through ``str``.
    """
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    return quote(text, safe="")


def _encode_params(params: Mapping[str, Any]) -> str:
    return "".join(f"&{encode_component(key)}={encode_component(value)}" for key, value in params.items())


class Dispatcher:
    """Issues GET requests against the FF Logs v1 API and returns parsed JSON."""

    def __init__(self, config: FFLogsConfig, client: httpx.Client | None = None) -> None:
        self._config = config
        self._owns_client = client is None
        self._client = client or httpx.Client()

    def build_url(self, path: str, params: Mapping[str, Any] | None = None) -> str:
        api_key = encode_component(self._config.api_key)
        return f"{self._config.base_url}{path}?api_key={api_key}{_encode_params(params or {})}"

    def redacted_url(self, path: str, params: Mapping[str, Any] | None = None) -> str:
        """Same as build_url with the API key masked, for logs and error messages."""
        return f"{self._config.base_url}{path}?api_key={_REDACTED}{_encode_params(params or {})}"

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        url = self.build_url(path, params)
        safe_url = self.redacted_url(path, params)
        logger.debug("GET %s", safe_url)
        try:
            response = self._client.get(url)
        except httpx.RequestError as exc:
            raise TransportError(f"Request to {safe_url} failed: {exc}", url=safe_url) from exc
        logger.debug("FF Logs responded %d", response.status_code)

        if not response.is_success:
            body = _parse_body(response)
            logger.warning("FF Logs request %s failed with %d: %s", safe_url, response.status_code, body)
            raise UpstreamError(response.status_code, body, url=safe_url)

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(response.status_code, response.text, url=safe_url) from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Dispatcher":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _parse_body(response: httpx.Response) -> Any:
    """Parsed JSON when possible; ``response.text`` (decoded with replacement) otherwise."""
    try:
        return response.json()
    except ValueError:
        return response.text
