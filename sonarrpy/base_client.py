"""
Base API Client for *arr applications (Sonarr, Radarr, etc.)
"""

import json
import logging
import re
from typing import Any, Protocol, runtime_checkable
from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

import requests

from .exceptions import (
    ConfigurationError,
    DecodeError,
    SerializationError,
    SonarrError,
    TransportError,
    ValidationError,
)

logger = logging.getLogger(__name__)

API_KEY_PARAM = "apikey"

_API_KEY_IN_URL = re.compile(rf"({API_KEY_PARAM}=)[^&\s]*")


@runtime_checkable
class WireSerializable(Protocol):
    """Anything that can describe itself as a JSON object"""

    def to_dict(self) -> dict: ...


def require_positive_id(value: Any, name: str) -> int:
    """Reject identifiers that can never address a server resource"""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{name} must be a positive integer")
    return value


class BaseArrClient:
    """Base client for *arr applications API

    Every request carries the API key as the ``apikey`` query parameter.
    Non-2xx responses are not raised: the body is decoded as-is and it is
    up to the caller to make sense of it.
    """

    def __init__(
        self, url: str, api_key: str, session: requests.Session | None = None
    ):
        if not url:
            raise ConfigurationError("address required")
        if not api_key:
            raise ConfigurationError("key required")

        if not url.endswith("/"):
            url += "/"

        try:
            parts = urlsplit(url)
            # port is parsed lazily and is the only part urlsplit validates late
            parts.port
        except ValueError as e:
            raise ConfigurationError(f"invalid address: {e}") from e

        self.base_url = url
        self.api_key = api_key
        self.session = session if session is not None else requests.Session()

    def _build_url(self, endpoint: str, params: dict | None = None) -> str:
        """Resolve ``endpoint`` against the base URL and attach the API key

        ``params=None`` keeps whatever query the resolved URL already has,
        an explicit dict (even empty) replaces it.
        """
        scheme, netloc, path, query, fragment = urlsplit(
            urljoin(self.base_url, endpoint)
        )

        if params is None:
            query_params = dict(parse_qsl(query, keep_blank_values=True))
        else:
            query_params = dict(params)
        query_params[API_KEY_PARAM] = self.api_key

        query = urlencode(sorted(query_params.items(), key=lambda kv: kv[0]))
        return urlunsplit((scheme, netloc, path, query, fragment))

    def _redact(self, message: str) -> str:
        """Mask the apikey query value in messages that quote a URL"""
        return _API_KEY_IN_URL.sub(r"\1***", message)

    def _request(
        self,
        method: str,
        endpoint: str,
        params: dict | None = None,
        body: str | None = None,
    ) -> Any:
        """Perform one HTTP exchange and return the decoded JSON body"""
        url = self._build_url(endpoint, params)
        headers = {"Content-Type": "application/json"} if body is not None else None

        logger.debug(f"{method} {endpoint}")
        try:
            with self.session.request(
                method, url, data=body, headers=headers
            ) as response:
                logger.debug(f"{method} {endpoint} -> HTTP {response.status_code}")
                try:
                    return response.json()
                except ValueError as e:
                    raise DecodeError(
                        f"invalid JSON in response to {method} {endpoint}: {e}"
                    ) from e
        except requests.RequestException as e:
            raise TransportError(self._redact(str(e))) from e

    def _get(self, endpoint: str, params: dict | None = None) -> Any:
        """Perform a GET request to the API"""
        return self._request("GET", endpoint, params)

    def _put(self, endpoint: str, payload: Any) -> Any:
        """Perform a PUT request to the API

        The payload is encoded before anything is sent, so an unencodable
        value never reaches the network.
        """
        try:
            if isinstance(payload, WireSerializable):
                payload = payload.to_dict()
            body = json.dumps(payload, allow_nan=False)
        except (TypeError, ValueError, AttributeError) as e:
            raise SerializationError(f"cannot encode payload: {e}") from e

        return self._request("PUT", endpoint, body=body)

    def _delete(self, endpoint: str, params: dict | None = None) -> Any:
        """Perform a DELETE request to the API"""
        return self._request("DELETE", endpoint, params)

    def test_connection(self) -> bool:
        """Test the connection to the *arr application"""
        try:
            self._get("system/status")
            return True
        except SonarrError as e:
            logger.error(f"Connection test failed: {e}")
            return False
