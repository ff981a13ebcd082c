"""HTTP transport wrapper that scopes every request to one base URL."""

import logging
from typing import Any
from urllib.parse import urlsplit

from iconify_client.exceptions import ConfigurationError
from iconify_client.interfaces import HttpTransport

logger = logging.getLogger(__name__)


class ScopedHttpClient:
    """Send requests relative to a fixed base URL through a wrapped transport.

    Paths are appended to the base URL; absolute URLs are only accepted when
    they point below it. Default options (timeout, headers) are merged into
    every request without overriding per-call values.
    """

    def __init__(
        self,
        transport: HttpTransport,
        base_uri: str,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
    ):
        """Initialize the scoped client.

        Args:
            transport: Object with a requests-compatible ``request`` method.
            base_uri: Absolute http(s) URL all requests are scoped to.
            timeout: Default request timeout in seconds.
            headers: Default headers sent with every request.

        Raises:
            ConfigurationError: If ``base_uri`` is not an absolute http(s) URL.
        """
        parts = urlsplit(base_uri)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(f'Invalid registry endpoint "{base_uri}": expected an http(s) URL.')

        self._transport = transport
        self._base_uri = base_uri.rstrip("/")
        self._timeout = timeout
        self._headers = dict(headers or {})

    @property
    def base_uri(self) -> str:
        return self._base_uri

    @property
    def host(self) -> str:
        return urlsplit(self._base_uri).netloc

    def resolve(self, path: str) -> str:
        """Resolve ``path`` against the base URL.

        Raises:
            ValueError: If ``path`` is an absolute URL outside the base URL.
        """
        if urlsplit(path).scheme:
            if path != self._base_uri and not path.startswith(self._base_uri + "/"):
                raise ValueError(f'URL "{path}" is outside of the scope "{self._base_uri}".')
            return path
        return f"{self._base_uri}/{path.lstrip('/')}"

    def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request to ``path`` below the base URL."""
        url = self.resolve(path)
        if self._timeout is not None:
            kwargs.setdefault("timeout", self._timeout)
        if self._headers:
            kwargs["headers"] = {**self._headers, **(kwargs.get("headers") or {})}

        logger.debug(f"{method} {url} params={kwargs.get('params')}")
        return self._transport.request(method, url, **kwargs)

    def get(self, path: str, **kwargs: Any) -> Any:
        return self.request("GET", path, **kwargs)
