"""Client for Iconify-compatible icon registries."""

import logging
import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any
from urllib.parse import quote

from iconify_client import __version__
from iconify_client.exceptions import (
    ConfigurationError,
    IconNotFoundError,
    MissingDimensionsError,
    PrefixNotFoundError,
    RegistryError,
)
from iconify_client.interfaces import CacheStore, HttpTransport
from iconify_client.models import CollectionMetadata, Icon, dimension_value
from iconify_client.services.scoped_http import ScopedHttpClient

try:
    import requests
except ImportError:  # pragma: no cover
    requests = None

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.iconify.design"
SETS_CACHE_KEY = "ux-iconify-sets"


class IconifyClient:
    """Look up icons and icon sets on a remote Iconify registry.

    The registry's collection index (every known prefix with its metadata)
    is requested through the cache store on first use and then kept in
    memory for the lifetime of the client. Icon lookups always hit the
    network; failures are never cached or retried.
    """

    def __init__(
        self,
        cache: CacheStore,
        endpoint: str = DEFAULT_ENDPOINT,
        http: HttpTransport | None = None,
        *,
        timeout: float | None = 10.0,
        cache_key: str = SETS_CACHE_KEY,
        user_agent: str = f"iconify-client/{__version__}",
    ):
        """Initialize the client.

        Args:
            cache: Store used for the collection index.
            endpoint: Registry base URL.
            http: Pre-configured transport; a ``requests.Session`` is created if omitted.
            timeout: Default request timeout in seconds.
            cache_key: Key the collection index is stored under.
            user_agent: User-Agent header sent with every request.

        Raises:
            ConfigurationError: If no usable HTTP transport is available or
                the endpoint is not an http(s) URL.
        """
        if http is None:
            if requests is None:
                raise ConfigurationError(
                    'You must install "requests" to use the Iconify client. '
                    'Try running "pip install requests".'
                )
            http = requests.Session()
        elif not callable(getattr(http, "request", None)):
            raise ConfigurationError(
                f"HTTP transport {type(http).__name__} does not provide a request() method."
            )

        self._cache = cache
        self._cache_key = cache_key
        self._http = ScopedHttpClient(
            http, endpoint, timeout=timeout, headers={"User-Agent": user_agent}
        )
        self._sets: Mapping[str, CollectionMetadata] | None = None
        self._sets_lock = threading.Lock()

    @property
    def endpoint(self) -> str:
        return self._http.base_uri

    def metadata_for(self, prefix: str) -> CollectionMetadata:
        """Return the metadata of the icon set ``prefix``.

        Raises:
            PrefixNotFoundError: If the registry has no such icon set.
        """
        metadata = self._collections().get(prefix)
        if metadata is None:
            raise PrefixNotFoundError(
                f'The icon prefix "{prefix}" does not exist on {self._http.host}.'
            )
        return metadata

    def has_collection(self, prefix: str) -> bool:
        return prefix in self._collections()

    def collections(self) -> Mapping[str, CollectionMetadata]:
        """Return the read-only collection index."""
        return self._collections()

    def fetch_icon(self, prefix: str, name: str) -> Icon:
        """Fetch one icon's body and compute its viewBox.

        Args:
            prefix: Icon set prefix (e.g. "mdi").
            name: Icon name within the set (e.g. "home").

        Returns:
            Icon with the registry's body and a ``viewBox`` attribute.

        Raises:
            PrefixNotFoundError: If the icon set does not exist.
            IconNotFoundError: If the icon does not exist or the response is malformed.
            MissingDimensionsError: If no width or height can be resolved.
            RegistryError: If the registry answers with an unexpected error status.
        """
        metadata = self._require_prefix(prefix, name)

        data = self._fetch_icon_data(prefix, name, [name])
        record = self._icon_record(data, name)
        if record is None:
            raise self._not_found(prefix, name)

        return self._build_icon(prefix, name, record, data, metadata)

    def fetch_icons(self, prefix: str, names: Iterable[str]) -> dict[str, Icon]:
        """Fetch several icons of one set with a single request.

        Names the registry does not know are left out of the result.

        Raises:
            PrefixNotFoundError: If the icon set does not exist.
            IconNotFoundError: If the registry response is malformed.
            MissingDimensionsError: If a returned icon has no resolvable dimensions.
            RegistryError: If the registry answers with an unexpected error status.
        """
        names = list(dict.fromkeys(names))
        if not names:
            return {}

        metadata = self._require_prefix(prefix, names[0])
        data = self._fetch_icon_data(prefix, ",".join(names), names)

        icons = {}
        for name in names:
            record = self._icon_record(data, name)
            if record is None:
                logger.debug(f"Icon {prefix}:{name} missing from batch response")
                continue
            icons[name] = self._build_icon(prefix, name, record, data, metadata)
        return icons

    def fetch_svg(self, prefix: str, name: str) -> str:
        """Fetch the raw SVG document of an icon.

        Returns:
            The response body, unmodified.

        Raises:
            PrefixNotFoundError: If the icon set does not exist.
            IconNotFoundError: If the body is not an SVG document.
            RegistryError: If the registry answers with an unexpected error status.
        """
        self._require_prefix(prefix, name)

        response = self._http.get(f"/{quote(prefix, safe='')}/{quote(name, safe='')}.svg")
        self._check_status(response, prefix, name)

        content = response.text
        if not content.startswith("<svg"):
            raise self._not_found(prefix, name)

        return content

    def _collections(self) -> Mapping[str, CollectionMetadata]:
        """Resolve the collection index at most once per client."""
        if self._sets is not None:
            return self._sets

        with self._sets_lock:
            if self._sets is None:
                raw = self._cache.get(self._cache_key, self._fetch_collections)
                if not isinstance(raw, Mapping):
                    raise RegistryError(
                        f'Cache entry "{self._cache_key}" does not hold an icon set list.'
                    )
                self._sets = MappingProxyType(
                    {
                        prefix: CollectionMetadata.from_dict(prefix, data)
                        for prefix, data in raw.items()
                        if isinstance(data, Mapping)
                    }
                )
                logger.info(f"Loaded {len(self._sets)} icon sets from {self._http.host}")
        return self._sets

    def _fetch_collections(self) -> dict[str, Any]:
        response = self._http.get("/collections")
        if response.status_code >= 400:
            raise RegistryError(
                f"Could not list icon sets on {self._http.host} (HTTP {response.status_code})."
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RegistryError(f"Invalid icon set list received from {self._http.host}.") from e

        if not isinstance(data, dict):
            raise RegistryError(f"Invalid icon set list received from {self._http.host}.")
        return data

    def _require_prefix(self, prefix: str, name: str) -> CollectionMetadata:
        metadata = self._collections().get(prefix)
        if metadata is None:
            raise PrefixNotFoundError(
                f'The icon "{prefix}:{name}" does not exist on {self._http.host}.'
            )
        return metadata

    def _fetch_icon_data(self, prefix: str, icons: str, names: list[str]) -> dict[str, Any]:
        """Request ``/{prefix}.json`` and parse the body.

        A body that is not a JSON object means the registry does not know
        the icons, the same as an explicit 404.
        """
        response = self._http.get(f"/{quote(prefix, safe='')}.json", params={"icons": icons})
        self._check_status(response, prefix, names[0])

        try:
            data = response.json()
        except ValueError:
            data = None

        if not isinstance(data, dict):
            raise self._not_found(prefix, names[0])
        return data

    @staticmethod
    def _icon_record(data: Mapping[str, Any], name: str) -> Mapping[str, Any] | None:
        icons = data.get("icons")
        if not isinstance(icons, Mapping):
            return None
        record = icons.get(name)
        if not isinstance(record, Mapping) or not isinstance(record.get("body"), str):
            return None
        return record

    def _build_icon(
        self,
        prefix: str,
        name: str,
        record: Mapping[str, Any],
        data: Mapping[str, Any],
        metadata: CollectionMetadata,
    ) -> Icon:
        width = _first_set(
            dimension_value(record.get("width")),
            dimension_value(data.get("width")),
            metadata.width,
        )
        height = _first_set(
            dimension_value(record.get("height")),
            dimension_value(data.get("height")),
            metadata.height,
        )
        if width is None and height is None:
            raise MissingDimensionsError(
                f'The icon "{prefix}:{name}" does not have a width or height.'
            )

        return Icon.from_dimensions(
            record["body"],
            width if width is not None else height,
            height if height is not None else width,
        )

    def _check_status(self, response: Any, prefix: str, name: str) -> None:
        status = response.status_code
        if status == 404:
            raise self._not_found(prefix, name)
        if status >= 400:
            raise RegistryError(
                f'Could not fetch icon "{prefix}:{name}" from {self._http.host} (HTTP {status}).'
            )

    def _not_found(self, prefix: str, name: str) -> IconNotFoundError:
        return IconNotFoundError(f'The icon "{prefix}:{name}" does not exist on {self._http.host}.')


def _first_set(*values: Any) -> Any:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None
