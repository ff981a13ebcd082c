"""Protocol for the HTTP transport used by the client."""

from typing import Any, Protocol


class HttpTransport(Protocol):
    """Anything with a requests-compatible ``request`` method.

    ``requests.Session`` satisfies this protocol, so does a configured
    session subclass or a test double.
    """

    def request(self, method: str, url: str, **kwargs: Any) -> Any:
        """Send a request and return a response exposing
        ``status_code``, ``text`` and ``json()``."""
        ...
