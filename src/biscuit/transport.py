"""Header transport — where the store reads ``Cookie`` and writes ``Set-Cookie``.

``Transport`` is the structural protocol the store depends on.
``Exchange`` is the bundled implementation: raw request header pairs
in, an ordered list of response headers out, and a committed flag that
flips once the response start has been sent.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, MutableMapping
from typing import Any, Protocol, runtime_checkable

Send = Callable[[MutableMapping[str, Any]], Awaitable[None]]


def _first_header(raw: tuple[tuple[bytes, bytes], ...], name: str) -> str | None:
    """Case-insensitive lookup of the first value for *name*, latin-1 decoded."""
    wanted = name.lower().encode("latin-1")
    for key, value in raw:
        if key.lower() == wanted:
            return value.decode("latin-1")
    return None


@runtime_checkable
class Transport(Protocol):
    """One request/response pair, as seen by a ``CookieStore``."""

    def read_header(self, name: str) -> str | None: ...
    def append_header(self, name: str, value: str) -> None: ...
    def is_committed(self) -> bool: ...


class Exchange:
    """In-memory request/response header exchange.

    Usage with a raw ASGI app::

        exchange = Exchange.from_scope(scope)
        cookies = CookieStore(exchange)
        cookies.set("seen", "1")
        await exchange.send_start(send, 200)
    """

    __slots__ = ("_committed", "_request_headers", "_response_headers")

    def __init__(self, request_headers: Iterable[tuple[bytes, bytes]] = ()) -> None:
        self._request_headers = tuple(request_headers)
        self._response_headers: list[tuple[str, str]] = []
        self._committed = False

    @classmethod
    def from_scope(cls, scope: MutableMapping[str, Any]) -> Exchange:
        """Create an Exchange from an ASGI HTTP scope."""
        return cls(scope.get("headers", ()))

    @classmethod
    def from_cookie_header(cls, header: str) -> Exchange:
        """Create an Exchange whose request carries a single ``Cookie`` header."""
        return cls(((b"cookie", header.encode("latin-1")),))

    # -- Transport protocol --

    def read_header(self, name: str) -> str | None:
        return _first_header(self._request_headers, name)

    def append_header(self, name: str, value: str) -> None:
        self._response_headers.append((name, value))

    def is_committed(self) -> bool:
        return self._committed

    # -- Response side --

    def commit(self) -> None:
        """Mark the response as sent. Later cookie writes are discarded."""
        self._committed = True

    @property
    def request_headers(self) -> tuple[tuple[bytes, bytes], ...]:
        return self._request_headers

    @property
    def response_headers(self) -> tuple[tuple[str, str], ...]:
        return tuple(self._response_headers)

    @property
    def raw_response_headers(self) -> list[tuple[bytes, bytes]]:
        """Response headers as lowercase latin-1 byte pairs (ASGI shape).

        ``CookieStore`` only writes ASCII: names and values are
        percent-encoded and Path/Domain are validated. A lone surrogate
        in a cookie name or value is the exception, since the codec
        leaves it unescaped; such a header raises ``UnicodeEncodeError``
        here.
        """
        return [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in self._response_headers
        ]

    def set_cookie_headers(self) -> list[str]:
        """All ``Set-Cookie`` values written so far, in order."""
        return [value for name, value in self._response_headers if name.lower() == "set-cookie"]

    async def send_start(self, send: Send, status: int = 200) -> None:
        """Send ``http.response.start`` with the collected headers, then commit."""
        await send(
            {
                "type": "http.response.start",
                "status": status,
                "headers": self.raw_response_headers,
            }
        )
        self.commit()
