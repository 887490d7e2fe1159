"""CookieStore — read and write cookies for one request/response pair.

The store ties the pieces together: it reads the ``Cookie`` header
through its transport, decodes it with the parser, resolves attributes
for writes, percent-encodes, and appends ``Set-Cookie`` lines.

Free-threading safety:
    ``get``, ``get_all``, ``set`` and ``remove`` hold a per-instance lock
    while they touch the transport, since it is shared request/response
    state. Parsing and the converter run after the lock is released, so a
    converter may call back into the same store. Stores derived with
    ``with_converter`` / ``with_defaults`` have their own lock.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Any, TypeVar

from biscuit.config import StoreConfig
from biscuit.converters import ConverterStrategy
from biscuit.errors import CookieParseError, InvalidArgument
from biscuit.http.attributes import Attributes, Expiration, extend
from biscuit.http.codec import encode_name, encode_value
from biscuit.http.cookies import SetCookie
from biscuit.http.parser import parse_cookies
from biscuit.serialization import JsonSerializer
from biscuit.transport import Transport

logger = logging.getLogger("biscuit.store")

T = TypeVar("T")

# Distinguishes "no attributes passed" from an explicit ``None``.
_OMITTED: Any = object()


def _check_name(name: str | None) -> str:
    if not name:
        msg = "Cookie name must not be blank."
        raise InvalidArgument(msg)
    return name


def _check_directive(label: str, value: str | None) -> None:
    """Path and Domain are written verbatim: printable ASCII, no ``;``."""
    if value is None:
        return
    if any(not (" " <= char <= "~") or char == ";" for char in value):
        msg = f"{label} {value!r} must be printable ASCII without ';'."
        raise InvalidArgument(msg)


class CookieStore:
    """Cookie access for one request/response pair.

    Usage::

        from biscuit import Attributes, CookieStore, Exchange

        cookies = CookieStore(Exchange.from_scope(scope))
        theme = cookies.get("theme")
        cookies.set("theme", "dark", Attributes(path="/app", secure=True))
        cookies.remove("legacy")
    """

    __slots__ = ("_config", "_converter", "_lock", "_serializer", "_transport")

    def __init__(
        self,
        transport: Transport,
        config: StoreConfig | None = None,
        *,
        converter: ConverterStrategy | None = None,
        serializer: JsonSerializer | None = None,
    ) -> None:
        self._transport = transport
        self._config = config or StoreConfig()
        self._converter = converter
        self._serializer = serializer or JsonSerializer()
        self._lock = threading.Lock()

    # -- Configuration --

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def converter(self) -> ConverterStrategy | None:
        return self._converter

    @property
    def defaults(self) -> Attributes:
        """A copy of the default attributes applied to every write."""
        return self._config.defaults.copy()

    def with_converter(self, converter: ConverterStrategy | None) -> CookieStore:
        """Return a new store on the same transport with a different converter."""
        return CookieStore(
            self._transport, self._config, converter=converter, serializer=self._serializer
        )

    def with_defaults(self, defaults: Attributes) -> CookieStore:
        """Return a new store on the same transport with different default attributes."""
        return CookieStore(
            self._transport,
            replace(self._config, defaults=defaults),
            converter=self._converter,
            serializer=self._serializer,
        )

    # -- Read --

    def _read(self) -> dict[str, str]:
        with self._lock:
            header = self._transport.read_header(self._config.cookie_header)
        if header is None:
            return {}
        return parse_cookies(header, self._converter)

    def get(self, name: str) -> str | None:
        """Return the decoded value of cookie *name*, or ``None`` if absent."""
        _check_name(name)
        return self._read().get(name)

    def get_as(self, name: str, shape: type[T] | None = None) -> T:
        """Return cookie *name* deserialized from JSON into *shape*.

        Raises ``CookieParseError`` if the cookie is missing or does not
        hold JSON matching *shape*.
        """
        value = self.get(name)
        if value is None:
            msg = f"Cookie {name!r} is not present."
            raise CookieParseError(msg)
        return self._serializer.deserialize(value, shape)

    def get_all(self) -> dict[str, str]:
        """Return every cookie on the request, decoded."""
        return self._read()

    # -- Write --

    def resolve(self, attributes: Attributes) -> Attributes:
        """Resolve call *attributes* over the store defaults and base path."""
        cfg = self._config
        return extend(Attributes(path=cfg.base_path), cfg.defaults, attributes)

    def set(self, name: str, value: Any, attributes: Attributes | None = _OMITTED) -> None:
        """Write cookie *name* with *value*.

        ``str`` values are written as is; anything else is serialized to
        JSON first (``CookieSerializationError`` on failure). If the
        response is already committed, the write is discarded.
        """
        _check_name(name)
        if value is None:
            msg = f"Value for cookie {name!r} must not be None."
            raise InvalidArgument(msg)
        if attributes is None:
            msg = f"Attributes for cookie {name!r} must not be None."
            raise InvalidArgument(msg)
        if attributes is _OMITTED:
            attributes = Attributes.empty()
        if not isinstance(value, str):
            value = self._serializer.serialize(value)

        resolved = self.resolve(attributes)
        _check_directive("Path", resolved.path())
        _check_directive("Domain", resolved.domain())
        cookie = SetCookie(
            name=encode_name(name),
            value=encode_value(value),
            attributes=resolved,
            emit_expires=self._config.emit_expires,
        )
        with self._lock:
            if self._transport.is_committed():
                logger.debug("Response already committed, discarding cookie %r", name)
                return
            self._transport.append_header(self._config.set_cookie_header, cookie.to_header_value())

    def remove(self, name: str, attributes: Attributes | None = _OMITTED) -> None:
        """Expire cookie *name*.

        Pass the same path and domain the cookie was set with, or the
        client will keep it.
        """
        _check_name(name)
        if attributes is None:
            msg = f"Attributes for cookie {name!r} must not be None."
            raise InvalidArgument(msg)
        if attributes is _OMITTED:
            attributes = Attributes.empty()
        self.set(name, "", extend(attributes, Attributes(expires=Expiration.days(-1))))
