"""Cookie attributes with tri-state fields and field-wise merge.

Every field is either unset (``None``) or a concrete value. ``False``
and ``""`` are concrete: merging them overwrites, merging ``None`` never
does. Resolution for an outgoing cookie folds, lowest to highest::

    extend(Attributes(path="/"), store_defaults, call_attributes)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from email.utils import format_datetime
from typing import Any, overload

_UNSET: Any = object()


@dataclass(frozen=True, slots=True)
class Expiration:
    """An absolute expiry instant, stored in UTC."""

    instant: datetime

    @classmethod
    def days(cls, count: float) -> Expiration:
        """Expire *count* days from now. Negative counts are in the past."""
        return cls(datetime.now(UTC) + timedelta(days=count))

    @classmethod
    def at(cls, instant: datetime) -> Expiration:
        """Expire at *instant*. Naive datetimes are taken as UTC."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        return cls(instant.astimezone(UTC))

    def is_past(self) -> bool:
        return self.instant <= datetime.now(UTC)

    def to_http_date(self) -> str:
        """Render as an IMF-fixdate, e.g. ``Sun, 06 Nov 1994 08:49:37 GMT``."""
        return format_datetime(self.instant, usegmt=True)


class Attributes:
    """Fluent, mergeable cookie attributes.

    Each field name doubles as getter and setter::

        attrs = Attributes.empty().path("/app").secure(True)
        attrs.path()  # "/app"

    Not thread-safe: share an instance across threads only with
    external locking, or hand each caller a ``copy()``.
    """

    __slots__ = ("_domain", "_expires", "_path", "_secure")

    def __init__(
        self,
        *,
        expires: Expiration | None = None,
        path: str | None = None,
        domain: str | None = None,
        secure: bool | None = None,
    ) -> None:
        self._expires = expires
        self._path = path
        self._domain = domain
        self._secure = secure

    @classmethod
    def empty(cls) -> Attributes:
        return cls()

    # -- Fluent accessors --

    @overload
    def expires(self) -> Expiration | None: ...
    @overload
    def expires(self, value: Expiration | None) -> Attributes: ...
    def expires(self, value: Any = _UNSET) -> Any:
        if value is _UNSET:
            return self._expires
        self._expires = value
        return self

    @overload
    def path(self) -> str | None: ...
    @overload
    def path(self, value: str | None) -> Attributes: ...
    def path(self, value: Any = _UNSET) -> Any:
        if value is _UNSET:
            return self._path
        self._path = value
        return self

    @overload
    def domain(self) -> str | None: ...
    @overload
    def domain(self, value: str | None) -> Attributes: ...
    def domain(self, value: Any = _UNSET) -> Any:
        if value is _UNSET:
            return self._domain
        self._domain = value
        return self

    @overload
    def secure(self) -> bool | None: ...
    @overload
    def secure(self, value: bool | None) -> Attributes: ...
    def secure(self, value: Any = _UNSET) -> Any:
        if value is _UNSET:
            return self._secure
        self._secure = value
        return self

    # -- Merge --

    def merge(self, other: Attributes) -> Attributes:
        """Overwrite this instance's fields with *other*'s set fields.

        Mutates in place and returns ``self``.
        """
        if other._path is not None:
            self._path = other._path
        if other._domain is not None:
            self._domain = other._domain
        if other._expires is not None:
            self._expires = other._expires
        if other._secure is not None:
            self._secure = other._secure
        return self

    def copy(self) -> Attributes:
        return Attributes(
            expires=self._expires, path=self._path, domain=self._domain, secure=self._secure
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented
        return (self._expires, self._path, self._domain, self._secure) == (
            other._expires,
            other._path,
            other._domain,
            other._secure,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = [
            f"{name}={value!r}"
            for name, value in (
                ("expires", self._expires),
                ("path", self._path),
                ("domain", self._domain),
                ("secure", self._secure),
            )
            if value is not None
        ]
        return f"Attributes({', '.join(fields)})"


def extend(*sources: Attributes) -> Attributes:
    """Fold *sources* left to right into a fresh ``Attributes``.

    Later sources win for every field they set. The inputs are not
    modified.
    """
    result = Attributes.empty()
    for source in sources:
        result.merge(source)
    return result
