"""Value converters — pluggable hooks that override cookie value decoding.

A converter receives the still-encoded value and the decoded cookie
name. Returning ``None`` or raising ``ConverterError`` makes the parser
fall back to plain percent-decoding.

``SignedConverter`` verifies values signed with ``itsdangerous``, which
is an optional dependency. If it is not installed,
``SignedConverter.__init__`` raises ``ConfigurationError``.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from biscuit.errors import ConfigurationError, ConverterError
from biscuit.http.codec import decode


@runtime_checkable
class ConverterStrategy(Protocol):
    """Anything with a ``convert(encoded_value, decoded_name)`` method."""

    def convert(self, encoded_value: str, decoded_name: str) -> str | None: ...


class Converter(ABC):
    """Optional base class for converter strategies."""

    @abstractmethod
    def convert(self, encoded_value: str, decoded_name: str) -> str | None:
        """Return the decoded value, ``None`` to defer, or raise ``ConverterError``."""


class SignedConverter(Converter):
    """Sign outgoing values and verify them on the way back in.

    Usage::

        signer = SignedConverter("my-secret-key")
        store.set("uid", signer.sign("42"))

        # Next request:
        store.with_converter(signer).get("uid")  # "42"

    A tampered or unsigned value raises ``ConverterError``, so the store
    returns the raw decoded text instead. Pass ``names`` to restrict
    verification to specific cookies; others are deferred to the default
    decoder.
    """

    __slots__ = ("_names", "_signer")

    def __init__(
        self,
        secret_key: str,
        *,
        salt: str = "biscuit.cookie",
        names: frozenset[str] | None = None,
    ) -> None:
        try:
            from itsdangerous import Signer
        except ImportError:
            msg = (
                "SignedConverter requires the 'itsdangerous' package. "
                "Install it with: pip install biscuit[signing]"
            )
            raise ConfigurationError(msg) from None

        if not secret_key:
            msg = "SignedConverter secret_key must not be empty."
            raise ConfigurationError(msg)

        self._signer = Signer(secret_key, salt=salt)
        self._names = names

    def sign(self, value: str) -> str:
        """Return *value* with a signature appended, ready for ``set``."""
        return self._signer.sign(value).decode("utf-8")

    def convert(self, encoded_value: str, decoded_name: str) -> str | None:
        if self._names is not None and decoded_name not in self._names:
            return None

        from itsdangerous import BadSignature

        try:
            payload = self._signer.unsign(decode(encoded_value))
        except BadSignature as exc:
            msg = f"Bad signature on cookie {decoded_name!r}"
            raise ConverterError(msg) from exc
        return payload.decode("utf-8")
