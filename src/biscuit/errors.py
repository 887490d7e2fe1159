"""Biscuit exception hierarchy.

Shared across the codec, parser, and store so every module raises and
catches the same types.
"""


class BiscuitError(Exception):
    """Base for all biscuit-specific errors."""


class ConfigurationError(BiscuitError):
    """Raised when store or converter configuration is invalid.

    Typically raised at construction time, e.g. when an optional
    dependency is missing or a signing key is empty.
    """


class InvalidArgument(BiscuitError, ValueError):  # noqa: N818
    """A blank cookie name, or a ``None`` value or attributes argument.

    Always surfaced to the caller, never recovered.
    """


class CookieParseError(BiscuitError):
    """A cookie value could not be deserialized into the requested shape.

    The underlying cause is chained via ``raise ... from``.
    """


class CookieSerializationError(BiscuitError):
    """A value could not be serialized into a cookie string."""


class ConverterError(BiscuitError):
    """Raised by a converter strategy that cannot decode a value.

    The parser catches these, logs them, and falls back to percent-decoding.
    """
