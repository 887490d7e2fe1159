"""Biscuit — cookie encoding and attribute resolution for HTTP headers.

Reads ``Cookie`` headers into decoded name-value pairs and writes
``Set-Cookie`` lines with percent-encoded names and values and
attributes resolved against store defaults.

Basic usage::

    from biscuit import Attributes, CookieStore, Exchange

    exchange = Exchange.from_scope(scope)
    cookies = CookieStore(exchange)

    cookies.get("theme")
    cookies.set("cart", ["apple", "pear"], Attributes(path="/shop"))
    cookies.remove("legacy")

Signed values (``pip install biscuit[signing]``)::

    from biscuit import SignedConverter

    signer = SignedConverter("s3cr3t")
    cookies.set("uid", signer.sign("42"))
    cookies.with_converter(signer).get("uid")
"""

__version__ = "0.1.0"
__all__ = [
    "Attributes",
    "BiscuitError",
    "ConfigurationError",
    "Converter",
    "ConverterError",
    "ConverterStrategy",
    "CookieParseError",
    "CookieSerializationError",
    "CookieStore",
    "Exchange",
    "Expiration",
    "InvalidArgument",
    "SignedConverter",
    "StoreConfig",
    "Transport",
    "decode",
    "encode",
    "parse_cookies",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import biscuit`` fast while providing a clean top-level API.
    """
    if name == "CookieStore":
        from biscuit.store import CookieStore

        return CookieStore

    if name == "StoreConfig":
        from biscuit.config import StoreConfig

        return StoreConfig

    if name in ("Attributes", "Expiration"):
        from biscuit.http import attributes as _attrs

        return getattr(_attrs, name)

    if name in ("decode", "encode"):
        from biscuit.http import codec as _codec

        return getattr(_codec, name)

    if name == "parse_cookies":
        from biscuit.http.parser import parse_cookies

        return parse_cookies

    if name in ("Exchange", "Transport"):
        from biscuit import transport as _transport

        return getattr(_transport, name)

    if name in ("Converter", "ConverterStrategy", "SignedConverter"):
        from biscuit import converters as _converters

        return getattr(_converters, name)

    if name in (
        "BiscuitError",
        "ConfigurationError",
        "ConverterError",
        "CookieParseError",
        "CookieSerializationError",
        "InvalidArgument",
    ):
        from biscuit import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
