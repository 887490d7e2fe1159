"""Cookie header parsing.

Splits a ``Cookie`` header into decoded name-value pairs. Names are
always percent-decoded; values go through the configured converter
first and fall back to percent-decoding.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from biscuit.errors import ConverterError
from biscuit.http.codec import decode

if TYPE_CHECKING:
    from biscuit.converters import ConverterStrategy

logger = logging.getLogger("biscuit.parser")


def decode_value(
    encoded_value: str, decoded_name: str, converter: ConverterStrategy | None = None
) -> str:
    """Decode one cookie value, preferring *converter* when it yields a result."""
    if converter is not None:
        try:
            value = converter.convert(encoded_value, decoded_name)
        except ConverterError:
            logger.warning(
                "Converter %s failed for cookie %r, using default decoding",
                type(converter).__name__,
                decoded_name,
                exc_info=True,
            )
        else:
            if value is not None:
                return value
    return decode(encoded_value)


def parse_cookies(header: str, converter: ConverterStrategy | None = None) -> dict[str, str]:
    """Parse a ``Cookie`` header value into a decoded name-value dict.

    Pairs are separated by ``"; "``. The name ends at the first ``=``;
    the value may itself contain ``=``. Later duplicates win.

    Malformed input degrades instead of failing: empty pairs are
    skipped and a pair without ``=`` yields an empty value.
    """
    if not header:
        return {}
    cookies: dict[str, str] = {}
    for pair in header.split("; "):
        if not pair:
            continue
        encoded_name, _, encoded_value = pair.partition("=")
        name = decode(encoded_name)
        cookies[name] = decode_value(encoded_value, name, converter)
    return cookies
