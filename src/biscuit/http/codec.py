"""Percent-encoding for cookie names and values.

``encode`` walks the input once and builds a single output buffer.
Digits, ASCII letters, and the cookie-safe punctuation set always pass
through; callers can widen that set with an ``exceptions`` collection.
Everything else becomes ``%XX`` per UTF-8 byte, uppercase hex.

``decode`` only understands what ``encode`` produces: runs of uppercase
``%XX`` groups. Lowercase or malformed sequences are left as they are.
"""

import logging
import re
from collections.abc import Collection

logger = logging.getLogger("biscuit.codec")

SAFE_PUNCTUATION = frozenset("!#$&'*+-.^_`|~")

# Characters left readable in values when they occur (JSON-ish payloads).
VALUE_PASSTHROUGH = frozenset("/:<=>?@[]{}")

_PERCENT_RUN = re.compile(r"(?:%[0-9A-F]{2})+")


def _is_safe(char: str) -> bool:
    if "0" <= char <= "9" or "A" <= char <= "Z" or "a" <= char <= "z":
        return True
    return char in SAFE_PUNCTUATION


def encode(decoded: str, exceptions: Collection[str] = frozenset()) -> str:
    """Percent-encode *decoded*, leaving characters in *exceptions* as is.

    A character with no UTF-8 representation (a lone surrogate) is
    left unescaped and logged rather than failing the whole string.
    """
    out: list[str] = []
    for char in decoded:
        if _is_safe(char) or char in exceptions:
            out.append(char)
            continue
        try:
            raw = char.encode("utf-8")
        except UnicodeEncodeError:
            logger.warning("Cannot encode character %r, leaving it unescaped", char)
            out.append(char)
            continue
        out.extend(f"%{byte:02X}" for byte in raw)
    return "".join(out)


def encode_name(name: str) -> str:
    """Percent-encode a cookie name with no extra exceptions."""
    return encode(name)


def encode_value(value: str) -> str:
    """Percent-encode a cookie value.

    Any of ``/ : < = > ? @ [ ] { }`` present in *value* stays readable
    for the whole call, so structured payloads like ``{"a":1}`` keep
    their shape. Everything else outside the safe set is escaped.
    """
    exceptions = {char for char in value if char in VALUE_PASSTHROUGH}
    return encode(value, exceptions)


def _decode_run(match: re.Match[str]) -> str:
    run = match.group()
    try:
        raw = bytes(int(run[i + 1 : i + 3], 16) for i in range(0, len(run), 3))
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        # Invalid UTF-8, e.g. a lone continuation byte.
        logger.warning("Cannot decode percent sequence %r, leaving it intact", run)
        return run


def decode(encoded: str) -> str:
    """Decode every run of ``%XX`` groups in *encoded* as UTF-8.

    Each contiguous run is decoded as one byte sequence so multi-byte
    characters come back whole. Runs that are not valid UTF-8 are
    left untouched.
    """
    if "%" not in encoded:
        return encoded
    return _PERCENT_RUN.sub(_decode_run, encoded)
