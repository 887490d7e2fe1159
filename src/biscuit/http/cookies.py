"""Set-Cookie serialization.

``SetCookie`` holds an already-encoded name and value plus resolved
attributes, and renders the header line. Directive order is fixed::

    name=value; Expires=...; Path=...; Domain=...; Secure
"""

from dataclasses import dataclass, field

from biscuit.http.attributes import Attributes


@dataclass(frozen=True, slots=True)
class SetCookie:
    """A ``Set-Cookie`` directive ready to be written to a response."""

    name: str
    value: str
    attributes: Attributes = field(default_factory=Attributes.empty)
    emit_expires: bool = True

    def to_header_value(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string."""
        attrs = self.attributes
        parts = [f"{self.name}={self.value}"]
        expires = attrs.expires()
        if self.emit_expires and expires is not None:
            parts.append(f"Expires={expires.to_http_date()}")
        path = attrs.path()
        if path:
            parts.append(f"Path={path}")
        domain = attrs.domain()
        if domain is not None:
            parts.append(f"Domain={domain}")
        if attrs.secure() is True:
            parts.append("Secure")
        return "; ".join(parts)
