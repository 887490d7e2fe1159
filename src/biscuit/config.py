"""Store configuration.

StoreConfig is a frozen dataclass — immutable after creation, passed
explicitly to each ``CookieStore`` rather than held as module state.
"""

from dataclasses import dataclass, field

from biscuit.http.attributes import Attributes


@dataclass(frozen=True, slots=True)
class StoreConfig:
    """Cookie store configuration. Immutable after creation.

    Override what you need::

        config = StoreConfig(defaults=Attributes(domain="example.com", secure=True))
    """

    # Attributes applied to every write, below call-site attributes
    defaults: Attributes = field(default_factory=Attributes.empty)

    # Lowest-precedence path, below ``defaults``
    base_path: str = "/"

    # Write ``Expires=`` when a resolved expiration is present
    emit_expires: bool = True

    # Header names
    cookie_header: str = "cookie"
    set_cookie_header: str = "Set-Cookie"

    def __post_init__(self) -> None:
        # Own a private copy so callers can't mutate defaults in place.
        object.__setattr__(self, "defaults", self.defaults.copy())
