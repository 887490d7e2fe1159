"""Tests for biscuit.config — StoreConfig frozen dataclass."""

import pytest

from biscuit.config import StoreConfig
from biscuit.http.attributes import Attributes


class TestStoreConfig:
    def test_defaults(self) -> None:
        cfg = StoreConfig()

        assert cfg.defaults == Attributes.empty()
        assert cfg.base_path == "/"
        assert cfg.emit_expires is True
        assert cfg.cookie_header == "cookie"
        assert cfg.set_cookie_header == "Set-Cookie"

    def test_override(self) -> None:
        cfg = StoreConfig(defaults=Attributes(secure=True), emit_expires=False)

        assert cfg.defaults.secure() is True
        assert cfg.emit_expires is False

    def test_frozen(self) -> None:
        cfg = StoreConfig()

        with pytest.raises(AttributeError):
            cfg.base_path = "/x"  # type: ignore[misc]

    def test_defaults_copied_on_creation(self) -> None:
        attrs = Attributes(path="/a")
        cfg = StoreConfig(defaults=attrs)
        attrs.path("/b")

        assert cfg.defaults.path() == "/a"
