"""Tests for biscuit.serialization — JSON collaborator for typed values."""

from dataclasses import dataclass

import pytest

from biscuit.errors import CookieParseError, CookieSerializationError
from biscuit.serialization import JsonSerializer


@dataclass
class Prefs:
    theme: str
    size: int = 1


class TestSerialize:
    def test_scalars(self) -> None:
        s = JsonSerializer()
        assert s.serialize(5) == "5"
        assert s.serialize(True) == "true"
        assert s.serialize("x") == '"x"'

    def test_compact_separators(self) -> None:
        assert JsonSerializer().serialize({"a": [1, 2]}) == '{"a":[1,2]}'

    def test_dataclass(self) -> None:
        assert JsonSerializer().serialize(Prefs("dark", 2)) == '{"theme":"dark","size":2}'

    def test_tuple_as_list(self) -> None:
        assert JsonSerializer().serialize((1, 2)) == "[1,2]"

    def test_unserializable_raises(self) -> None:
        with pytest.raises(CookieSerializationError) as info:
            JsonSerializer().serialize(object())
        assert isinstance(info.value.__cause__, TypeError)


class TestDeserialize:
    def test_no_shape_returns_raw(self) -> None:
        assert JsonSerializer().deserialize('{"a":1}') == {"a": 1}

    def test_matching_shape(self) -> None:
        assert JsonSerializer().deserialize("[1,2]", list) == [1, 2]

    def test_generic_alias_shape(self) -> None:
        assert JsonSerializer().deserialize("[1,2]", list[int]) == [1, 2]

    def test_int_accepted_as_float(self) -> None:
        assert JsonSerializer().deserialize("3", float) == 3.0

    def test_dataclass_shape(self) -> None:
        prefs = JsonSerializer().deserialize('{"theme":"dark","extra":true}', Prefs)
        assert prefs == Prefs("dark")

    def test_dataclass_missing_field(self) -> None:
        with pytest.raises(CookieParseError):
            JsonSerializer().deserialize('{"size":2}', Prefs)

    def test_dataclass_needs_object(self) -> None:
        with pytest.raises(CookieParseError, match="Expected a JSON object"):
            JsonSerializer().deserialize("[1]", Prefs)

    def test_wrong_shape(self) -> None:
        with pytest.raises(CookieParseError, match="Expected dict, got list"):
            JsonSerializer().deserialize("[1]", dict)

    def test_invalid_json_chains_cause(self) -> None:
        with pytest.raises(CookieParseError) as info:
            JsonSerializer().deserialize("not json", dict)
        assert isinstance(info.value.__cause__, ValueError)
