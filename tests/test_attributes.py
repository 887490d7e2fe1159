"""Tests for biscuit.http.attributes — tri-state fields, merge, extend."""

from datetime import UTC, datetime, timedelta

from biscuit.http.attributes import Attributes, Expiration, extend


class TestFluentAccessors:
    def test_empty_has_everything_unset(self) -> None:
        attrs = Attributes.empty()
        assert attrs.path() is None
        assert attrs.domain() is None
        assert attrs.secure() is None
        assert attrs.expires() is None

    def test_setters_return_self(self) -> None:
        attrs = Attributes.empty()
        assert attrs.path("/a").domain("d").secure(True) is attrs
        assert attrs.path() == "/a"
        assert attrs.domain() == "d"
        assert attrs.secure() is True

    def test_keyword_construction(self) -> None:
        assert Attributes(path="/x", secure=False) == Attributes.empty().path("/x").secure(False)

    def test_repr_lists_set_fields_only(self) -> None:
        assert repr(Attributes(path="/")) == "Attributes(path='/')"


class TestMerge:
    def test_set_fields_overwrite(self) -> None:
        base = Attributes(path="/x", domain="a")
        base.merge(Attributes(path="/y"))
        assert base.path() == "/y"
        assert base.domain() == "a"

    def test_unset_never_reverts(self) -> None:
        base = Attributes(path="/x", secure=True)
        base.merge(Attributes.empty())
        assert base == Attributes(path="/x", secure=True)

    def test_false_and_empty_are_concrete(self) -> None:
        base = Attributes(path="/x", secure=True)
        base.merge(Attributes(path="", secure=False))
        assert base.path() == ""
        assert base.secure() is False

    def test_merge_returns_self(self) -> None:
        base = Attributes.empty()
        assert base.merge(Attributes(domain="d")) is base

    def test_merge_is_idempotent(self) -> None:
        other = Attributes(path="/p", domain="d", expires=Expiration.days(1))
        once = Attributes(secure=True).merge(other)
        twice = Attributes(secure=True).merge(other).merge(other)
        assert once == twice

    def test_merge_into_itself(self) -> None:
        attrs = Attributes(path="/p", secure=False)
        assert attrs.merge(attrs) == Attributes(path="/p", secure=False)


class TestExtend:
    def test_later_sources_win(self) -> None:
        result = extend(Attributes(path="/"), Attributes(path="/x"), Attributes(path="/y"))
        assert result.path() == "/y"

    def test_precedence_layers(self) -> None:
        base = Attributes(path="/")
        assert extend(base, Attributes(path="/x"), Attributes()).path() == "/x"
        assert extend(base, Attributes(), Attributes()).path() == "/"

    def test_inputs_not_modified(self) -> None:
        first = Attributes(path="/a")
        extend(first, Attributes(path="/b"))
        assert first.path() == "/a"

    def test_no_sources(self) -> None:
        assert extend() == Attributes.empty()


class TestCopy:
    def test_copy_is_independent(self) -> None:
        original = Attributes(path="/a")
        clone = original.copy()
        clone.path("/b")
        assert original.path() == "/a"


class TestExpiration:
    def test_days_in_future_and_past(self) -> None:
        assert not Expiration.days(1).is_past()
        assert Expiration.days(-1).is_past()

    def test_days_offset(self) -> None:
        before = datetime.now(UTC)
        exp = Expiration.days(2)
        assert exp.instant - before >= timedelta(days=2) - timedelta(seconds=1)

    def test_http_date(self) -> None:
        exp = Expiration.at(datetime(1994, 11, 6, 8, 49, 37, tzinfo=UTC))
        assert exp.to_http_date() == "Sun, 06 Nov 1994 08:49:37 GMT"

    def test_naive_datetime_taken_as_utc(self) -> None:
        exp = Expiration.at(datetime(2030, 1, 1, 12, 0, 0))
        assert exp.instant.tzinfo is UTC
        assert exp.to_http_date() == "Tue, 01 Jan 2030 12:00:00 GMT"
