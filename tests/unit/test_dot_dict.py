"""Tests for DotDict."""

import pytest

from eventmanager.dot_dict import DotDict, DotDictPathNotFoundError, DotDictReservedKeyError

pytestmark = pytest.mark.unit


class TestDotDict:
    """Tests for attribute and dotted-path access."""

    def test_attribute_access(self):
        d = DotDict(logging={"level": "info"}, name="x")

        assert d.name == "x"
        assert d.logging.level == "info"
        assert isinstance(d.logging, DotDict)

    def test_lists_of_dicts(self):
        d = DotDict(items=[{"a": 1}, 2])

        assert d.items[0].a == 1
        assert d.items[1] == 2
        assert d.to_dict() == {"items": [{"a": 1}, 2]}

    def test_get_and_has(self):
        d = DotDict(ui={"prompt": "> "})

        assert d.get("ui.prompt") == "> "
        assert d.get("ui.missing", "default") == "default"
        assert d.get("ui.prompt.deeper") is None
        assert d.has("ui")
        assert not d.has("logging.level")

    def test_reserved_key(self):
        with pytest.raises(DotDictReservedKeyError, match="reserved") as exc_info:
            DotDict(get=1)
        assert exc_info.value.key == "get"
        assert isinstance(exc_info.value, ValueError)

    def test_self_is_a_valid_key(self):
        d = DotDict(**{"self": {"self": 1}})
        assert d.get("self.self") == 1

    def test_mapping_protocol(self):
        d = DotDict(a=1, b=2)

        assert len(d) == 2
        assert sorted(d) == ["a", "b"]
        assert "a" in d
        assert "_private" not in d
        assert d["a"] == 1
        with pytest.raises(KeyError):
            d["c"]

    def test_clear_keeps_private_attributes(self):
        d = DotDict(a=1)
        d._hidden = True
        d.clear()

        assert len(d) == 0
        assert d._hidden is True

    def test_equality(self):
        assert DotDict(a={"b": 1}) == {"a": {"b": 1}}
        assert DotDict(a=1) == DotDict(a=1)
        assert DotDict(a=1) != DotDict(a=2)

    def test_repr(self):
        assert repr(DotDict(a=1)) == "DotDict({'a': 1})"

    def test_path_error_is_key_error(self):
        error = DotDictPathNotFoundError("a.b")
        assert isinstance(error, KeyError)
        assert error.path == "a.b"
