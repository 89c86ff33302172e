"""
Tests for coercion of document values.
"""

import pytest

from wls_exporter.configuration.coercion import coerce_int, coerce_string, coerce_string_list
from wls_exporter.infrastructure.exceptions import InvalidConfigurationValue, ConfigurationError


class TestCoerceInt:

    @pytest.mark.parametrize("raw, expected", [
        (0, 0),
        (7001, 7001),
        ("7001", 7001),
        ("-3", -3),
        ("+12", 12),
        (" 42 ", 42),
    ])
    def test_accepts_integers_and_numeric_strings(self, raw, expected):
        assert coerce_int(raw, "port") == expected

    @pytest.mark.parametrize("raw", ["abc", "", "1.5", "12abc", 1.5, None, True, {"a": 1}, [1]])
    def test_rejects_other_values(self, raw):
        with pytest.raises(InvalidConfigurationValue) as exc_info:
            coerce_int(raw, "startDelaySeconds")

        error = exc_info.value
        assert error.field_name == "startDelaySeconds"
        assert error.context["field_name"] == "startDelaySeconds"
        assert "startDelaySeconds" in error.message

    def test_failure_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError):
            coerce_int("abc", "port")


class TestCoerceString:

    def test_returns_text_unchanged(self):
        assert coerce_string("somehost", "host") == "somehost"

    @pytest.mark.parametrize("raw, expected", [(1234, "1234"), (1.5, "1.5"), (False, "False")])
    def test_renders_scalars(self, raw, expected):
        assert coerce_string(raw, "password") == expected

    @pytest.mark.parametrize("raw", [{"a": 1}, ["a"], None])
    def test_rejects_non_scalars(self, raw):
        with pytest.raises(InvalidConfigurationValue):
            coerce_string(raw, "host")


class TestCoerceStringList:

    def test_keeps_order(self):
        assert coerce_string_list(["b", "a", "c"], "values") == ["b", "a", "c"]

    def test_collapses_duplicates_keeping_first(self):
        assert coerce_string_list(["a", "b", "a", "c", "b"], "values") == ["a", "b", "c"]

    def test_none_is_empty(self):
        assert coerce_string_list(None, "values") == []

    @pytest.mark.parametrize("raw", ["name", {"a": 1}, 3])
    def test_rejects_non_sequences(self, raw):
        with pytest.raises(InvalidConfigurationValue):
            coerce_string_list(raw, "values")

    def test_rejects_nested_collections(self):
        with pytest.raises(InvalidConfigurationValue):
            coerce_string_list(["a", ["b"]], "values")
