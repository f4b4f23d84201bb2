"""Tests for tomlenv.flatten."""

import datetime
import tomllib

import pytest

from tomlenv.exceptions import UnsupportedTypeError
from tomlenv.flatten import FlattenedEntry, flatten, flatten_scalar, iter_flattened, join_key


class TestJoinKey:
    def test_without_prefix(self):
        assert join_key(None, "host") == "host"
        assert join_key("", "host") == "host"

    def test_with_prefix(self):
        assert join_key("database", "host") == "database_host"


class TestFlattenScalar:
    def test_string_verbatim(self):
        assert flatten_scalar("k", " spaced value ") == " spaced value "

    def test_integer_decimal(self):
        assert flatten_scalar("count", 42) == "42"
        assert flatten_scalar("offset", -7) == "-7"

    def test_hex_integer_renders_decimal(self):
        value = tomllib.loads("mask = 0xff")["mask"]
        assert flatten_scalar("mask", value) == "255"

    @pytest.mark.parametrize(
        "value",
        [
            1.5,
            True,
            False,
            [1, 2],
            datetime.date(2024, 1, 1),
            datetime.datetime(2024, 1, 1, 12, 0),
            datetime.time(12, 0),
        ],
    )
    def test_unsupported_types(self, value):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            flatten_scalar("some_key", value)

        assert exc_info.value.key == "some_key"
        assert exc_info.value.value == value


class TestFlatten:
    """Tests for flatten and iter_flattened."""

    def test_flat_table(self):
        entries = flatten({"name": "svc", "port": 8080})
        assert entries == [FlattenedEntry("name", "svc"), FlattenedEntry("port", "8080")]

    def test_nested_tables_join_with_underscore(self):
        tree = tomllib.loads('[a.b]\nc = "x"\n')
        assert flatten(tree) == [FlattenedEntry("a_b_c", "x")]

    def test_depth_first_in_stored_order(self):
        tree = tomllib.loads(
            """
            first = "1"

            [outer]
            inner_value = "2"

            [outer.deep]
            leaf = 3

            [second]
            value = "4"
            """
        )
        assert [e.key for e in flatten(tree)] == [
            "first",
            "outer_inner_value",
            "outer_deep_leaf",
            "second_value",
        ]

    def test_key_case_is_preserved(self):
        assert flatten({"Server": {"Host": "h"}}) == [FlattenedEntry("Server_Host", "h")]

    def test_empty_table(self):
        assert flatten({}) == []
        assert flatten({"empty": {}}) == []

    def test_unsupported_leaf_reports_full_key(self):
        tree = tomllib.loads("[server]\nratio = 0.75\n")

        with pytest.raises(UnsupportedTypeError) as exc_info:
            flatten(tree)

        assert exc_info.value.key == "server_ratio"
        assert exc_info.value.details["value_type"] == "float"

    def test_array_of_tables_is_unsupported(self):
        tree = tomllib.loads('[[servers]]\nname = "a"\n')
        with pytest.raises(UnsupportedTypeError):
            flatten(tree)

    def test_iter_yields_entries_before_failure(self):
        entries = iter_flattened({"ok": "1", "bad": 2.0, "later": "3"})

        assert next(entries) == FlattenedEntry("ok", "1")
        with pytest.raises(UnsupportedTypeError):
            next(entries)

    def test_does_not_mutate_tree(self):
        tree = {"a": {"b": "c"}}
        flatten(tree)
        assert tree == {"a": {"b": "c"}}
