"""Unit tests for unitkit.api.unit._format_fields."""

from pathlib import Path

from unitkit.api.unit._format_fields import _format_bool, _format_each, _format_joined, _format_scalar
from unitkit.api.unit.RestartPolicy import RestartPolicy


def test_scalar_unset_produces_no_line():
    assert _format_scalar("Description", None) == []


def test_scalar_renders_strings_ints_paths_and_enums():
    assert _format_scalar("Description", "Foo daemon") == ["Description=Foo daemon"]
    assert _format_scalar("RestartSec", 5) == ["RestartSec=5"]
    assert _format_scalar("PIDFile", Path("/run/foo.pid")) == ["PIDFile=/run/foo.pid"]
    assert _format_scalar("Restart", RestartPolicy.ON_FAILURE) == ["Restart=on-failure"]


def test_scalar_does_not_escape_values():
    assert _format_scalar("Description", "a=b; c\\d") == ["Description=a=b; c\\d"]


def test_joined_empty_and_unset_produce_no_line():
    assert _format_joined("After", None) == []
    assert _format_joined("After", []) == []


def test_joined_uses_single_space():
    assert _format_joined("After", ["a", "b"]) == ["After=a b"]


def test_each_writes_one_line_per_value_in_order():
    assert _format_each("ExecStart", ["a", "b"]) == ["ExecStart=a", "ExecStart=b"]


def test_each_keeps_duplicates():
    assert _format_each("ExecStartPre", ["x", "x"]) == ["ExecStartPre=x", "ExecStartPre=x"]


def test_each_unset_produces_no_line():
    assert _format_each("ExecStart", None) == []
    assert _format_each("ExecStart", []) == []


def test_bool():
    assert _format_bool("PrivateTmp", True) == ["PrivateTmp=yes"]
    assert _format_bool("PrivateTmp", False) == ["PrivateTmp=no"]
    assert _format_bool("PrivateTmp", None) == []
