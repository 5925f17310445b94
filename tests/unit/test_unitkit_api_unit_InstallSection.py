"""Unit tests for unitkit.api.unit.InstallSection."""

import pytest

from unitkit.api.unit.InstallSection import InstallSection
from unitkit.api.UnitError import UnitValidationError


def test_default_renders_header_only():
    assert InstallSection().render() == ["[Install]"]


def test_render():
    section = InstallSection(
        default_instance="main",
        also=["foo.socket"],
        wanted_by=["multi-user.target", "graphical.target"],
        alias=["bar.service"],
    )
    assert section.render() == [
        "[Install]",
        "Alias=bar.service",
        "WantedBy=multi-user.target graphical.target",
        "Also=foo.socket",
        "DefaultInstance=main",
    ]


@pytest.mark.parametrize("instance", ["main", "tty1", "a_b-c"])
def test_default_instance_accepted(instance):
    InstallSection(default_instance=instance).validate()


@pytest.mark.parametrize("instance", ["", "a b", "a/b", "x@y", "main\n"])
def test_default_instance_rejected(instance):
    with pytest.raises(UnitValidationError) as exc_info:
        InstallSection(default_instance=instance).validate()
    assert exc_info.value.field == "default_instance"
