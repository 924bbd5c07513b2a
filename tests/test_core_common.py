# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import MagicMock

import yaml

from xq_lib.core.common import (
    as_cs_list,
    dump_yaml,
    get_panel_width,
    load_yaml_dumper,
)


def test_load_yaml_dumper_is_cached():
    assert load_yaml_dumper() is load_yaml_dumper()


def test_dump_yaml_preserves_key_order():
    output = dump_yaml({"zeta": 1, "alpha": [1, 2]})

    assert output.index("zeta") < output.index("alpha")
    assert yaml.safe_load(output) == {"zeta": 1, "alpha": [1, 2]}


def test_as_cs_list():
    assert as_cs_list(["all.q", "long.q"]) == "all.q,long.q"
    assert as_cs_list(("all.q",)) == "all.q"


def _console(width: int) -> MagicMock:
    console = MagicMock()
    console.size.width = width
    return console


def test_get_panel_width_within_bounds():
    assert get_panel_width(_console(100), 1, 60, 120) == 96


def test_get_panel_width_clamps_to_min():
    assert get_panel_width(_console(50), 1, 60, None) == 60


def test_get_panel_width_clamps_to_max():
    assert get_panel_width(_console(200), 0, None, 120) == 120
