"""Tests for rewriting ``-flag=value`` booleans."""

import pytest

from decoder_ring.cli._normalize_bool_flags import _normalize_bool_flags

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("arg", "flag"),
    [
        ("-strip=false", "--no-strip"),
        ("-strip=1", "--strip"),
        ("--strip=F", "--no-strip"),
        ("-emit=False", "--no-emit"),
        ("-emit=TRUE", "--emit"),
        ("-t=0", "--no-emit"),
        ("-encode=t", "--encode"),
        ("--encode=false", "--decode"),
        ("-e=0", "--decode"),
        ("-s=true", "--strip"),
    ],
)
def test_rewrites_boolean_values(arg, flag):
    assert _normalize_bool_flags([arg, "hex"]) == [flag, "hex"]


@pytest.mark.parametrize("arg", ["-emit=maybe", "-strip=", "-emit=yes", "-mode=1", "-encode"])
def test_leaves_other_arguments(arg):
    assert _normalize_bool_flags([arg]) == [arg]


def test_stops_at_double_dash():
    assert _normalize_bool_flags(["-e=1", "--", "-strip=false"]) == ["--encode", "--", "-strip=false"]
