import math
import pytest

from standardform import StandardForm
from standardform.fmt import fmt_float, fmt_scientific, fmt_engineering


# -----------------------------
# fmt_float
# -----------------------------

@pytest.mark.parametrize(
    "x,expected",
    [
        (2.0, "2"),
        (100.0, "100"),
        (1.5, "1.5"),
        (0.025, "0.025"),
        (1e-7, "0.0000001"),
        (1e16, "10000000000000000"),
        (-0.0, "-0"),
        (-7.25, "-7.25"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "NaN"),
    ],
)
def test_fmt_float_plain_notation(x, expected):
    print(f"[fmt_float] {x!r} -> {fmt_float(x)!r}, expected {expected!r}")
    assert fmt_float(x) == expected


def test_component_notations():
    print("[fmt-components] (2.5, -2) in both notations")
    assert fmt_scientific(2.5, -2) == "2.5e-2"
    assert fmt_engineering(2.5, -2) == "2.5*10^-2"
    assert fmt_scientific(2.0, 4) == "2e4"


# -----------------------------
# StandardForm rendering
# -----------------------------

def test_scientific_and_engineering_notation():
    sf = StandardForm(2.5, -2)
    print("[notation] ->", sf.to_scientific_notation(), sf.to_engineering_notation())
    assert sf.to_scientific_notation() == "2.5e-2"
    assert sf.to_engineering_notation() == "2.5*10^-2"
    assert StandardForm(-1.23, 7).to_scientific_notation() == "-1.23e7"


@pytest.mark.parametrize(
    "sf,expected",
    [
        (StandardForm(2.5, 3), "2500"),
        (StandardForm(4.0, 4), "40000"),
        (StandardForm(1.0, 5), "1e5"),
        (StandardForm(1.23, 5), "1.23e5"),
        (StandardForm(2.5, -2), "0.025"),
        (StandardForm(-1.5, 1), "-15"),
        (StandardForm.zero(), "0"),
    ],
)
def test_display_switches_to_scientific_above_exponent_four(sf, expected):
    print(f"[display] ({sf.mantissa}, {sf.exponent}) -> {str(sf)!r}")
    assert str(sf) == expected


def test_repr_shows_components():
    assert repr(StandardForm(2.5, 3)) == "StandardForm(mantissa=2.5, exponent=3)"


def test_format_specs():
    sf = StandardForm(2.5, 3)
    print("[format] '', 'e', 'eng', '.1f'")
    assert f"{sf}" == "2500"
    assert f"{sf:e}" == "2.5e3"
    assert f"{sf:eng}" == "2.5*10^3"
    assert f"{sf:.1f}" == "2500.0"
