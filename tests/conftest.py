from __future__ import annotations
from typing import List

import pytest

from standardform import StandardForm, StandardFormNum, STANDARD_FORM_NUM


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def num() -> StandardFormNum:
    return STANDARD_FORM_NUM


@pytest.fixture()
def mixed_values() -> List[StandardForm]:
    """Normalised values spanning signs, decades and the inclusive upper bound."""
    return [
        StandardForm(1.0, 0),
        StandardForm(2.5, -2),
        StandardForm(-7.25, 3),
        StandardForm(9.999, 12),
        StandardForm(10.0, 0),
        StandardForm(-1.0, -128),
        StandardForm(3.14159, 127),
        StandardForm.zero(),
    ]
