from __future__ import annotations

import math
from typing import Any, Optional

from recipe_editor.domain.models import Quantity


def parse_non_negative(value: Any) -> Optional[Quantity]:
    """
    Parse user input into a non-negative number.

    Blank text counts as 0, negatives are floored at 0 and integral values
    come back as ``int``. Returns None when the input is not a finite number.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    if number <= 0:
        return 0
    return int(number) if number.is_integer() else number
