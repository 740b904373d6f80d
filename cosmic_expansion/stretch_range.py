"""Expand a stretch range into explicit sample points."""

import math
from typing import List

import numpy as np

from .expansion import ExpansionInputs


def get_stretch_values(inputs: ExpansionInputs) -> List[float]:
    """Sample points for a stretch range, in descending order (past to future).

    The range bounds are returned exactly as given. With ``include_present``
    the present epoch s = 1 is inserted when it falls strictly inside the
    range; with ``include_infinity`` the initial singularity s = inf leads
    the list.

    Args:
        inputs: Range description; ``inputs.stretch`` holds the two bounds

    Returns:
        Descending list of stretch values

    Raises:
        ValueError: for a malformed range
    """
    if len(inputs.stretch) != 2:
        raise ValueError(
            f"A stretch range needs exactly two bounds, got {len(inputs.stretch)}"
        )

    upper, lower = sorted((float(v) for v in inputs.stretch), reverse=True)
    for bound in (upper, lower):
        if not math.isfinite(bound) or bound <= 0:
            raise ValueError(f"Stretch range bounds must be finite and positive, got {bound}")
    if upper == lower:
        raise ValueError(f"Stretch range bounds must differ, got {upper} twice")

    steps = int(inputs.steps)
    if steps < 1:
        raise ValueError(f"steps = {inputs.steps} must be at least 1")

    if inputs.exponential:
        grid = np.geomspace(upper, lower, steps + 1)
    else:
        grid = np.linspace(upper, lower, steps + 1)

    values = [float(s) for s in grid]
    values[0] = upper
    values[-1] = lower

    if inputs.include_present and lower < 1.0 < upper and 1.0 not in values:
        values.append(1.0)
        values.sort(reverse=True)

    if inputs.include_infinity:
        values.insert(0, math.inf)

    return values
