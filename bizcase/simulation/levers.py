"""
Lever Application

Turns a baseline plus an ordered list of lever changes into a new set of
inputs. The baseline is never modified.
"""

import logging
import math
from numbers import Real

from ..core.entities import (
    AdjustmentKind,
    BaselineInputs,
    InputField,
    LeverChange,
    RATE_FIELDS
)

logger = logging.getLogger("bizcase.simulation")


def apply_levers(base: BaselineInputs, changes: list[LeverChange]) -> BaselineInputs:
    """
    Apply changes in order, then clamp every rate field into [0, 1]
    (a NaN rate becomes 0).

    Non-rate fields (costs, hours, ARPA) are left as computed, even when a
    change drives them negative. Changes whose target is not an addressable
    numeric field are skipped.
    """
    result = base.model_copy()

    for change in changes:
        target = change.field
        if not isinstance(target, InputField):
            target = InputField.from_key(target)
        if target is None:
            logger.debug("Skipping change on unknown field %r", change.field)
            continue

        current = target.read(result)
        if isinstance(current, bool) or not isinstance(current, Real):
            continue

        if change.kind == AdjustmentKind.MULTIPLIER:
            result = target.write(result, current * change.magnitude)
        elif change.kind == AdjustmentKind.ADDITIVE:
            result = target.write(result, current + change.magnitude)

    for rate_field in RATE_FIELDS:
        value = rate_field.read(result)
        # NaN collapses to 0
        clamped = 0.0 if math.isnan(value) else min(max(value, 0.0), 1.0)
        if clamped != value:
            result = rate_field.write(result, clamped)

    return result
