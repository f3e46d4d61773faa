from __future__ import annotations

import random

from ..config import Config
from .models import Spectrum
from .scoring import zone_half_span_positions
from .spectrums import pick_spectrum


def target_range(
    min_target: int | None = None,
    max_target: int | None = None,
) -> tuple[int, int]:
    """Validated inclusive range for target positions.

    Every target in the range must keep the full zone set on the wheel.
    """
    low = Config.MIN_TARGET_POSITION if min_target is None else min_target
    high = Config.MAX_TARGET_POSITION if max_target is None else max_target

    margin = zone_half_span_positions()
    if low > high:
        raise ValueError(f"empty target range [{low}, {high}]")
    if low < margin or high > 100 - margin:
        raise ValueError(
            f"target range [{low}, {high}] lets scoring zones leave the wheel "
            f"(need a margin of {margin:.2f} on each side)"
        )
    return low, high


def generate_target_position(
    rng: random.Random | None = None,
    min_target: int | None = None,
    max_target: int | None = None,
) -> int:
    low, high = target_range(min_target, max_target)
    return (rng or random).randint(low, high)


def generate_round(
    rng: random.Random | None = None,
    min_target: int | None = None,
    max_target: int | None = None,
) -> tuple[Spectrum, int]:
    """Fresh ``(spectrum, target_position)`` pair for a round."""
    spectrum = pick_spectrum(rng)
    target = generate_target_position(rng, min_target, max_target)
    return spectrum, target
