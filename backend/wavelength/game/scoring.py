"""Proximity scoring on the half-turn spectrum wheel.

Positions in [0, 100] map onto a 180 degree arc, position 0 on the left
(angle pi) and 100 on the right (angle 0). Seven fixed-width zones are
centered on the target angle; a guess scores the value of the zone its angle
falls in, or 0 outside all of them.
"""

from __future__ import annotations

import math

ZONE_ANGLE_DEGREES = 4
ZONE_ANGLE = math.radians(ZONE_ANGLE_DEGREES)

# offset from the target zone -> score
ZONE_SCORES: dict[int, int] = {
    0: 4,
    1: 3,
    -1: 3,
    2: 2,
    -2: 2,
    3: 1,
    -3: 1,
}

MAX_SCORE = max(ZONE_SCORES.values())

# Outermost first, so a boundary shared by two zones resolves to the inner one.
_ZONE_ORDER = sorted(ZONE_SCORES, key=lambda o: (-abs(o), o))


def position_to_angle(position: float) -> float:
    return math.pi - (position / 100) * math.pi


def angle_to_position(angle: float) -> float:
    return (math.pi - angle) / math.pi * 100


def zone_half_span_angle() -> float:
    """Angle from the target to the outer edge of the outermost zone."""
    outer = max(abs(o) for o in ZONE_SCORES)
    return (outer + 0.5) * ZONE_ANGLE


def zone_half_span_positions() -> float:
    return zone_half_span_angle() / math.pi * 100


def zone_bounds(target_position: float) -> list[tuple[int, int, float, float]]:
    """Return ``(offset, score, start_angle, end_angle)`` for every zone.

    Zones are listed outermost first. Neighbouring zones are computed from the
    same half-integer multiplier, so the end of one zone is bit-for-bit the
    start of the next and there are no gaps between them.
    """
    target_angle = position_to_angle(target_position)
    bounds = []
    for offset in _ZONE_ORDER:
        start = target_angle + (offset - 0.5) * ZONE_ANGLE
        end = target_angle + (offset + 0.5) * ZONE_ANGLE
        bounds.append((offset, ZONE_SCORES[offset], start, end))
    return bounds


def zone_position_range(target_position: float) -> tuple[float, float]:
    """Positions covered by the whole zone set, as ``(low, high)``."""
    target_angle = position_to_angle(target_position)
    span = zone_half_span_angle()
    # Larger angles sit further left, i.e. at lower positions.
    return angle_to_position(target_angle + span), angle_to_position(target_angle - span)


def score(target_position: float, guess_position: float) -> int:
    guess_angle = position_to_angle(guess_position)
    result = 0
    for _offset, zone_score, start, end in zone_bounds(target_position):
        if start <= guess_angle <= end:
            result = zone_score
    return result
