"""An analogue or digital wall clock: sizes, layout and hand geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass

DIGIT_PADDING = 10
SECOND_OVERSHOOT = 2.0
SECOND_SETTLE_STEP = 0.08

DAY_FACE = "clock"
NIGHT_FACE = "clock-night"

_ANALOG_SIZE = 200
_DIGITAL_MIN_WIDTH = 316
_DIGITAL_MIN_HEIGHT = 125


def radians(degree: float) -> float:
    """Convert an angle in degrees to radians."""
    return degree * math.pi / 180.0


def _check_range(name: str, value: int, upper: int) -> None:
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be between 0 and {upper}, got {value}")


@dataclass(frozen=True)
class HandAngles:
    """Rotation of each clock hand in radians, clockwise from twelve."""

    hour: float
    minute: float
    second: float


class Clock:
    """State of a clock widget that draws either hands or four digits.

    The second hand is drawn slightly past its true position after each
    tick and then settles back towards it frame by frame.
    """

    def __init__(self, digital: bool = False) -> None:
        self.digital = bool(digital)
        self.second_degree = 0.0
        self.second_mod_degree = 0.0

    def preferred_width(self) -> tuple[int, int]:
        """Return the (minimum, natural) width."""
        minimum = _DIGITAL_MIN_WIDTH if self.digital else _ANALOG_SIZE
        return minimum, _DIGITAL_MIN_WIDTH

    def preferred_height(self) -> tuple[int, int]:
        """Return the (minimum, natural) height."""
        minimum = _DIGITAL_MIN_HEIGHT if self.digital else _ANALOG_SIZE
        return minimum, _ANALOG_SIZE

    def digit_layout(
        self, hour: int, minute: int, digit_width: int
    ) -> list[tuple[int, int]]:
        """Return (digit, x) pairs for the four digits of ``hour:minute``.

        A wider gap is left between the hour and minute pairs.
        """
        _check_range("hour", hour, 23)
        _check_range("minute", minute, 59)
        if digit_width < 0:
            raise ValueError("digit_width must not be negative")
        digits = (*divmod(hour, 10), *divmod(minute, 10))
        offsets = (
            0,
            digit_width + DIGIT_PADDING,
            digit_width * 2 + DIGIT_PADDING * 3,
            digit_width * 3 + DIGIT_PADDING * 4,
        )
        return list(zip(digits, offsets))

    def face(self, hour: int) -> str:
        """Return the name of the dial image to use at ``hour``."""
        _check_range("hour", hour, 23)
        return DAY_FACE if 6 < hour < 18 else NIGHT_FACE

    def hand_angles(self, hour: int, minute: int) -> HandAngles:
        """Return the hand rotations for ``hour:minute`` and the current second."""
        _check_range("hour", hour, 23)
        _check_range("minute", minute, 59)
        return HandAngles(
            hour=radians(360 * hour // 12 + minute * 0.5),
            minute=radians(360 * minute // 60),
            second=radians(self.second_mod_degree),
        )

    def tick(self, second: int) -> None:
        """Move the second hand to ``second``, starting a little past it."""
        _check_range("second", second, 60)
        self.second_degree = float(360 * second // 60)
        self.second_mod_degree = self.second_degree + SECOND_OVERSHOOT

    def animate(self) -> bool:
        """Advance one frame; return whether the clock needs redrawing."""
        if self.second_mod_degree > self.second_degree:
            self.second_mod_degree -= SECOND_SETTLE_STEP
            return True
        return False