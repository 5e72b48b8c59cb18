"""A bar-style CPU load meter and its drawing layout."""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[float, float, float]

BACKGROUND: Color = (0.0, 0.0, 0.0)
DIM: Color = (0.2, 0.4, 0.0)
LIT: Color = (0.6, 1.0, 0.0)

_WIDTH = 80
_HEIGHT = 100
_ROWS = 20
_TOP_OFFSET = 7
_ROW_STEP = 4
_BAR_WIDTH = 30
_BAR_HEIGHT = 3
_COLUMNS = (8, 42)


@dataclass(frozen=True)
class Bar:
    """One filled rectangle of the meter."""

    x: int
    y: int
    width: int
    height: int
    lit: bool

    @property
    def color(self) -> Color:
        return LIT if self.lit else DIM


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


class CpuMeter:
    """A meter showing a load level from 0 to 100 as two columns of bars."""

    background: Color = BACKGROUND

    def __init__(self, sel: int = 0) -> None:
        self.sel = int(sel)

    def set_sel(self, sel: float) -> None:
        """Set the displayed level; fractions are truncated."""
        self.sel = int(sel)

    def preferred_width(self) -> tuple[int, int]:
        """Return the (minimum, natural) width."""
        return _WIDTH, _WIDTH

    def preferred_height(self) -> tuple[int, int]:
        """Return the (minimum, natural) height."""
        return _HEIGHT, _HEIGHT

    def bars(self) -> list[Bar]:
        """Return the rectangles to paint, top row first, left column first."""
        lit_rows = _trunc_div(self.sel, 5)
        return [
            Bar(
                x=x,
                y=_TOP_OFFSET + row * _ROW_STEP,
                width=_BAR_WIDTH,
                height=_BAR_HEIGHT,
                lit=row > _ROWS - lit_rows,
            )
            for row in range(1, _ROWS + 1)
            for x in _COLUMNS
        ]