"""A fixed-size character screen with point and line plotting."""

from __future__ import annotations

import sys
from typing import NamedTuple

WIDTH = 150
HEIGHT = 50
BLACK = "*"
WHITE = "."


class Point(NamedTuple):
    """A position on the screen; ``y`` grows upwards."""

    x: int = 0
    y: int = 0


class _PositionError(Exception):
    """An error tied to one screen position."""

    _template = "({x},{y})"

    def __init__(self, x: int = 0, y: int = 0) -> None:
        self.x = x
        self.y = y
        super().__init__(self._template.format(x=x, y=y))

    def show(self) -> str:
        """Write the report line to standard error and return it."""
        message = f"{self}\n"
        sys.stderr.write(message)
        sys.stderr.flush()
        return message


class OutOfScreen(_PositionError):
    """Raised when something is plotted outside the screen."""

    _template = "Element out of screen: ({x},{y})"

    def show(self) -> str:
        """Write the report line to standard error and return it."""
        return super().show()


class CantBeMoved(_PositionError):
    """Reported when a shape is moved so that a point leaves the screen."""

    _template = "Element can't be moved: ({x},{y})"

    def show(self) -> str:
        """Write the report line to standard error and return it."""
        return super().show()


def on_screen(x: int, y: int) -> bool:
    """Tell whether the position lies on the screen."""
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


class Screen:
    """A WIDTH x HEIGHT grid of characters, white until drawn on."""

    def __init__(self) -> None:
        self._rows: list[list[str]] = []
        self.clear()

    def _fill(self, char: str) -> None:
        self._rows = [[char] * WIDTH for _ in range(HEIGHT)]

    def clear(self) -> None:
        """Make every cell white."""
        self._fill(WHITE)

    def blacken(self) -> None:
        """Make every cell black."""
        self._fill(BLACK)

    def put_point(self, x: int, y: int) -> None:
        """Blacken one cell; raise OutOfScreen when it is off the screen."""
        if not on_screen(x, y):
            raise OutOfScreen(x, y)
        self._rows[y][x] = BLACK

    def put_line(self, a: Point, b: Point) -> None:
        """Draw a straight line from ``a`` to ``b`` point by point."""
        x0, y0 = a
        x1, y1 = b
        step_x = 1 if x1 >= x0 else -1
        step_y = 1 if y1 >= y0 else -1
        span_x = abs(x1 - x0)
        span_y = abs(y1 - y0)
        two_a = 2 * span_x
        two_b = 2 * span_y
        x_crit = two_a - span_y
        eps = 0
        while True:
            self.put_point(x0, y0)
            if x0 == x1 and y0 == y1:
                break
            if eps <= x_crit:
                x0 += step_x
                eps += two_b
            if eps >= span_x or span_x < span_y:
                y0 += step_y
                eps -= two_a

    def is_set(self, x: int, y: int) -> bool:
        """Tell whether the cell is black; cells off the screen never are."""
        return on_screen(x, y) and self._rows[y][x] == BLACK

    def render(self) -> str:
        """Return the screen as text, top row first, one line per row."""
        return "".join("".join(row) + "\n" for row in reversed(self._rows))