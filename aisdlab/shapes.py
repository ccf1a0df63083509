"""Shapes that draw themselves on a Screen and can be moved and attached."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .screen import CantBeMoved, OutOfScreen, Point, Screen, on_screen


def _div2(n: int) -> int:
    """Halve an integer, rounding toward zero."""
    return n // 2 if n >= 0 else -((-n) // 2)


def _shift(p: Point, dx: int, dy: int) -> Point:
    return Point(p.x + dx, p.y + dy)


def _stays_on_screen(p: Point) -> bool:
    """Report CantBeMoved for a point that left the screen."""
    if on_screen(p.x, p.y):
        return True
    CantBeMoved(p.x, p.y).show()
    return False


class Shape(ABC):
    """A figure with eight anchor points that can be drawn, moved and resized."""

    @abstractmethod
    def north(self) -> Point: ...

    @abstractmethod
    def south(self) -> Point: ...

    @abstractmethod
    def east(self) -> Point: ...

    @abstractmethod
    def west(self) -> Point: ...

    @abstractmethod
    def neast(self) -> Point: ...

    @abstractmethod
    def seast(self) -> Point: ...

    @abstractmethod
    def nwest(self) -> Point: ...

    @abstractmethod
    def swest(self) -> Point: ...

    @abstractmethod
    def draw(self, screen: Screen) -> None: ...

    @abstractmethod
    def move(self, dx: int, dy: int) -> None: ...

    @abstractmethod
    def resize(self, factor: float) -> None: ...


class Rotatable(Shape):
    """A shape that can be turned by a quarter."""

    @abstractmethod
    def rotate_left(self) -> None: ...

    @abstractmethod
    def rotate_right(self) -> None: ...


class Reflectable(Shape):
    """A shape that can be mirrored."""

    @abstractmethod
    def flip_horizontally(self) -> None: ...

    @abstractmethod
    def flip_vertically(self) -> None: ...


@dataclass
class Line(Shape):
    """A straight segment between ``w`` and ``e``."""

    w: Point
    e: Point

    @classmethod
    def horizontal(cls, start: Point, length: int) -> "Line":
        """A horizontal line of ``length`` cells beginning at ``start``."""
        return cls(Point(start.x + length - 1, start.y), start)

    def _mid_x(self) -> int:
        return _div2(self.w.x + self.e.x)

    def _mid_y(self) -> int:
        return _div2(self.w.y + self.e.y)

    def _max_x(self) -> int:
        return max(self.w.x, self.e.x)

    def _min_x(self) -> int:
        return min(self.w.x, self.e.x)

    def _max_y(self) -> int:
        return max(self.w.y, self.e.y)

    def _min_y(self) -> int:
        return min(self.w.y, self.e.y)

    def north(self) -> Point:
        return Point(self._mid_x(), self._max_y())

    def south(self) -> Point:
        return Point(self._mid_x(), self._min_y())

    def east(self) -> Point:
        return Point(self._max_x(), self._mid_y())

    def west(self) -> Point:
        return Point(self._min_x(), self._mid_y())

    def neast(self) -> Point:
        return Point(self._max_x(), self._max_y())

    def seast(self) -> Point:
        return Point(self._max_x(), self._min_y())

    def nwest(self) -> Point:
        return Point(self._min_x(), self._max_y())

    def swest(self) -> Point:
        return Point(self._min_x(), self._min_y())

    def move(self, dx: int, dy: int) -> None:
        """Shift the line; stop and report once an end leaves the screen."""
        self.w = _shift(self.w, dx, dy)
        if not _stays_on_screen(self.w):
            return
        self.e = _shift(self.e, dx, dy)
        _stays_on_screen(self.e)

    def draw(self, screen: Screen) -> None:
        try:
            screen.put_line(self.w, self.e)
        except OutOfScreen as ex:
            ex.show()

    def resize(self, factor: float) -> None:
        """Stretch the line ``factor`` times, keeping ``w`` in place."""
        self.e = Point(
            int(self.w.x + (self.e.x - self.w.x) * factor),
            int(self.w.y + (self.e.y - self.w.y) * factor),
        )


@dataclass
class Rectangle(Rotatable):
    """An axis-aligned rectangle given by its ``sw`` and ``ne`` corners."""

    sw: Point
    ne: Point

    def north(self) -> Point:
        return Point(_div2(self.sw.x + self.ne.x), self.ne.y)

    def south(self) -> Point:
        return Point(_div2(self.sw.x + self.ne.x), self.sw.y)

    def east(self) -> Point:
        return Point(self.ne.x, _div2(self.sw.y + self.ne.y))

    def west(self) -> Point:
        return Point(self.sw.x, _div2(self.sw.y + self.ne.y))

    def neast(self) -> Point:
        return self.ne

    def seast(self) -> Point:
        return Point(self.ne.x, self.sw.y)

    def nwest(self) -> Point:
        return Point(self.sw.x, self.ne.y)

    def swest(self) -> Point:
        return self.sw

    def rotate_right(self) -> None:
        """Turn right about the south-east corner, allowing for the axis scale."""
        width = self.ne.x - self.sw.x
        height = self.ne.y - self.sw.y
        self.sw = Point(self.ne.x - height * 2, self.sw.y)
        self.ne = Point(self.ne.x, self.sw.y + _div2(width))

    def rotate_left(self) -> None:
        """Turn left about the south-west corner, allowing for the axis scale."""
        width = self.ne.x - self.sw.x
        height = self.ne.y - self.sw.y
        self.ne = Point(self.sw.x + height * 2, self.sw.y + _div2(width))

    def move(self, dx: int, dy: int) -> None:
        """Shift both corners, then report the first that left the screen."""
        self.sw = _shift(self.sw, dx, dy)
        self.ne = _shift(self.ne, dx, dy)
        if _stays_on_screen(self.ne):
            _stays_on_screen(self.sw)

    def resize(self, factor: float) -> None:
        """Scale the rectangle ``factor`` times, keeping ``sw`` in place."""
        self.ne = Point(
            int(self.sw.x + (self.ne.x - self.sw.x) * factor),
            int(self.sw.y + (self.ne.y - self.sw.y) * factor),
        )

    def draw(self, screen: Screen) -> None:
        try:
            screen.put_line(self.nwest(), self.ne)
            screen.put_line(self.ne, self.seast())
            screen.put_line(self.seast(), self.sw)
            screen.put_line(self.sw, self.nwest())
        except OutOfScreen as ex:
            ex.show()


@dataclass
class Scene:
    """The shapes shown together on one screen."""

    screen: Screen = field(default_factory=Screen)
    shapes: list[Shape] = field(default_factory=list)

    def add(self, shape: Shape) -> Shape:
        """Register a shape and return it."""
        self.shapes.append(shape)
        return shape

    def refresh(self) -> str:
        """Clear the screen, draw every shape in order and return the picture."""
        self.screen.clear()
        for shape in self.shapes:
            shape.draw(self.screen)
        return self.screen.render()


def up(p: Shape, q: Shape) -> None:
    """Place shape ``p`` directly above shape ``q``."""
    n = q.north()
    s = p.south()
    p.move(n.x - s.x, n.y - s.y + 1)