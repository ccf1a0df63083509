"""Custom figures and the portrait assembled from them on one screen."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field

from .screen import CantBeMoved, OutOfScreen, Point, Screen, on_screen
from .shapes import Line, Rectangle, Reflectable, Rotatable, Scene, Shape, up


def _tdiv(n: int, d: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d > 0) else -q


def _shift(p: Point, dx: int, dy: int) -> Point:
    return Point(p.x + dx, p.y + dy)


def _scale(p: Point, factor: float) -> Point:
    return Point(int(p.x * factor), int(p.y * factor))


def down(p: Shape, q: Shape) -> None:
    """Place shape ``p`` directly below shape ``q``."""
    n = q.south()
    s = p.north()
    p.move(n.x - s.x, n.y - s.y)


@dataclass
class HalfCircle(Rectangle, Reflectable):
    """Half of a circle inscribed in a rectangle; ``reflected`` picks the half."""

    reflected: bool = True

    def draw(self, screen: Screen) -> None:
        """Plot the arc with Bresenham's circle algorithm."""
        x0 = _tdiv(self.sw.x + self.ne.x, 2)
        y0 = self.sw.y if self.reflected else self.ne.y
        sign = 1 if self.reflected else -1
        radius = _tdiv(self.ne.x - self.sw.x, 2)
        x, y = 0, radius
        delta = 2 - 2 * radius
        try:
            while y >= 0:
                row = int(y0 + sign * y * 0.7)
                screen.put_point(x0 + x, row)
                screen.put_point(x0 - x, row)
                error = 2 * (delta + y) - 1
                if delta < 0 and error <= 0:
                    x += 1
                    delta += 2 * x + 1
                    continue
                error = 2 * (delta - x) - 1
                if delta > 0 and error > 0:
                    y -= 1
                    delta += 1 - 2 * y
                    continue
                x += 1
                delta += 2 * (x - y)
                y -= 1
        except OutOfScreen as ex:
            ex.show()

    def flip_horizontally(self) -> None:
        """A half circle is symmetric left to right; nothing changes."""

    def flip_vertically(self) -> None:
        self.reflected = not self.reflected


@dataclass
class Quad(Rotatable, Reflectable):
    """A four-cornered figure with crossed diagonals."""

    sw: Point
    nw: Point
    se: Point
    ne: Point

    def nwest(self) -> Point:
        return self.nw

    def swest(self) -> Point:
        return self.sw

    def neast(self) -> Point:
        return self.ne

    def seast(self) -> Point:
        return self.se

    def north(self) -> Point:
        return Point(_tdiv(self.sw.x + self.se.x, 2), self.nw.y)

    def south(self) -> Point:
        return Point(_tdiv(self.sw.x + self.se.x, 2), self.se.y)

    def east(self) -> Point:
        return Point(_tdiv(self.se.x + self.nw.x, 2), _tdiv(self.nw.y + self.se.y, 2))

    def west(self) -> Point:
        return Point(_tdiv(self.sw.x + self.nw.x, 2), _tdiv(self.nw.y + self.se.y, 2))

    def draw(self, screen: Screen) -> None:
        sw, nw, se, ne = self.sw, self.nw, self.se, self.ne
        try:
            screen.put_line(sw, nw)
            screen.put_line(nw, ne)
            screen.put_line(ne, se)
            screen.put_line(se, sw)
            if ne.y > nw.y and ne.x != se.x:
                screen.put_line(sw, Point(ne.x, se.y))
                screen.put_line(se, Point(nw.x, sw.y))
            else:
                screen.put_line(sw, Point(se.x, ne.y))
                screen.put_line(se, Point(sw.x, nw.y))
        except OutOfScreen as ex:
            ex.show()

    def move(self, dx: int, dy: int) -> None:
        """Shift the corners one by one; stop and report once one leaves the screen."""
        for corner in ("sw", "ne", "se", "nw"):
            moved = _shift(getattr(self, corner), dx, dy)
            setattr(self, corner, moved)
            if not on_screen(moved.x, moved.y):
                CantBeMoved(moved.x, moved.y).show()
                return

    def rotate_right(self) -> None:
        center = Point(self.south().y, self.east().x)
        p1, p2, p3, p4 = self.sw, self.nw, self.se, self.ne
        self.nw = Point(center.x - (center.y - p2.y), center.y - (p2.x - center.x))
        self.ne = Point(center.x + (p4.y - center.y), center.y - (p4.x - center.x))
        self.sw = Point(center.x - (center.y - p1.y), center.y + (center.x - p1.x))
        self.se = Point(center.x + (p3.y - center.y), center.y + (center.x - p3.x))

    def rotate_left(self) -> None:
        center = Point(self.south().x, self.east().y)
        p1, p2, p3, p4 = self.sw, self.nw, self.se, self.ne
        self.nw = Point(center.x - (p2.y - center.y), center.y - (center.x - p2.x))
        self.ne = Point(center.x - (p4.y - center.y), center.y + (p4.x - center.x))
        self.sw = Point(center.x + (center.y - p1.y), center.y - (center.x - p1.x))
        self.se = Point(center.x + (center.y - p3.y), center.y + (p3.x - center.x))

    def flip_horizontally(self) -> None:
        cx = self.south().x
        self.sw = Point(2 * cx - self.sw.x, self.sw.y)
        self.nw = Point(2 * cx - self.nw.x, self.nw.y)
        self.se = Point(2 * cx - self.se.x, self.se.y)
        self.ne = Point(2 * cx - self.ne.x, self.ne.y)

    def flip_vertically(self) -> None:
        cy = self.east().y
        self.sw = Point(self.sw.x, 2 * cy - self.sw.y)
        self.nw = Point(self.nw.x, 2 * cy - self.nw.y)
        self.se = Point(self.se.x, 2 * cy - self.se.y)
        self.ne = Point(self.ne.x, 2 * cy - self.ne.y)

    def resize(self, factor: float) -> None:
        """Scale every corner ``factor`` times about the origin."""
        self.sw = _scale(self.sw, factor)
        self.nw = _scale(self.nw, factor)
        self.se = _scale(self.se, factor)
        self.ne = _scale(self.ne, factor)


@dataclass
class Face(Rectangle):
    """A rectangular face with two eyes, a mouth and a nose."""

    width: int = field(init=False)
    height: int = field(init=False)
    left_eye: Line = field(init=False)
    right_eye: Line = field(init=False)
    mouth: Line = field(init=False)

    def __post_init__(self) -> None:
        sw = self.swest()
        self.width = self.neast().x - sw.x + 1
        self.height = self.neast().y - sw.y + 1
        eye_y = sw.y + _tdiv(self.height * 3, 4)
        self.left_eye = Line.horizontal(Point(sw.x + 2, eye_y), 2)
        self.right_eye = Line.horizontal(Point(sw.x + self.width - 4, eye_y), 2)
        self.mouth = Line.horizontal(
            Point(sw.x + 2, sw.y + _tdiv(self.height, 4)), self.width - 4
        )

    @property
    def features(self) -> tuple[Line, Line, Line]:
        return (self.left_eye, self.right_eye, self.mouth)

    def draw(self, screen: Screen) -> None:
        super().draw(screen)
        nose = Point(
            _tdiv(self.swest().x + self.neast().x, 2),
            _tdiv(self.swest().y + self.neast().y, 2),
        )
        try:
            screen.put_point(nose.x, nose.y)
        except OutOfScreen as ex:
            ex.show()
        for feature in self.features:
            feature.draw(screen)

    def move(self, dx: int, dy: int) -> None:
        super().move(dx, dy)
        for feature in self.features:
            feature.move(dx, dy)

    def resize(self, factor: float) -> None:
        """A face keeps its size."""


def build_scene() -> Scene:
    """Create the initial set of figures for the portrait."""
    scene = Scene()
    scene.add(Rectangle(Point(0, 0), Point(14, 5)))
    scene.add(Line.horizontal(Point(0, 15), 17))
    scene.add(Face(Point(15, 10), Point(27, 18)))
    scene.add(HalfCircle(Point(40, 10), Point(50, 20)))
    scene.add(Quad(Point(0, 0), Point(6, 24), Point(24, 0), Point(18, 24)))
    scene.add(Quad(Point(0, 0), Point(6, 24), Point(24, 0), Point(18, 24)))
    scene.add(Quad(Point(0, 0), Point(2, 7), Point(10, 0), Point(8, 7)))
    return scene


def _prepare(scene: Scene) -> None:
    hat, brim, face, beard, left_ear, right_ear, _symbol = scene.shapes
    hat.rotate_right()
    brim.resize(2.0)
    face.resize(2.0)
    beard.flip_vertically()
    left_ear.rotate_left()
    left_ear.resize(0.2)
    right_ear.rotate_left()
    right_ear.resize(0.2)
    right_ear.flip_horizontally()


def _assemble(scene: Scene) -> None:
    hat, brim, face, beard, left_ear, right_ear, symbol = scene.shapes
    up(brim, face)
    up(hat, brim)
    left_ear.move(11, 12)
    right_ear.move(23, 12)
    symbol.move(16, 20)
    down(beard, face)


def _show(scene: Scene, title: str) -> None:
    sys.stdout.write(scene.refresh())
    sys.stdout.write(f"{title}\n")
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Draw the figures, prepare them, and assemble the portrait."""
    parser = argparse.ArgumentParser(
        description="Draw a portrait assembled from simple figures."
    )
    parser.parse_args(argv)

    scene = build_scene()
    _show(scene, "=== Generated... ===")
    sys.stdin.read(1)

    _prepare(scene)
    _show(scene, "=== Prepared... ===")
    sys.stdin.read(1)

    _assemble(scene)
    _show(scene, "=== Ready! ===")
    scene.screen.blacken()
    return 0