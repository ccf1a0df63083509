import pytest

from aisdlab.screen import HEIGHT, WIDTH, Point, Screen, on_screen
from aisdlab.shapes import Line, Rectangle, Scene, Shape, up


def _anchors(shape):
    return [
        shape.north(),
        shape.south(),
        shape.east(),
        shape.west(),
        shape.neast(),
        shape.seast(),
        shape.nwest(),
        shape.swest(),
    ]


def _anchor_invariants(shape):
    assert shape.north().y == shape.neast().y == shape.nwest().y
    assert shape.south().y == shape.seast().y == shape.swest().y
    assert shape.east().x == shape.neast().x == shape.seast().x
    assert shape.west().x == shape.nwest().x == shape.swest().x
    assert shape.north().x == shape.south().x
    assert shape.east().y == shape.west().y
    assert shape.swest().x <= shape.north().x <= shape.neast().x
    assert shape.swest().y <= shape.east().y <= shape.neast().y


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_line_corners_are_bounding_box():
    line = Line(Point(10, 3), Point(2, 7))
    assert line.neast() == Point(10, 7)
    assert line.swest() == Point(2, 3)
    assert line.nwest() == Point(2, 7)
    assert line.seast() == Point(10, 3)
    _anchor_invariants(line)


def test_line_anchors_do_not_depend_on_direction():
    a, b = Point(4, 9), Point(20, 1)
    assert _anchors(Line(a, b)) == _anchors(Line(b, a))


def test_line_midpoint_rounds_toward_zero():
    line = Line(Point(-3, 0), Point(0, 0))
    assert line.north().x == -1


def test_horizontal_line():
    start = Point(0, 15)
    line = Line.horizontal(start, 17)
    assert line.e == start
    assert line.w.y == start.y
    assert line.w.x - line.e.x + 1 == 17
    assert line.swest() == start


def test_line_move_shifts_all_anchors(capsys):
    line = Line(Point(5, 5), Point(20, 9))
    before = _anchors(line)
    line.move(3, -2)
    assert _anchors(line) == [Point(p.x + 3, p.y - 2) for p in before]
    assert capsys.readouterr().err == ""


def test_line_move_off_screen_stops_after_first_end(capsys):
    line = Line(Point(WIDTH - 5, 0), Point(10, 0))
    line.move(10, 0)
    assert not on_screen(*line.w)
    assert line.e == Point(10, 0)
    err = capsys.readouterr().err
    assert err == f"Element can't be moved: ({line.w.x},{line.w.y})\n"


def test_line_resize_keeps_w_and_scales_length():
    line = Line(Point(3, 15), Point(19, 15))
    line.resize(2.0)
    assert line.w == Point(3, 15)
    assert line.e.x - line.w.x == 2 * (19 - 3)
    assert line.e.y == 15


def test_line_resize_truncates():
    line = Line(Point(0, 0), Point(3, 0))
    line.resize(0.5)
    assert line.e == Point(1, 0)


def test_line_draw_marks_endpoints():
    screen = Screen()
    line = Line(Point(1, 1), Point(12, 6))
    line.draw(screen)
    assert screen.is_set(1, 1)
    assert screen.is_set(12, 6)


def test_line_draw_off_screen_reports_and_keeps_visible_part(capsys):
    screen = Screen()
    Line(Point(WIDTH - 2, 0), Point(WIDTH + 2, 0)).draw(screen)
    assert capsys.readouterr().err.startswith("Element out of screen:")
    assert screen.is_set(WIDTH - 1, 0)


def test_rectangle_corners():
    rect = Rectangle(Point(0, 0), Point(14, 5))
    assert rect.neast() == Point(14, 5)
    assert rect.swest() == Point(0, 0)
    assert rect.seast() == Point(14, 0)
    assert rect.nwest() == Point(0, 5)
    _anchor_invariants(rect)


def test_rectangle_rotate_right_keeps_se_corner():
    rect = Rectangle(Point(0, 0), Point(14, 5))
    se = rect.seast()
    rect.rotate_right()
    assert rect.seast() == se
    assert rect.ne.x - rect.sw.x == 2 * 5
    assert rect.ne.y - rect.sw.y == 14 // 2


def test_rectangle_rotate_left_keeps_sw_corner():
    rect = Rectangle(Point(10, 10), Point(30, 16))
    rect.rotate_left()
    assert rect.sw == Point(10, 10)
    assert rect.ne.x - rect.sw.x == 2 * 6
    assert rect.ne.y - rect.sw.y == 20 // 2


def test_rectangle_move_shifts_corners(capsys):
    rect = Rectangle(Point(15, 10), Point(27, 18))
    before = _anchors(rect)
    rect.move(-4, 7)
    assert _anchors(rect) == [Point(p.x - 4, p.y + 7) for p in before]
    assert capsys.readouterr().err == ""


def test_rectangle_move_off_screen_still_moves_and_reports(capsys):
    rect = Rectangle(Point(10, 40), Point(20, 45))
    rect.move(0, 10)
    assert rect.sw == Point(10, 50)
    assert rect.ne == Point(20, 55)
    assert capsys.readouterr().err == "Element can't be moved: (20,55)\n"


def test_rectangle_resize_keeps_sw():
    rect = Rectangle(Point(15, 10), Point(27, 18))
    rect.resize(2.0)
    assert rect.sw == Point(15, 10)
    assert rect.ne.x - rect.sw.x == 2 * 12
    assert rect.ne.y - rect.sw.y == 2 * 8


def test_rectangle_draw_outlines_only():
    screen = Screen()
    rect = Rectangle(Point(2, 2), Point(10, 8))
    rect.draw(screen)
    for corner in (rect.sw, rect.ne, rect.seast(), rect.nwest()):
        assert screen.is_set(*corner)
    assert all(screen.is_set(x, 2) and screen.is_set(x, 8) for x in range(2, 11))
    assert all(screen.is_set(2, y) and screen.is_set(10, y) for y in range(2, 9))
    assert not screen.is_set(6, 5)


def test_scene_refresh_draws_shapes_and_clears_old_marks():
    scene = Scene()
    rect = scene.add(Rectangle(Point(0, 0), Point(5, 5)))
    assert scene.shapes == [rect]
    scene.screen.put_point(100, 30)
    picture = scene.refresh()
    assert picture == scene.screen.render()
    assert not scene.screen.is_set(100, 30)
    assert scene.screen.is_set(0, 0)
    lines = picture.splitlines()
    assert len(lines) == HEIGHT
    assert lines[-1].startswith("******")


def test_scene_keeps_drawing_order():
    scene = Scene()
    first = scene.add(Line(Point(0, 0), Point(3, 0)))
    second = scene.add(Line(Point(0, 2), Point(3, 2)))
    assert scene.shapes == [first, second]
    scene.refresh()
    assert scene.screen.is_set(3, 0) and scene.screen.is_set(3, 2)


def test_up_places_shape_above_other():
    face = Rectangle(Point(15, 10), Point(27, 18))
    brim = Line.horizontal(Point(0, 15), 17)
    up(brim, face)
    assert brim.south().y == face.north().y + 1
    assert brim.south().x == face.north().x


def test_up_stacks_rectangle_on_line():
    brim = Line(Point(10, 20), Point(40, 20))
    hat = Rectangle(Point(0, 0), Point(14, 5))
    up(hat, brim)
    assert hat.south().y == brim.north().y + 1
    assert hat.south().x == brim.north().x