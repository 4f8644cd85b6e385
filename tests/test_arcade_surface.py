from mapeditor.rendering.surface import ArcadeSurface, Line, Rect


class _RecordingArcade:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if not name.startswith("draw_"):
            raise AttributeError(name)

        def _record(*args):
            self.calls.append((name, args))

        return _record


def test_fill_flips_y_axis():
    arcade = _RecordingArcade()
    surface = ArcadeSurface(arcade, canvas_height=100)
    surface.set_color((1, 2, 3))

    surface.fill(Rect(10, 20, 16, 16))

    assert arcade.calls == [("draw_lbwh_rectangle_filled", (10, 64, 16, 16, (1, 2, 3)))]


def test_outline_uses_stroke_width():
    arcade = _RecordingArcade()
    surface = ArcadeSurface(arcade, canvas_height=100, offset_x=5, offset_y=7)
    surface.set_color((9, 9, 9))
    surface.set_stroke_width(2)

    surface.draw_outline(Rect(0, 0, 16, 16))

    assert arcade.calls == [("draw_lbwh_rectangle_outline", (5, 91, 16, 16, (9, 9, 9), 2.0))]


def test_line_endpoints_flipped():
    arcade = _RecordingArcade()
    surface = ArcadeSurface(arcade, canvas_height=50)
    surface.set_color((255, 255, 255))

    surface.draw_line(Line(0, 0, 16, 16))

    assert arcade.calls == [("draw_line", (0, 50, 16, 34, (255, 255, 255), 1.0))]
