import pytest

from fractview.controls import (
    CloseRequested,
    adjust_render,
    handle_key,
    handle_mouse,
    mouse_zoom_in,
    mouse_zoom_out,
    process_julia_patterns,
    process_movement,
    process_other_keys,
    zoom_in,
    zoom_out,
)
from fractview.view import FractalKind, View


def _mandelbrot() -> View:
    view = View(kind=FractalKind.MANDELBROT)
    view.reset_mandelbrot()
    return view


def _julia() -> View:
    view = View(kind=FractalKind.JULIA)
    view.reset_julia(-1.26, 0.05)
    return view


def _bounds(view: View):
    return (view.min.real, view.max.real, view.min.imag, view.max.imag)


@pytest.mark.parametrize(
    "direction, axis, d_real, d_imag",
    [("+", "r", 1, 0), ("-", "r", -1, 0), ("+", "i", 0, 1), ("-", "i", 0, -1)],
)
def test_adjust_render_moves_both_bounds(direction, axis, d_real, d_imag):
    view = _mandelbrot()
    before = _bounds(view)
    adjust_render(view, direction, axis, 0.5)
    after = _bounds(view)
    assert after[0] == pytest.approx(before[0] + 0.5 * d_real)
    assert after[1] == pytest.approx(before[1] + 0.5 * d_real)
    assert after[2] == pytest.approx(before[2] + 0.5 * d_imag)
    assert after[3] == pytest.approx(before[3] + 0.5 * d_imag)


def test_adjust_render_ignores_unknown_axis():
    view = _mandelbrot()
    before = _bounds(view)
    adjust_render(view, "+", "x", 1.0)
    adjust_render(view, "*", "r", 1.0)
    assert _bounds(view) == before


def test_zoom_in_scales_zoom_and_keeps_width():
    view = _mandelbrot()
    zoom = view.zoom
    width = view.max.real - view.min.real
    height = view.max.imag - view.min.imag
    zoom_in(view, 0.5)
    assert view.zoom == pytest.approx(zoom * 0.5)
    assert view.max.real - view.min.real == pytest.approx(width)
    assert view.max.imag - view.min.imag == pytest.approx(height)
    assert view.min.real > -3.0


def test_zoom_out_shifts_bounds_down():
    view = _mandelbrot()
    before = _bounds(view)
    zoom = view.zoom
    zoom_out(view, 1.1)
    assert view.zoom == pytest.approx(zoom * 1.1)
    assert all(a < b for a, b in zip(_bounds(view), before))


def test_mouse_zoom_at_origin_only_changes_zoom():
    view = _mandelbrot()
    before = _bounds(view)
    zoom = view.zoom
    mouse_zoom_in(view, 0, 0, 0.5)
    assert _bounds(view) == before
    assert view.zoom == pytest.approx(zoom * 0.5)
    mouse_zoom_out(view, 0, 0, 2.0)
    assert _bounds(view) == before
    assert view.zoom == pytest.approx(zoom)


def test_mouse_zoom_directions():
    view = _mandelbrot()
    before = _bounds(view)
    mouse_zoom_in(view, 600, 400, 1.0)
    assert all(a > b for a, b in zip(_bounds(view), before))
    view = _mandelbrot()
    mouse_zoom_out(view, 600, 400, 1.0)
    assert all(a < b for a, b in zip(_bounds(view), before))


@pytest.mark.parametrize(
    "key, index, sign", [(119, 2, -1), (97, 0, -1), (115, 2, 1), (100, 0, 1)]
)
def test_process_movement_keys(key, index, sign):
    view = _mandelbrot()
    before = _bounds(view)
    process_movement(key, view, 0.25)
    assert _bounds(view)[index] == pytest.approx(before[index] + sign * 0.25)


def test_process_movement_ignores_other_keys():
    view = _mandelbrot()
    before = _bounds(view)
    process_movement(120, view, 0.25)
    assert _bounds(view) == before


def test_escape_requests_close():
    with pytest.raises(CloseRequested):
        process_other_keys(65307, _mandelbrot())
    with pytest.raises(CloseRequested):
        handle_key(65307, _mandelbrot())


@pytest.mark.parametrize("key", [505, 59, 65453])
def test_zoom_out_keys(key):
    view = _mandelbrot()
    zoom = view.zoom
    process_other_keys(key, view)
    assert view.zoom == pytest.approx(zoom * 1.1)


@pytest.mark.parametrize("key", [167, 39, 65451])
def test_zoom_in_keys(key):
    view = _mandelbrot()
    zoom = view.zoom
    process_other_keys(key, view)
    assert view.zoom == pytest.approx(zoom / 1.1)


def test_reset_key_restores_julia_defaults():
    view = _julia()
    process_other_keys(97, view)
    zoom_in(view, 0.5)
    view.julia.real = 0.3
    process_other_keys(61, view)
    expected = View(kind=FractalKind.JULIA)
    expected.reset_julia(0.3, 0.05)
    assert view == expected


def test_reset_key_restores_mandelbrot_defaults():
    view = _mandelbrot()
    zoom_out(view, 2.0)
    view.c_offset = 5
    process_other_keys(61, view)
    assert view == _mandelbrot()


def test_reset_key_leaves_other_sets_alone():
    view = View(kind=FractalKind.TRICORN)
    view.reset_mandelbrot()
    zoom_in(view, 0.5)
    before = _bounds(view)
    zoom = view.zoom
    process_other_keys(61, view)
    assert _bounds(view) == before
    assert view.zoom == zoom


@pytest.mark.parametrize("key", [233, 48, 65438])
def test_color_switch_keys(key):
    view = _mandelbrot()
    process_other_keys(key, view)
    assert view.color_logic == 0
    process_other_keys(key, view)
    assert view.color_logic == 1


@pytest.mark.parametrize(
    "key, expected",
    [
        (43, (0.285, 0.01)),
        (492, (-0.3978, 0.62)),
        (441, (-1.26, 0.05)),
        (488, (-0.77803, 0.134)),
        (504, (-0.654760, -0.688200)),
    ],
)
def test_julia_presets(key, expected):
    view = _julia()
    process_julia_patterns(key, view)
    assert (view.julia.real, view.julia.imag) == expected


def test_julia_nudges():
    view = _julia()
    process_julia_patterns(105, view)
    assert view.julia.imag == pytest.approx(0.05 + 0.001)
    process_julia_patterns(107, view)
    assert view.julia.imag == pytest.approx(0.05)
    process_julia_patterns(108, view)
    assert view.julia.real == pytest.approx(-1.26 + 0.001)
    process_julia_patterns(106, view)
    assert view.julia.real == pytest.approx(-1.26)


def test_handle_key_moves_by_tenth_of_zoom():
    view = _mandelbrot()
    before = _bounds(view)
    assert handle_key(100, view) is True
    assert view.min.real == pytest.approx(before[0] + 0.1 * view.zoom)


def test_handle_key_shifts_palette():
    view = _mandelbrot()
    offset = view.c_offset
    handle_key(113, view)
    assert view.c_offset == offset - 1
    handle_key(101, view)
    assert view.c_offset == offset


def test_handle_mouse_clicks_do_nothing():
    view = _mandelbrot()
    before = _bounds(view)
    zoom = view.zoom
    assert handle_mouse(1, 100, 100, view) is False
    assert handle_mouse(2, 100, 100, view) is False
    assert _bounds(view) == before
    assert view.zoom == zoom


def test_handle_mouse_wheel_zooms():
    view = _mandelbrot()
    zoom = view.zoom
    assert handle_mouse(4, 0, 0, view) is True
    assert view.zoom == pytest.approx(zoom * 1.1)
    assert handle_mouse(5, 0, 0, view) is True
    assert view.zoom == pytest.approx(zoom)