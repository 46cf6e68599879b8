"""Keyboard and mouse handling: panning, zooming, palettes and Julia presets."""

from __future__ import annotations

from .view import HEIGHT, WIDTH, FractalKind, View

KEY_ESCAPE = 65307
KEY_UP = 119
KEY_LEFT = 97
KEY_DOWN = 115
KEY_RIGHT = 100
KEY_RESET = 61
ZOOM_OUT_KEYS = frozenset({505, 59, 65453})
ZOOM_IN_KEYS = frozenset({167, 39, 65451})
COLOR_SWITCH_KEYS = frozenset({233, 48, 65438})

MOUSE_LEFT = 1
MOUSE_MIDDLE = 2
MOUSE_WHEEL_UP = 4
MOUSE_WHEEL_DOWN = 5

ZOOM_STEP = 1.1

_MOVEMENT = {
    KEY_UP: ("-", "i"),
    KEY_LEFT: ("-", "r"),
    KEY_DOWN: ("+", "i"),
    KEY_RIGHT: ("+", "r"),
}

_JULIA_PRESETS = {
    43: (0.285, 0.01),
    492: (-0.3978, 0.62),
    441: (-1.26, 0.05),
    488: (-0.77803, 0.134),
    504: (-0.654760, -0.688200),
}

_JULIA_NUDGES = {
    105: ("imag", 0.001),
    107: ("imag", -0.001),
    108: ("real", 0.001),
    106: ("real", -0.001),
}


class CloseRequested(Exception):
    """Raised when the user asks to close the viewer."""


def adjust_render(view: View, direction: str, axis: str, step: float) -> None:
    """Pan the viewport by ``step`` along ``axis`` ('r' or 'i') in ``direction``.

    Unknown directions or axes leave the view unchanged.
    """
    sign = {"+": 1.0, "-": -1.0}.get(direction)
    if sign is None:
        return
    if axis == "r":
        view.min.real += sign * step
        view.max.real += sign * step
    elif axis == "i":
        view.min.imag += sign * step
        view.max.imag += sign * step


def zoom_in(view: View, factor: float) -> None:
    """Zoom with the keyboard, shifting the viewport towards its centre."""
    move_step = 0.1738 * view.zoom
    view.zoom *= factor
    real_shift = move_step * WIDTH / 800.0 * 1.05
    imag_shift = move_step * HEIGHT / 700.0 * 0.9
    view.min.real += real_shift
    view.max.real += real_shift
    view.min.imag += imag_shift
    view.max.imag += imag_shift


def zoom_out(view: View, factor: float) -> None:
    """Zoom out with the keyboard, shifting the viewport back."""
    move_step = 0.1738 * view.zoom
    view.zoom *= factor
    real_shift = move_step * WIDTH / 800.0
    imag_shift = move_step * HEIGHT / 800.0 * 0.9
    view.min.real -= real_shift
    view.max.real -= real_shift
    view.min.imag -= imag_shift
    view.max.imag -= imag_shift


def mouse_zoom_in(view: View, x: int, y: int, factor: float) -> None:
    """Zoom in towards the pointer at pixel (``x``, ``y``)."""
    view.zoom *= factor
    move_step = 0.1738 * view.zoom
    x_offset = x / (WIDTH // 2)
    y_offset = y / (HEIGHT // 2)
    real_shift = move_step * x_offset * WIDTH / 800.0 * 1.2
    imag_shift = move_step * y_offset * 1.2
    view.min.real += real_shift
    view.max.real += real_shift
    view.min.imag += imag_shift
    view.max.imag += imag_shift


def mouse_zoom_out(view: View, x: int, y: int, factor: float) -> None:
    """Zoom out away from the pointer at pixel (``x``, ``y``)."""
    view.zoom *= factor
    move_step = 0.1738 * view.zoom
    x_offset = x / (WIDTH / 1.9)
    y_offset = y / (HEIGHT / 1.9)
    real_shift = move_step * x_offset * WIDTH / 800.0
    imag_shift = move_step * y_offset * HEIGHT / 700.0
    view.min.real -= real_shift
    view.max.real -= real_shift
    view.min.imag -= imag_shift
    view.max.imag -= imag_shift


def process_movement(keycode: int, view: View, step: float) -> None:
    """Pan the view if ``keycode`` is one of the w, a, s, d keys."""
    move = _MOVEMENT.get(keycode)
    if move is not None:
        adjust_render(view, move[0], move[1], step)


def process_other_keys(keycode: int, view: View) -> None:
    """Handle escape, zoom, reset and palette-mode keys.

    Raises CloseRequested for the escape key.
    """
    if keycode == KEY_ESCAPE:
        raise CloseRequested()
    if keycode in ZOOM_OUT_KEYS:
        zoom_out(view, ZOOM_STEP)
    elif keycode in ZOOM_IN_KEYS:
        zoom_in(view, 1.0 / ZOOM_STEP)
    elif keycode == KEY_RESET:
        if view.kind is FractalKind.JULIA:
            view.reset_julia(view.julia.real, view.julia.imag)
        elif view.kind is FractalKind.MANDELBROT:
            view.reset_mandelbrot()
    elif keycode in COLOR_SWITCH_KEYS:
        view.switch_color_logic()


def process_julia_patterns(keycode: int, view: View) -> None:
    """Select a preset Julia constant or nudge the current one."""
    preset = _JULIA_PRESETS.get(keycode)
    if preset is not None:
        view.julia.real, view.julia.imag = preset
        return
    nudge = _JULIA_NUDGES.get(keycode)
    if nudge is not None:
        part, delta = nudge
        setattr(view.julia, part, getattr(view.julia, part) + delta)


def handle_key(keycode: int, view: View) -> bool:
    """Apply every effect of a key press; returns True as the view needs redrawing.

    Raises CloseRequested for the escape key.
    """
    move_step = 0.1 * view.zoom
    process_movement(keycode, view, move_step)
    process_other_keys(keycode, view)
    view.process_color_shift(keycode)
    process_julia_patterns(keycode, view)
    return True


def handle_mouse(button: int, x: int, y: int, view: View) -> bool:
    """Apply a mouse button press; returns whether the view needs redrawing."""
    if button in (MOUSE_LEFT, MOUSE_MIDDLE):
        return False
    if button == MOUSE_WHEEL_UP:
        mouse_zoom_out(view, x, y, ZOOM_STEP)
    elif button == MOUSE_WHEEL_DOWN:
        mouse_zoom_in(view, x, y, 1.0 / ZOOM_STEP)
    return True