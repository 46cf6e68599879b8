"""Colour palettes that turn escape counts into packed RGB values."""

from __future__ import annotations

import math

from .view import HEIGHT, OFFSET, WIDTH, View

_SATURATION = 1.0
_LIGHTNESS = 0.666
_WAVE_PHASE = math.pi + math.pi / 2
_HSL_CHROMA = 0.668
_HSL_MATCH = 0.332


def hsl_defaults() -> tuple[float, float]:
    """Saturation and lightness used by the HSL palette."""
    return _SATURATION, _LIGHTNESS


def chroma(s: float, l: float) -> float:
    """Chroma of an HSL colour."""
    return (1 - abs(2 * l - 1)) * s


def secondary(c: float, h: float) -> float:
    """Second-largest RGB component for hue ``h`` in degrees."""
    return c * (1 - abs(math.fmod(h / 60.0, 2) - 1))


def lightness_match(l: float, c: float) -> float:
    """Amount added to each component to match the lightness."""
    return l - c / 2.0


def correct(component: float, m: float) -> float:
    """Shift a component by ``m`` and scale it to the 0-255 range."""
    return (component + m) * 255


def hsl_to_rgb(h: float) -> tuple[int, int, int]:
    """Convert a hue to the (deliberately over-scaled) RGB triple of the palette."""
    x = _HSL_CHROMA * (1 - abs(math.fmod(h / 60.0, 2) - 1))
    channels = (
        (_HSL_CHROMA + _HSL_MATCH) * 255,
        (x + _HSL_MATCH) * 255,
        _HSL_MATCH * 255,
    )
    r, g, b = (int(correct(value, _HSL_MATCH)) for value in channels)
    return r, g, b


def select_component(r: int, g: int, b: int, i: int) -> int:
    """Pick red for 0, green for 1 and blue for anything else."""
    if i == 0:
        return r
    if i == 1:
        return g
    return b


def wave_channel(t: float, angle: float) -> int:
    """One channel of the cosine-wave palette, in 0..255."""
    gradient = math.cos(2 * math.pi * t + _WAVE_PHASE + angle)
    return int((1 + gradient) * 0.5 * 255)


def _c_remainder(value: int, divisor: int) -> int:
    """Remainder whose sign follows the dividend."""
    rem = abs(value) % divisor
    return -rem if value < 0 else rem


def polynomial_channel(t: float, view: View) -> int:
    """One channel of the polynomial palette; nudges the colour offset."""
    branch = _c_remainder(int(view.c_offset), 3)
    if branch == 0:
        value = 7 * (1 - t) * t * t * t * 255
    elif branch == 1:
        value = 8.5 * (1 - t) * (1 - t) * (1 - t) * t * 255
    else:
        value = 15 * (1 - t) * (1 - t) * t * t * 255
    view.c_offset = int(view.c_offset + OFFSET)
    return int(value)


def wave_rgb(view: View) -> tuple[int, int, int]:
    """RGB from the cosine-wave palette at the view's current ``t``."""
    angle = 2 * math.pi * view.t + view.c_offset
    return (
        wave_channel(view.t, angle),
        wave_channel(view.t + 1.0 / 3.0, angle),
        wave_channel(view.t + 2.0 / 3.0, angle),
    )


def polynomial_rgb(view: View) -> tuple[int, int, int]:
    """RGB from the polynomial palette at the view's current ``t``."""
    r = polynomial_channel(view.t, view)
    g = polynomial_channel(view.t + 1.0 / 3.0, view)
    b = polynomial_channel(view.t + 2.0 / 3.0, view)
    return r, g, b


def color_zero(view: View) -> int:
    """Packed colour of the HSL palette; also stored in ``view.result``."""
    r, g, b = hsl_to_rgb(view.c_offset + view.t * 360.0)
    view.result = 0
    for i in range(3):
        view.result |= select_component(r, g, b, i) << (8 * i)
    return view.result


def pixel_color(iteration: int, view: View, x: int, y: int) -> int:
    """Packed 0xRRGGBB colour of a pixel that escaped after ``iteration`` steps."""
    if iteration == view.max_iter:
        return 0x000000
    view.t = iteration / view.max_iter
    r = g = b = 0
    if x == WIDTH // 2 and y == HEIGHT // 2:
        r = g = b = int(255 * (0.7 + 0.3 * view.t))
    elif view.color_logic == 1:
        r, g, b = wave_rgb(view)
    elif view.color_logic == 2:
        r, g, b = polynomial_rgb(view)
    elif view.color_logic == 0:
        return color_zero(view)
    return (r << 16) | (g << 8) | b