"""Escape-time iterations and renderers for the supported fractal sets."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable

from .palette import pixel_color
from .view import HEIGHT, WIDTH, Complex, FractalKind, View


@dataclass
class Canvas:
    """A pixel buffer; each pixel holds its colour as three leading bytes."""

    width: int = WIDTH
    height: int = HEIGHT
    bytes_per_pixel: int = 4
    pixels: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("canvas dimensions must be positive")
        if self.bytes_per_pixel < 3:
            raise ValueError("a pixel needs at least three bytes")
        self.pixels = bytearray(self.line_length * self.height)

    @property
    def line_length(self) -> int:
        """Number of bytes in one row."""
        return self.width * self.bytes_per_pixel

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return y * self.line_length + x * self.bytes_per_pixel

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low 24 bits of ``color`` as red, green, blue bytes."""
        pos = self._offset(x, y)
        self.pixels[pos] = (color >> 16) & 0xFF
        self.pixels[pos + 1] = (color >> 8) & 0xFF
        self.pixels[pos + 2] = color & 0xFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the packed 0xRRGGBB colour of a pixel."""
        pos = self._offset(x, y)
        r, g, b = self.pixels[pos : pos + 3]
        return (r << 16) | (g << 8) | b


def julia_iterations(z: Complex, c: Complex, max_iter: int) -> int:
    """Steps of z -> z^2 + c from ``z`` before |z| exceeds 2, up to ``max_iter``."""
    zr, zi = z.real, z.imag
    for iteration in range(max_iter):
        zr, zi = zr * zr - zi * zi + c.real, 2 * zr * zi + c.imag
        if zr * zr + zi * zi > 4:
            return iteration
    return max(max_iter, 0)


def mandelbrot_iterations(c: Complex, max_iter: int) -> int:
    """Steps of z -> z^2 + c from zero before |z| exceeds 2."""
    return julia_iterations(Complex(0.0, 0.0), c, max_iter)


def tricorn_iterations(c: Complex, max_iter: int) -> int:
    """Escape count of the tricorn-style map used by the viewer."""
    zr = zi = 0.0
    for iteration in range(max_iter):
        zr, zi = zr * zr - zi * zi + c.real, -4 * zr * zi + c.imag
        if math.sqrt(zr * zr + zi * zi) > 2:
            return iteration
    return max(max_iter, 0)


def burning_ship_iterations(c: Complex, max_iter: int) -> int:
    """Escape count of the burning ship map."""
    zr = zi = 0.0
    for iteration in range(max_iter):
        zr, zi = zr * zr - zi * zi + c.real, abs(2 * zr * zi) + c.imag
        if zr * zr + zi * zi > 4:
            return iteration
    return max(max_iter, 0)


def _render(view: View, canvas: Canvas, iterate: Callable[[Complex], int]) -> None:
    step = (view.max.real - view.min.real) / WIDTH
    for y in range(canvas.height):
        for x in range(canvas.width):
            point = Complex(
                view.min.real + x * step * view.zoom,
                view.min.imag + y * step * view.zoom,
            )
            color = pixel_color(iterate(point), view, x, y)
            canvas.set_pixel(x, y, color)


def draw_mandelbrot(view: View, canvas: Canvas, max_iter: int) -> None:
    """Render the Mandelbrot set into ``canvas``."""
    view.max_iter = max_iter
    _render(view, canvas, lambda c: mandelbrot_iterations(c, view.max_iter))


def draw_julia(view: View, canvas: Canvas, max_iter: int) -> None:
    """Render the Julia set of ``view.julia`` into ``canvas``."""
    view.max_iter = max_iter
    _render(view, canvas, lambda z: julia_iterations(z, view.julia, max_iter))


def draw_tricorn(view: View, canvas: Canvas, max_iter: int) -> None:
    """Render the tricorn set into ``canvas``."""
    view.max_iter = max_iter
    _render(view, canvas, lambda c: tricorn_iterations(c, view.max_iter))


def draw_burning_ship(view: View, canvas: Canvas, max_iter: int) -> None:
    """Render the burning ship with four fifths of ``max_iter`` steps."""
    view.max_iter = int(max_iter * 0.8)
    _render(view, canvas, lambda c: burning_ship_iterations(c, view.max_iter))


_DRAWERS = {
    FractalKind.MANDELBROT: draw_mandelbrot,
    FractalKind.JULIA: draw_julia,
    FractalKind.TRICORN: draw_tricorn,
    FractalKind.BURNING_SHIP: draw_burning_ship,
}


def draw(view: View, canvas: Canvas, max_iter: int) -> None:
    """Render the fractal selected by ``view.kind``."""
    _DRAWERS[view.kind](view, canvas, max_iter)