"""View state shared by the renderer and the input handlers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

WIDTH = 1200
HEIGHT = 800
MAXIMUM_I = 100
OFFSET = 0.001

# Key codes that nudge the colour offset.
KEY_SHIFT_LEFT = 113
KEY_SHIFT_RIGHT = 101


@dataclass
class Complex:
    """A mutable complex number with separate real and imaginary parts."""

    real: float = 0.0
    imag: float = 0.0


class FractalKind(enum.Enum):
    """The fractal sets the viewer can draw."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    TRICORN = "mandeltri"
    BURNING_SHIP = "ship"


@dataclass
class View:
    """Viewport, colouring and iteration state for one fractal window."""

    kind: FractalKind = FractalKind.MANDELBROT
    max_iter: int = 0
    zoom: float = 0.0
    color_logic: int = 0
    c_offset: int = 0
    t: float = 0.0
    result: int = 0
    center: Complex = field(default_factory=Complex)
    min: Complex = field(default_factory=Complex)
    max: Complex = field(default_factory=Complex)
    julia: Complex = field(default_factory=Complex)

    def _reset_center(self) -> None:
        self.center = Complex(WIDTH // 2, HEIGHT // 2)

    def reset_mandelbrot(self) -> None:
        """Restore the default viewport used by the Mandelbrot-like sets."""
        self.zoom = 0.666 * WIDTH / HEIGHT * 0.5
        self.min.real = -2.0 * WIDTH / 800.0
        self.max.real = 2.0 * WIDTH / 800.0
        self.min.imag = -1.0 * HEIGHT / 600.0
        self.max.imag = 2.0 * HEIGHT / 600.0
        self._reset_center()
        self.color_logic = 2
        self.c_offset = -121

    def reset_julia(self, real: float, imag: float) -> None:
        """Restore the default Julia viewport with the given constant."""
        self.julia.real = real
        self.julia.imag = imag
        self.zoom = 0.5
        self.min.real = -1.00 * WIDTH / 800.0
        self.max.real = 3.00 * WIDTH / 800.0
        self.min.imag = -0.75 * HEIGHT / 600.0
        self.max.imag = 2.25 * HEIGHT / 600.0
        self._reset_center()
        self.color_logic = 2
        self.c_offset = 666

    def reset_tricorn(self) -> None:
        """Restore the default tricorn viewport; the colour offset is kept."""
        self.zoom = 0.666
        self.min.real = -2.0 * WIDTH / 800.0
        self.max.real = 2.0 * WIDTH / 800.0
        self.min.imag = -1.0 * HEIGHT / 600.0
        self.max.imag = 2.0 * HEIGHT / 600.0
        self._reset_center()
        self.color_logic = -121

    def switch_color_logic(self) -> None:
        """Cycle the colouring mode 1 -> 2 -> 0 -> 1; other modes stay put."""
        cycle = {1: 2, 2: 0, 0: 1}
        self.color_logic = cycle.get(self.color_logic, self.color_logic)

    def shift_left(self) -> None:
        """Move the palette one step back."""
        self.c_offset -= 1

    def shift_right(self) -> None:
        """Move the palette one step forward and report the zoom."""
        self.c_offset += 1
        print(f"zoomvalue : {self.zoom:f}")

    def process_color_shift(self, keycode: int) -> None:
        """Apply a palette shift if the key code asks for one."""
        if keycode == KEY_SHIFT_LEFT:
            self.shift_left()
        elif keycode == KEY_SHIFT_RIGHT:
            self.shift_right()

    def influence(self) -> float:
        """Iteration multiplier for the current zoom level."""
        z = self.zoom
        if z > 0.3:
            return 1.0
        if z > 0.2:
            return 0.5
        bands = (
            (0.1, 0.2, 0.8),
            (0.05, 0.1, 0.85),
            (0.01, 0.05, 0.95),
            (0.0003, 0.01, 1.2),
            (0.00004, 0.0003, 1.6),
            (0.0000001, 0.00004, 2.0),
            (0.000000001, 0.0000001, 4.0),
            (0.000000000001, 0.000000001, 8.0),
            (0.000000000000001, 0.000000000001, 12.0),
        )
        for low, high, factor in bands:
            if low < z < high:
                return factor
        return 15.0