"""Command-line entry point: argument handling and the interactive window."""

from __future__ import annotations

import sys
from typing import Sequence

from .controls import CloseRequested, handle_key, handle_mouse
from .fractals import Canvas, draw
from .numbers import parse_float
from .view import HEIGHT, MAXIMUM_I, WIDTH, FractalKind, View

USAGE = "Usage: fractview [mandelbrot/julia x y/mandeltri]"

_CONTROLS = (
    "controls: w, a s d",
    "         : zoom in    -    ;",
    "         : zoom out   -    :",
    "         : Reset      -    -",
    "         : color move -    q, e",
    "         : color mode -    0",
)

_SPECIAL_KEYS_CZ = {"ě": 492, "š": 441, "č": 488, "ř": 504, "ů": 505}


class UsageError(Exception):
    """Raised when the command line does not describe a fractal to show."""


def _lines(*parts: str) -> str:
    return "".join(f"{part}\n" for part in parts)


def usage_message(detail: str) -> str:
    """Full error text, with the control summary, for a bad command line."""
    return _lines(
        "\n" * 12,
        "le error",
        detail,
        "\n\n\n",
        *_CONTROLS,
        "thanks, come again",
    )


def julia_usage() -> str:
    """Error text shown when the Julia constant is missing."""
    return _lines(
        "\n" * 12,
        "error",
        "Usage GUIDE:     fractview julia X Y\n\n",
        "ex.:              x = 0.39, y = 0.6",
        "ex.:              x = -0.6, y = 0.6",
        "ex.:              x = -1.0, y = 0.6\n\n",
        "z_{n+1} = z_{n}^2 + c",
        "thanks, come again",
    )


def check_set_name(name: str) -> FractalKind:
    """Return the fractal whose name ``name`` starts with, or raise UsageError."""
    for kind in FractalKind:
        if name.startswith(kind.value):
            return kind
    raise UsageError(usage_message(USAGE))


def configure(argv: Sequence[str]) -> View:
    """Build the initial view from the arguments that follow the program name."""
    if not argv:
        raise UsageError(usage_message(USAGE))
    name = argv[0]
    kind = check_set_name(name)
    if name != kind.value:
        raise UsageError(usage_message(USAGE))
    view = View(kind=kind)
    if kind is FractalKind.JULIA:
        if len(argv) < 3:
            raise UsageError(julia_usage())
        view.reset_julia(parse_float(argv[1]), parse_float(argv[2]))
    else:
        view.reset_mandelbrot()
    return view


def render(view: View, canvas: Canvas, max_iter: int | None = None) -> Canvas:
    """Draw the view into ``canvas``; by default scale iterations with the zoom."""
    if max_iter is None:
        max_iter = int(MAXIMUM_I * view.influence())
    draw(view, canvas, max_iter)
    return canvas


def _keysym(event, pygame) -> int:
    special = {
        pygame.K_ESCAPE: 65307,
        pygame.K_KP_MINUS: 65453,
        pygame.K_KP_PLUS: 65451,
        pygame.K_KP0: 65438,
    }
    if event.key in special:
        return special[event.key]
    if event.key < 128:
        return event.key
    char = getattr(event, "unicode", "")
    if char in _SPECIAL_KEYS_CZ:
        return _SPECIAL_KEYS_CZ[char]
    if len(char) == 1 and ord(char) < 256:
        return ord(char)
    return event.key


def _run_window(view: View, title: str) -> int:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(title)
        canvas = Canvas()

        def show() -> None:
            surface = pygame.image.frombuffer(
                canvas.pixels, (canvas.width, canvas.height), "RGBX"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        render(view, canvas)
        show()
        while True:
            event = pygame.event.wait()
            try:
                if event.type == pygame.QUIT:
                    raise CloseRequested()
                if event.type == pygame.KEYDOWN:
                    redraw = handle_key(_keysym(event, pygame), view)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    x, y = event.pos
                    redraw = handle_mouse(event.button, x, y, view)
                else:
                    continue
            except CloseRequested:
                print("Window Closed")
                return 0
            if redraw:
                render(view, canvas, MAXIMUM_I)
                show()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        view = configure(args)
    except UsageError as exc:
        print(exc, end="")
        return 1
    return _run_window(view, args[0])


if __name__ == "__main__":
    sys.exit(main())