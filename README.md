# fractview

An interactive window for exploring four escape-time fractals:

- `mandelbrot`: the Mandelbrot set
- `julia`: a Julia set for a chosen constant `c = x + yi`
- `mandeltri`: a Tricorn-style set
- `ship`: the Burning Ship

## Installing

```
pip install .
```

This installs the `fractview` command. The window is drawn with pygame.

## Running

```
fractview mandelbrot
fractview julia -1.26 0.05
fractview mandeltri
fractview ship
```

The set name must be given exactly as shown. The Julia set needs both parts
of its constant; they are read leniently (leading whitespace and sign, digits,
an optional fraction; anything after that is ignored). Some values worth
trying: `0.39 0.6`, `-0.6 0.6`, `-1.0 0.6`.

If the name is missing or unknown, or the Julia constant is incomplete, the
command prints a usage guide and exits with status 1. Closing the window
prints `Window Closed` and exits with status 0.

The window is 1200 × 800 pixels. The first picture uses an iteration limit
scaled by the zoom level (`View.influence`); every redraw after a key or
mouse event uses 100 iterations.

## Controls

| Key / button            | Action                                        |
|-------------------------|-----------------------------------------------|
| `w` `a` `s` `d`         | move the view                                 |
| `;` / keypad `-`        | zoom out                                      |
| `'` / keypad `+`        | zoom in                                       |
| mouse wheel up          | zoom out, shifted by the pointer position     |
| mouse wheel down        | zoom in, shifted by the pointer position      |
| `=`                     | reset the view (Mandelbrot and Julia only)    |
| `0` / keypad `0`        | cycle the colour mode                         |
| `q` / `e`               | shift the colours left / right (`e` also prints the zoom) |
| `i` / `k`               | raise / lower the imaginary part of the Julia constant by 0.001 |
| `l` / `j`               | raise / lower the real part of the Julia constant by 0.001 |
| key code 43 (`+`)       | Julia preset `0.285 + 0.01i`                  |
| `ě` `š` `č` `ř`         | further Julia presets (Czech layout)          |
| `Esc`                   | close the window                              |

Left and middle mouse clicks are ignored.

## Using it from Python

The pieces work without a window:

- `fractview.view.View` holds the visible region, zoom, colour mode and the
  Julia constant; `reset_mandelbrot`, `reset_julia` and `reset_tricorn`
  restore default viewports, and `FractalKind` names the four sets.
- `fractview.fractals` has the iteration counters
  (`mandelbrot_iterations`, `julia_iterations`, `tricorn_iterations`,
  `burning_ship_iterations`), a `Canvas` pixel buffer with `set_pixel` and
  `get_pixel`, and `draw`, which renders the set chosen by `View.kind`.
- `fractview.palette.pixel_color` maps an iteration count to a packed
  `0xRRGGBB` colour.
- `fractview.controls` applies key and mouse events to a `View`
  (`handle_key`, `handle_mouse`); the escape key raises `CloseRequested`.
- `fractview.app.configure` builds a `View` from command-line arguments and
  raises `UsageError` on bad input; `fractview.app.render` draws a view into
  a canvas.
- `fractview.numbers` has `parse_int`, `parse_int_base` and `parse_float`,
  the lenient number readers used for the command line.

```python
from fractview.app import configure, render
from fractview.fractals import Canvas

view = configure(["julia", "-0.8", "0.156"])
canvas = render(view, Canvas(), max_iter=50)
print(hex(canvas.get_pixel(10, 10)))
```

## What it does not do

The viewer only shows pictures on screen: it cannot save images, the window
size is fixed, and there is no way to pick the set or the iteration limit
while it runs.

## Running the tests

```
pip install .[test]
pytest
```