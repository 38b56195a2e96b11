# ballspectrum

A small brick-breaking arcade game, together with a pure-Python toolkit for
PCM wave buffers, a radix-2 FFT, and helpers that turn voice samples into
signal and spectrum polylines.

## Installing

```
pip install .
```

## Playing

```
ballspectrum
```

The window opens on a menu with **New Game** and **Exit** buttons. Click
**New Game** to launch the ball. Pass `--seed N` to fix the random starting
position of the ball and the choice of bonus bricks.

Controls:

- `a` / `d` move the paddle left and right (and advance the ball one tick)
- `w` doubles the ball speed while it is below the limit
- `s` halves the ball speed while it is above the minimum

Three bricks, picked at random, hide a bonus that drops when the brick
breaks; catching it with the paddle widens the paddle. The first bonus also
speeds the ball up. The game ends when the ball falls well below the bottom
edge, or when you close the window or click **Exit**.

## Library use

The game rules live in `ballspectrum.engine` and can be driven without a
window:

```python
import random
from ballspectrum.engine import Game, GameOver

game = Game(random.Random(1))
game.start()
try:
    for _ in range(1000):
        game.step()
except GameOver:
    pass
```

`ballspectrum.engine` also provides `build_bricks`, `reflect`,
`ranged_rand` and `menu_action`, and the `Brick`, `Paddle` and `MenuAction`
types. `ballspectrum.app` has `render_menu` and `render_game`, which draw
onto a pygame surface, and `main`, which runs the game.

`ballspectrum.fourier` provides `fft`, `is_power_of_two`,
`number_of_bits_needed`, `reverse_bits` and `index_to_frequency`:

```python
from ballspectrum.fourier import fft

real, imag = fft([1.0, 0.0, 0.0, 0.0], None, False)
```

`fft` raises `ValueError` when the length is not a power of two.

`ballspectrum.wave` holds `WaveFormat` (built with `build_format`),
`WaveBuffer` and `Wave` for PCM sample buffers.

`ballspectrum.spectrum` turns recorded bytes into samples
(`voice_from_bytes`), and samples into a time-domain polyline
(`signal_polyline`), the magnitudes of a 2048-point transform
(`spectrum_magnitudes`) and a spectrum polyline (`spectrum_polyline`).

## What it does not do

The package does not record audio from a microphone and has no window for
the signal and spectrum plots: `ballspectrum.spectrum` only computes the
points, and drawing them is left to the caller.

## Running the tests

```
pip install .[test]
pytest
```