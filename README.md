# freefall_lab

A small physics tool for objects in free fall without air resistance. It
computes positions with

    x(t) = x0 + v0·t + ½·a·t²

and shows them in a matplotlib window where the distance covered grows on a
position-vs-time plot in real time.

## Installation

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## The window

    freefall-lab
    freefall-lab --time 3

Type a simulation time in seconds and press **Run Free Fall Simulation**
(or press Enter in the text box). With `--time SECONDS` the window opens
with that run already started; a value that is not accepted makes the
command exit with an error.

The plot appears once a run has been started. It is refreshed about every
16 ms, adding a point for the real time elapsed so far, until the chosen
time is reached. **Zoom In** and **Zoom Out** shrink or grow the plot
limits around their centre (the initial limits are 0–5 s and 0–50 m).
Below the plot the window shows the latest sample as
"`<metres>` m traveled in `<seconds>` seconds". Input that is empty, is not
a number, or is zero or negative is rejected with "Not a valid float!" and
the plot is hidden.

## Library use

Positions and tables of positions (`freefall_lab.kinematics`):

```python
from freefall_lab.kinematics import position, free_fall_samples, free_falling_without_air_resistance

position(2.0, 0.0, 0.0, 9.8)                  # about 19.6
for t, x in free_fall_samples(1.0, 0.1, 0.0, 0.0, 9.8):
    print(t, x)

free_falling_without_air_resistance(1.0, 0.1, 0.0, 0.0, 9.8, None)   # prints to stdout
```

`free_fall_samples` yields `(time, position)` pairs from 0 up to, but not
including, `t`, in steps of `delta_t` (which must be positive, otherwise
`ValueError`). In these tabulated samples the velocity term uses the total
time `t`, while the acceleration term uses the sampled time.
`free_falling_without_air_resistance` prints the same samples as lines of
the form `t = 0.1 secondi  x  = 0.049m` to `file`, or to standard output
when `file` is `None`. Defaults are `delta_t=0.01`, `x0=0`, `v0=0`,
`a=9.80`.

A clock that can be paused and resumed (`freefall_lab.simulator`). It takes
any function that returns the current time in seconds, and uses
`time.monotonic` when given none:

```python
import time
from freefall_lab.simulator import RealTimeSimulator

clock = RealTimeSimulator(time.monotonic)
clock.start()      # restart from zero
clock.pause()      # freeze the elapsed time
clock.resume()     # continue from the frozen value
clock.elapsed()    # seconds counted so far
clock.running      # True while counting
clock.start_time   # clock reading the run is measured from
```

The simulation behind the window, usable without a display
(`freefall_lab.freefall`):

```python
import time
from freefall_lab.freefall import FreefallSimulation, InvalidTimeError, parse_simulation_time
from freefall_lab.simulator import RealTimeSimulator

sim = FreefallSimulation(RealTimeSimulator(time.monotonic), 0.1, 0.0, 0.0, 9.8)
sim.run("3")          # raises InvalidTimeError for bad input
sim.tick()            # records the sample for the current elapsed time
print(sim.summary())  # "<metres> m traveled in <seconds> seconds", or None
sim.viewport.zoom_in()

sim.update(3.0)       # record a sample at an explicit time, clamped at the target
sim.times, sim.positions
```

`tick` returns the elapsed time, or `None` when no run is active.
`parse_simulation_time` turns text into a positive number of seconds or
raises `InvalidTimeError` (a `ValueError`).

The window itself is `freefall_lab.app.FreefallWindow`, which takes an
optional `FreefallSimulation`; `refresh()` advances it and redraws.