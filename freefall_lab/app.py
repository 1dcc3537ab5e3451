"""Interactive free-fall window built on matplotlib."""

from __future__ import annotations

import argparse

import matplotlib.pyplot as plt
from matplotlib.widgets import Button, TextBox

from .freefall import ERROR_MESSAGE, FreefallSimulation, InvalidTimeError, parse_simulation_time

FRAME_INTERVAL_MS = 16


class FreefallWindow:
    """A figure with a time entry, run and zoom buttons and a live plot."""

    def __init__(self, simulation: FreefallSimulation | None = None) -> None:
        self.simulation = simulation if simulation is not None else FreefallSimulation()
        self.show_error = False

        self.figure = plt.figure("Free Fall Simulation", figsize=(9, 6))
        self.axes = self.figure.add_axes((0.1, 0.3, 0.85, 0.6))
        self.axes.set_title("Position vs Time")
        self.axes.set_xlabel("t (s)")
        self.axes.set_ylabel("x (m)")
        (self.line,) = self.axes.plot([], [], label="x(t)")
        self.axes.legend(loc="upper left")

        self.text_box = TextBox(
            self.figure.add_axes((0.25, 0.15, 0.2, 0.05)), "Time (seconds)", initial=""
        )
        self.run_button = Button(
            self.figure.add_axes((0.5, 0.15, 0.25, 0.05)), "Run Free Fall Simulation"
        )
        self.zoom_in_button = Button(self.figure.add_axes((0.1, 0.05, 0.15, 0.05)), "Zoom In")
        self.zoom_out_button = Button(self.figure.add_axes((0.27, 0.05, 0.15, 0.05)), "Zoom Out")
        self.error_text = self.figure.text(0.5, 0.22, "", color="red")
        self.status_text = self.figure.text(0.5, 0.07, "")

        self.text_box.on_submit(self._submit)
        self.run_button.on_clicked(lambda _event: self._submit(self.text_box.text))
        self.zoom_in_button.on_clicked(lambda _event: self._zoom(zoom_in=True))
        self.zoom_out_button.on_clicked(lambda _event: self._zoom(zoom_in=False))
        self.refresh()

    def _submit(self, text: str) -> None:
        try:
            self.simulation.run(text)
        except InvalidTimeError:
            self.show_error = True
        else:
            self.show_error = False
        self.refresh()

    def _zoom(self, zoom_in: bool) -> None:
        viewport = self.simulation.viewport
        if zoom_in:
            viewport.zoom_in()
        else:
            viewport.zoom_out()
        self.refresh()

    def refresh(self) -> None:
        """Advance the simulation and redraw the plot and labels."""
        sim = self.simulation
        sim.tick()
        self.error_text.set_text(ERROR_MESSAGE if self.show_error else "")
        self.axes.set_visible(sim.active)
        self.line.set_data(sim.times, sim.positions)
        vp = sim.viewport
        self.axes.set_xlim(vp.x_min, vp.x_max)
        self.axes.set_ylim(vp.y_min, vp.y_max)
        summary = sim.summary() if sim.active else None
        self.status_text.set_text(summary or "")
        self.figure.canvas.draw_idle()


def main(argv: list[str] | None = None) -> int:
    """Open the free-fall window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="freefall-lab", description="Free fall simulation")

    def _time(text: str) -> str:
        try:
            parse_simulation_time(text)
        except InvalidTimeError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None
        return text

    parser.add_argument("--time", type=_time, help="start a run of this many seconds")
    args = parser.parse_args(argv)

    window = FreefallWindow()
    if args.time is not None:
        window.text_box.set_val(args.time)
    timer = window.figure.canvas.new_timer(interval=FRAME_INTERVAL_MS)
    timer.add_callback(window.refresh)
    timer.start()
    plt.show()
    timer.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())