"""State and logic of the interactive free-fall simulation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .kinematics import position
from .simulator import RealTimeSimulator

ERROR_MESSAGE = "Not a valid float!"


class InvalidTimeError(ValueError):
    """Raised when a simulation time cannot be accepted."""


def parse_simulation_time(text: str) -> float:
    """Parse a strictly positive number of seconds entered by the user."""
    if not text or text != text.rstrip() or "_" in text:
        raise InvalidTimeError(ERROR_MESSAGE)
    stripped = text.lstrip()
    try:
        value = float(stripped)
    except ValueError:
        try:
            value = float.fromhex(stripped)
        except ValueError:
            raise InvalidTimeError(ERROR_MESSAGE) from None
    if not value > 0.0:
        raise InvalidTimeError(ERROR_MESSAGE)
    return value


@dataclass
class Viewport:
    """Axis limits of the position/time plot."""

    x_min: float = 0.0
    x_max: float = 5.0
    y_min: float = 0.0
    y_max: float = 50.0

    def zoom_in(self) -> None:
        """Shrink both ranges around their centre."""
        x_range = (self.x_max - self.x_min) * 0.5
        y_range = (self.y_max - self.y_min) * 0.5
        self.x_min += x_range * 0.25
        self.x_max -= x_range * 0.25
        self.y_min += y_range * 0.25
        self.y_max -= y_range * 0.25

    def zoom_out(self) -> None:
        """Grow both ranges around their centre."""
        x_range = self.x_max - self.x_min
        y_range = self.y_max - self.y_min
        self.x_min -= x_range * 0.5
        self.x_max += x_range * 0.5
        self.y_min -= y_range * 0.5
        self.y_max += y_range * 0.5


@dataclass
class FreefallSimulation:
    """Samples the position of a falling body against real time."""

    simulator: RealTimeSimulator = field(default_factory=RealTimeSimulator)
    delta_t: float = 0.1
    x0: float = 0.0
    v0: float = 0.0
    a: float = 9.8
    target_time: float = field(default=0.0, init=False)
    current_t: float = field(default=0.0, init=False)
    active: bool = field(default=False, init=False)
    times: list[float] = field(default_factory=list, init=False)
    positions: list[float] = field(default_factory=list, init=False)
    viewport: Viewport = field(default_factory=Viewport, init=False)

    def run(self, text: str) -> None:
        """Start a new run lasting the number of seconds in ``text``."""
        try:
            value = parse_simulation_time(text)
        except InvalidTimeError:
            self.active = False
            raise
        self.active = True
        self.target_time = value
        self.current_t = 0.0
        self.times.clear()
        self.positions.clear()
        self.simulator.start()

    def _position(self, t: float) -> float:
        return position(t, self.x0, self.v0, self.a)

    def update(self, current_t: float) -> None:
        """Record the sample for ``current_t``, clamping at the target time."""
        if current_t <= self.target_time and (not self.times or current_t > self.times[-1]):
            self.times.append(current_t)
            self.positions.append(self._position(current_t))
        if current_t >= self.target_time and (not self.times or self.times[-1] < self.target_time):
            self.times.append(self.target_time)
            self.positions.append(self._position(self.target_time))

    def tick(self) -> float | None:
        """Advance to the current real time; return it, or None when idle."""
        if not self.active:
            return None
        self.current_t = self.simulator.elapsed()
        if self.current_t <= self.target_time:
            self.update(self.current_t)
        return self.current_t

    def summary(self) -> str | None:
        """Describe the latest sample, or None when nothing was sampled."""
        if not self.positions:
            return None
        return f"{self.positions[-1]:.2f} m traveled in {self.times[-1]:.2f} seconds"