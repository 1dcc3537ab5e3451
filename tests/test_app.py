import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from freefall_lab.app import FreefallWindow, main  # noqa: E402
from freefall_lab.freefall import FreefallSimulation  # noqa: E402
from freefall_lab.simulator import RealTimeSimulator  # noqa: E402


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock(10.0)


@pytest.fixture
def window(clock):
    win = FreefallWindow(FreefallSimulation(RealTimeSimulator(clock)))
    yield win
    plt.close("all")


def test_initially_hidden(window):
    assert window.axes.get_visible() is False
    assert window.status_text.get_text() == ""


def test_submit_valid_time_starts_run(window):
    window.text_box.set_val("2")
    assert window.simulation.active is True
    assert window.axes.get_visible() is True
    assert window.error_text.get_text() == ""


def test_submit_invalid_time_shows_error(window):
    window.text_box.set_val("abc")
    assert window.error_text.get_text() == "Not a valid float!"
    assert window.simulation.active is False


def test_refresh_updates_line_and_status(window, clock):
    window.text_box.set_val("2")
    clock.now += 1.0
    window.refresh()
    xs, ys = window.line.get_data()
    assert list(xs) == pytest.approx([0.0, 1.0])
    assert len(ys) == 2
    assert window.status_text.get_text() == window.simulation.summary()


def test_refresh_applies_viewport(window):
    window.simulation.viewport.zoom_out()
    window.refresh()
    vp = window.simulation.viewport
    assert window.axes.get_xlim() == pytest.approx((vp.x_min, vp.x_max))
    assert window.axes.get_ylim() == pytest.approx((vp.y_min, vp.y_max))


def test_main_rejects_invalid_time():
    with pytest.raises(SystemExit) as info:
        main(["--time", "-3"])
    assert info.value.code == 2


def test_main_runs_headless():
    try:
        assert main(["--time", "1"]) == 0
    finally:
        plt.close("all")