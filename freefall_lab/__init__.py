"""Free-fall kinematics, a pausable real-time clock and a live position plot."""

__version__ = "0.1.0"