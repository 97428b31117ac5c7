"""ABB IRB 120 preset configuration."""
from __future__ import annotations

import numpy as np

from ..types import DHLink, Frames, Limits, RobotConfig


def abb_irb120_config() -> RobotConfig:
    dh = (
        DHLink(0.000, -np.pi / 2, 0.290, 0.0, True),
        DHLink(0.270, 0.0, 0.000, -np.pi / 2, True),
        DHLink(0.070, -np.pi / 2, 0.000, 0.0, True),
        DHLink(0.000, np.pi / 2, 0.302, 0.0, True),
        DHLink(0.000, -np.pi / 2, 0.000, 0.0, True),
        DHLink(0.000, 0.0, 0.072, 0.0, True),  # flange
    )
    q_limits = np.deg2rad(
        np.array(
            [
                [-165, 165],
                [-110, 110],
                [-110, 70],
                [-160, 160],
                [-120, 120],
                [-400, 400],
            ],
            dtype=float,
        )
    )
    return RobotConfig(
        dh=dh,
        limits=Limits(q_min=q_limits[:, 0], q_max=q_limits[:, 1]),
        frames=Frames(),
        name="ABB IRB 120",
        description="6-DOF compact industrial robot",
    )
