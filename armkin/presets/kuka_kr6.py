"""KUKA KR 6 preset configuration."""
from __future__ import annotations

import numpy as np

from ..types import DHLink, Frames, Limits, RobotConfig


def kuka_kr6_config() -> RobotConfig:
    dh = (
        DHLink(0.025, -np.pi / 2, 0.400, 0.0, True),  # A1
        DHLink(0.455, 0.0, 0.000, 0.0, True),  # A2
        DHLink(0.035, -np.pi / 2, 0.000, 0.0, True),  # A3
        DHLink(0.000, np.pi / 2, 0.420, 0.0, True),  # A4
        DHLink(0.000, -np.pi / 2, 0.000, 0.0, True),  # A5
        DHLink(0.000, 0.0, 0.080, 0.0, True),  # A6 / flange
    )
    q_limits = np.deg2rad(
        np.array(
            [
                [-170, 170],
                [-190, 45],
                [-120, 156],
                [-185, 185],
                [-120, 120],
                [-350, 350],
            ],
            dtype=float,
        )
    )
    return RobotConfig(
        dh=dh,
        limits=Limits(q_min=q_limits[:, 0], q_max=q_limits[:, 1]),
        frames=Frames(),
        name="KUKA KR 6",
        description="6-DOF small payload industrial robot",
    )
