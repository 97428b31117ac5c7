"""Stäubli RX90B preset configuration."""
from __future__ import annotations

import numpy as np

from ..types import DHLink, Frames, Limits, RobotConfig


def staubli_rx90b_config() -> RobotConfig:
    dh = (
        DHLink(0.225, -np.pi / 2, 0.325, 0.0, True),  # base
        DHLink(0.735, 0.0, 0.000, 0.0, True),  # shoulder
        DHLink(0.175, 0.0, 0.000, 0.0, True),  # elbow
        DHLink(0.000, -np.pi / 2, 0.775, 0.0, True),  # wrist 1
        DHLink(0.000, np.pi / 2, 0.000, 0.0, True),  # wrist 2
        DHLink(0.000, 0.0, 0.100, 0.0, True),  # wrist 3
    )
    q_limits = np.deg2rad(
        np.array(
            [
                [-160, 160],
                [-137.5, 137.5],
                [-142.5, 142.5],
                [-270, 270],
                [-105, 120],
                [-270, 270],
            ],
            dtype=float,
        )
    )
    return RobotConfig(
        dh=dh,
        limits=Limits(q_min=q_limits[:, 0], q_max=q_limits[:, 1]),
        frames=Frames(),
        name="Stäubli RX90B",
        description="6-DOF industrial robot arm",
    )


def three_dof_arm_config() -> RobotConfig:
    """Base, shoulder and elbow of the RX90B: the smallest chain the IK solver accepts."""

    full = staubli_rx90b_config()
    limits = Limits(q_min=np.full(3, -np.pi), q_max=np.full(3, np.pi))
    return RobotConfig(
        dh=full.dh[:3],
        limits=limits,
        frames=Frames(),
        name="3-DOF RX90B arm",
        description="Positioning joints of the RX90B, for inverse kinematics",
    )
