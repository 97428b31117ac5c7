"""Kinematics facade combining forward and inverse solvers for one robot."""
from __future__ import annotations

from typing import Sequence

import numpy as np

from .config import config_from_json, config_to_json
from .ik import IKOptions, is_reachable, solve_ik
from .kinematics import SerialDHRobot, dh_transform
from .types import DHLink, IKResult, RobotConfig


class RobotKinematics(SerialDHRobot):
    """Engine call surface used by renderers and demos.

    Holds an immutable :class:`RobotConfig` and IK options. Every call is
    stateless with respect to them, so one instance can be shared between
    threads.
    """

    def __init__(self, config: RobotConfig, ik_options: IKOptions | None = None):
        super().__init__(config)
        self.ik_options = ik_options if ik_options is not None else IKOptions()

    @classmethod
    def from_json(cls, text: str, ik_options: IKOptions | None = None) -> "RobotKinematics":
        return cls(config_from_json(text), ik_options)

    @classmethod
    def from_preset(cls, name: str, ik_options: IKOptions | None = None) -> "RobotKinematics":
        """Instantiate one of the bundled robots by name."""

        from .presets import load_preset

        return cls(load_preset(name), ik_options)

    def to_json(self) -> str:
        return config_to_json(self.config)

    @staticmethod
    def dh_transform(link: DHLink, angle: float) -> np.ndarray:
        return dh_transform(link, angle)

    def inverse_kinematics(self, target: Sequence[float]) -> IKResult:
        return solve_ik(self, target, self.ik_options)

    def is_reachable(self, target: Sequence[float]) -> bool:
        return is_reachable(self, target, self.ik_options)
