"""Forward kinematics for serial DH manipulators."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Sequence

import numpy as np

from .errors import StructuralError
from .types import DHLink, Pose, RobotConfig


class SerialKinematics(Protocol):
    """Protocol for serial manipulators that expose forward kinematics."""

    config: RobotConfig

    @property
    def num_joints(self) -> int:
        """Number of joints of the manipulator."""

    def forward_kinematics(self, q: Sequence[float]) -> Pose:
        """Return the end-effector pose for the joint vector ``q``."""


@dataclass
class FKResult:
    Ts: List[np.ndarray]
    points: np.ndarray


def dh_transform(link: DHLink, q_i: float) -> np.ndarray:
    """Compute the homogeneous transform for a single DH link."""

    if link.revolute:
        theta = link.theta0 + q_i
        d = link.d
    else:
        theta = link.theta0
        d = link.d + q_i
    ca = np.cos(link.alpha)
    sa = np.sin(link.alpha)
    ct = np.cos(theta)
    st = np.sin(theta)
    return np.array(
        [
            [ct, -st * ca, st * sa, link.a * ct],
            [st, ct * ca, -ct * sa, link.a * st],
            [0.0, sa, ca, d],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=float,
    )


class SerialDHRobot:
    """Concrete serial manipulator defined by Denavit–Hartenberg parameters.

    The configuration is only read. Base and tool offsets are carried by the
    configuration but are not applied to any transform computed here.
    """

    def __init__(self, config: RobotConfig):
        self.config = config

    @property
    def num_joints(self) -> int:
        return len(self.config.dh)

    def _check_q(self, q: Sequence[float]) -> np.ndarray:
        q = np.asarray(q, dtype=float).reshape(-1)
        if q.shape[0] != self.num_joints:
            raise StructuralError(f"expected {self.num_joints} joint angles, got {q.shape[0]}")
        return q

    def fk_Ts(self, q: Sequence[float]) -> List[np.ndarray]:
        """Return the base frame followed by the cumulative frame of every joint."""

        q = self._check_q(q)
        T = np.eye(4)
        Ts = [T.copy()]
        for link, qi in zip(self.config.dh, q):
            T = T @ dh_transform(link, float(qi))
            Ts.append(T.copy())
        return Ts

    def forward_kinematics(self, q: Sequence[float]) -> Pose:
        return Pose.from_transform(self.fk_Ts(q)[-1])

    def workspace_radius(self) -> float:
        """Sum of link lengths: an upper bound on reach, ignoring ``d`` offsets and limits."""

        return float(sum(link.a for link in self.config.dh))


def fk(robot: SerialDHRobot, q: Sequence[float]) -> FKResult:
    """Evaluate forward kinematics returning every joint frame and origin."""

    Ts = robot.fk_Ts(q)
    points = np.array([T[:3, 3] for T in Ts], dtype=float)
    return FKResult(Ts=Ts, points=points)
