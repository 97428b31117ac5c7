"""Shared dataclasses for the kinematics engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from .errors import StructuralError


def _frozen_array(values, shape: tuple[int, ...] | None = None) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if shape is not None and arr.shape != shape:
        raise StructuralError(f"expected array of shape {shape}, got {arr.shape}")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class DHLink:
    """Standard Denavit–Hartenberg link description."""

    a: float
    alpha: float
    d: float
    theta0: float
    revolute: bool = True

    @property
    def joint_type(self) -> str:
        return "revolute" if self.revolute else "prismatic"


@dataclass(frozen=True)
class Limits:
    """Joint limits for a serial manipulator. Stored, never enforced by the solvers."""

    q_min: np.ndarray
    q_max: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "q_min", _frozen_array(self.q_min))
        object.__setattr__(self, "q_max", _frozen_array(self.q_max))
        if self.q_min.shape != self.q_max.shape:
            raise StructuralError(
                f"joint limit bounds differ in length: {self.q_min.shape[0]} vs {self.q_max.shape[0]}"
            )

    def contains(self, q: np.ndarray) -> bool:
        q = np.asarray(q, dtype=float)
        return bool(np.all(q >= self.q_min) and np.all(q <= self.q_max))


@dataclass(frozen=True)
class Frames:
    """Base and tool offsets. Informational only, not applied to computed transforms."""

    base_offset: np.ndarray = field(default_factory=lambda: np.zeros(3))
    tool_offset: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_offset", _frozen_array(self.base_offset, (3,)))
        object.__setattr__(self, "tool_offset", _frozen_array(self.tool_offset, (3,)))


@dataclass(frozen=True)
class RobotConfig:
    """Configuration describing a serial robot in DH form."""

    dh: Tuple[DHLink, ...]
    limits: Limits
    frames: Frames
    name: str
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "dh", tuple(self.dh))
        n_limits = self.limits.q_min.shape[0]
        if len(self.dh) != n_limits:
            raise StructuralError(
                f"configuration has {len(self.dh)} DH entries but {n_limits} joint limits"
            )

    @property
    def joint_types(self) -> Tuple[str, ...]:
        return tuple(link.joint_type for link in self.dh)


@dataclass(frozen=True, eq=False)
class Pose:
    """End-effector pose expressed in the base frame."""

    position: np.ndarray
    orientation: np.ndarray
    transform: np.ndarray

    @classmethod
    def from_transform(cls, T: np.ndarray) -> "Pose":
        return cls(
            position=_frozen_array(T[:3, 3]),
            orientation=_frozen_array(T[:3, :3]),
            transform=_frozen_array(T),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pose):
            return NotImplemented
        return bool(np.array_equal(self.transform, other.transform))


@dataclass(frozen=True, eq=False)
class IKResult:
    """Candidate joint solutions for a target position.

    ``solutions`` holds zero, one or two joint vectors: the elbow-down solution
    first, then the elbow-up one when it was accepted. ``errors`` gives the
    forward-kinematics position error of each solution, in the same order.
    """

    solutions: Tuple[np.ndarray, ...] = ()
    errors: Tuple[float, ...] = ()

    @property
    def valid(self) -> bool:
        return len(self.solutions) > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IKResult):
            return NotImplemented
        return (
            len(self.solutions) == len(other.solutions)
            and all(np.array_equal(a, b) for a, b in zip(self.solutions, other.solutions))
            and self.errors == other.errors
        )
