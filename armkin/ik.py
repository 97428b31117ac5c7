"""Grid-search inverse kinematics for three-revolute-joint arms.

The solver sweeps the base angle over a full turn. For every sample it places
the shoulder, closes the shoulder/elbow/target triangle with the law of
cosines and verifies the candidate through forward kinematics. The sweep is a
left fold over candidates in ascending base angle that keeps the strictly
smaller position error, so the first candidate found wins ties.

Two branches are produced. The elbow-down branch accepts its best candidate
whatever its error. The elbow-up branch reuses the negated elbow angle of that
candidate and is only accepted below ``IKOptions.elbow_up_tolerance``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Iterator, Optional, Sequence

import numpy as np

from .errors import StructuralError
from .kinematics import SerialKinematics
from .types import IKResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IKOptions:
    step: float = np.pi / 180
    elbow_up_tolerance: float = 0.1
    trace: bool = False

    def __post_init__(self) -> None:
        if not self.step > 0:
            raise ValueError("step must be > 0")
        if not self.elbow_up_tolerance > 0:
            raise ValueError("elbow_up_tolerance must be > 0")


@dataclass(frozen=True)
class _Candidate:
    solution: np.ndarray
    error: float


@dataclass(frozen=True)
class _ArmGeometry:
    a1: float
    a2: float
    a3: float
    d1: float
    d2: float

    @property
    def max_reach(self) -> float:
        return self.a1 + self.a2 + self.a3

    def shoulder_to_target(self, theta1: float, target: np.ndarray) -> np.ndarray:
        shoulder = np.array([self.a1 * np.cos(theta1), self.a1 * np.sin(theta1), self.d1 + self.d2])
        return target - shoulder


def _trace(options: IKOptions, event: str, **payload) -> None:
    if options.trace and logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s %s", event, payload, extra={"ik": {"event": event, **payload}})


def sweep_angles(step: float) -> np.ndarray:
    """Base angles ``k * step`` covering ``[0, 2*pi)``."""

    samples = int(np.ceil(2.0 * np.pi / step - 1e-9))
    return step * np.arange(samples, dtype=float)


def keep_better(best: Optional[_Candidate], candidate: _Candidate) -> _Candidate:
    """Fold step: replace the running best only on a strictly smaller error."""

    if best is None or candidate.error < best.error:
        return candidate
    return best


def _best(candidates: Iterable[_Candidate]) -> Optional[_Candidate]:
    return reduce(keep_better, candidates, None)


def _shoulder_angle(geom: _ArmGeometry, delta: np.ndarray, L: float) -> Optional[float]:
    # a target sitting on the shoulder leaves the triangle undefined
    if L == 0.0:
        return None
    cos_alpha = (geom.a2**2 + L**2 - geom.a3**2) / (2.0 * geom.a2 * L)
    if abs(cos_alpha) > 1.0:
        return None
    alpha = np.arccos(cos_alpha)
    beta = np.arctan2(delta[2], np.hypot(delta[0], delta[1]))
    return float(beta - alpha)


def _verify(robot: SerialKinematics, solution: Sequence[float], target: np.ndarray) -> _Candidate:
    q = np.array(solution, dtype=float)
    pose = robot.forward_kinematics(q)
    return _Candidate(solution=q, error=float(np.linalg.norm(pose.position - target)))


def _elbow_down_candidates(
    robot: SerialKinematics, geom: _ArmGeometry, target: np.ndarray, thetas: np.ndarray
) -> Iterator[_Candidate]:
    for theta1 in thetas:
        delta = geom.shoulder_to_target(theta1, target)
        L = float(np.linalg.norm(delta))
        if L > geom.a2 + geom.a3:
            continue
        cos_elbow = (geom.a2**2 + geom.a3**2 - L**2) / (2.0 * geom.a2 * geom.a3)
        if abs(cos_elbow) > 1.0:
            continue
        theta3 = float(np.arccos(cos_elbow))
        theta2 = _shoulder_angle(geom, delta, L)
        if theta2 is None:
            continue
        yield _verify(robot, (theta1, theta2, theta3), target)


def _elbow_up_candidates(
    robot: SerialKinematics,
    geom: _ArmGeometry,
    target: np.ndarray,
    thetas: np.ndarray,
    theta3: float,
) -> Iterator[_Candidate]:
    for theta1 in thetas:
        delta = geom.shoulder_to_target(theta1, target)
        L = float(np.linalg.norm(delta))
        if L > geom.a2 + geom.a3:
            continue
        theta2 = _shoulder_angle(geom, delta, L)
        if theta2 is None:
            continue
        yield _verify(robot, (theta1, theta2, theta3), target)


def _check_target(target: Sequence[float]) -> np.ndarray:
    p = np.asarray(target, dtype=float).reshape(-1)
    if p.shape[0] != 3:
        raise StructuralError(f"expected 3 target coordinates, got {p.shape[0]}")
    return p


def solve_ik(
    robot: SerialKinematics, target: Sequence[float], options: IKOptions | None = None
) -> IKResult:
    """Search joint angles placing the end-effector at ``target``.

    Returns an invalid, empty result when the arm is not a three-revolute-joint
    chain or when no candidate survives the sweep. Only a malformed target
    raises.
    """

    if options is None:
        options = IKOptions()
    p = _check_target(target)

    config = robot.config
    if robot.num_joints != 3 or not all(link.revolute for link in config.dh):
        _trace(options, "unsupported", joint_types=config.joint_types)
        return IKResult()

    l1, l2, l3 = config.dh
    geom = _ArmGeometry(a1=l1.a, a2=l2.a, a3=l3.a, d1=l1.d, d2=l2.d)
    r = float(np.hypot(p[0], p[1]))
    h = float(p[2] - geom.d1)
    _trace(options, "start", target=p.tolist(), a=(geom.a1, geom.a2, geom.a3), d=(geom.d1, geom.d2), r=r, h=h)

    if r > geom.max_reach:
        _trace(options, "beyond_reach", r=r, max_reach=geom.max_reach)
        return IKResult()
    if geom.a2 == 0.0 or geom.a3 == 0.0:
        _trace(options, "degenerate_links", a2=geom.a2, a3=geom.a3)
        return IKResult()

    thetas = sweep_angles(options.step)
    down = _best(_elbow_down_candidates(robot, geom, p, thetas))
    if down is None:
        _trace(options, "no_candidate")
        return IKResult()
    _trace(options, "elbow_down", solution=down.solution.tolist(), error=down.error)

    tol = options.elbow_up_tolerance
    up = _best(
        c for c in _elbow_up_candidates(robot, geom, p, thetas, -down.solution[2]) if c.error < tol
    )
    if up is None:
        _trace(options, "elbow_up_rejected", tolerance=tol)
        return IKResult(solutions=(down.solution,), errors=(down.error,))

    _trace(options, "elbow_up", solution=up.solution.tolist(), error=up.error)
    return IKResult(solutions=(down.solution, up.solution), errors=(down.error, up.error))


def is_reachable(robot: SerialKinematics, target: Sequence[float], options: IKOptions | None = None) -> bool:
    return solve_ik(robot, target, options).valid
