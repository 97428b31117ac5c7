import numpy as np
import pytest

from armkin import DHLink, Frames, Limits, RobotConfig, RobotKinematics, create_robot


def make_robot(links, name="test robot", q_min=None, q_max=None, **kwargs) -> RobotKinematics:
    n = len(links)
    config = RobotConfig(
        dh=tuple(links),
        limits=Limits(
            q_min=np.full(n, -np.pi) if q_min is None else q_min,
            q_max=np.full(n, np.pi) if q_max is None else q_max,
        ),
        frames=Frames(),
        name=name,
    )
    return RobotKinematics(config, **kwargs)


@pytest.fixture
def scenario_a_robot() -> RobotKinematics:
    return make_robot(
        [
            DHLink(a=0.2, alpha=0.0, d=0.1, theta0=0.0),
            DHLink(a=0.3, alpha=np.pi / 2, d=0.0, theta0=0.0),
            DHLink(a=0.2, alpha=0.0, d=0.0, theta0=0.0),
        ]
    )


@pytest.fixture
def equal_links_robot() -> RobotKinematics:
    """Three 0.3 m links with twisted base and shoulder, no vertical offsets."""

    return make_robot(
        [
            DHLink(a=0.3, alpha=-np.pi / 2, d=0.0, theta0=0.0),
            DHLink(a=0.3, alpha=-np.pi / 2, d=0.0, theta0=0.0),
            DHLink(a=0.3, alpha=0.0, d=0.0, theta0=0.0),
        ]
    )


@pytest.fixture
def right_angle_robot() -> RobotKinematics:
    # target (0.6, 0, 0.4) closes a 3-4-5 triangle from the shoulder at (0.2, 0, 0.1)
    return make_robot(
        [
            DHLink(a=0.2, alpha=np.pi / 2, d=0.1, theta0=0.0),
            DHLink(a=0.3, alpha=0.0, d=0.0, theta0=0.0),
            DHLink(a=0.4, alpha=0.0, d=0.0, theta0=0.0),
        ]
    )


@pytest.fixture
def three_dof_arm() -> RobotKinematics:
    return create_robot("three_dof_arm")


@pytest.fixture
def rx90b() -> RobotKinematics:
    return create_robot("staubli_rx90b")
