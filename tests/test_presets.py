import numpy as np
import pytest

from armkin import ConfigError, RobotKinematics, available_presets, config_from_json, config_to_json, create_robot, load_preset


def test_available_presets():
    assert available_presets() == ("abb_irb120", "kuka_kr6", "staubli_rx90b", "three_dof_arm")


@pytest.mark.parametrize("name", ["staubli_rx90b", "kuka_kr6", "abb_irb120"])
def test_six_axis_presets(name):
    config = load_preset(name)
    assert len(config.dh) == 6
    assert config.joint_types == ("revolute",) * 6
    assert np.all(config.limits.q_min < config.limits.q_max)
    pose = create_robot(name).forward_kinematics(np.zeros(6))
    assert np.all(np.isfinite(pose.position))


def test_three_dof_arm_matches_rx90b_positioning_joints():
    arm = load_preset("three_dof_arm")
    full = load_preset("staubli_rx90b")
    assert arm.dh == full.dh[:3]
    assert [link.a for link in arm.dh] == [0.225, 0.735, 0.175]


def test_unknown_preset():
    with pytest.raises(ConfigError, match="Robot configuration not found: puma560"):
        load_preset("puma560")


def test_create_robot_returns_engine():
    robot = create_robot("kuka_kr6")
    assert isinstance(robot, RobotKinematics)
    assert robot.workspace_radius() == pytest.approx(0.025 + 0.455 + 0.035)


def test_presets_survive_json_round_trip():
    for name in available_presets():
        config = load_preset(name)
        assert config_from_json(config_to_json(config)).dh == config.dh


def test_robot_from_preset():
    robot = RobotKinematics.from_preset("three_dof_arm")
    assert isinstance(robot, RobotKinematics)
    assert robot.num_joints == 3
    assert robot.config.dh == load_preset("three_dof_arm").dh
    with pytest.raises(ConfigError, match="Robot configuration not found"):
        RobotKinematics.from_preset("puma560")
