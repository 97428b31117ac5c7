"""Stäubli RX90B demos executed directly without a command-line parser."""

from __future__ import annotations

import logging

import numpy as np

from armkin import IKOptions, create_robot

logger = logging.getLogger("armkin.demo")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    np.set_printoptions(precision=4, suppress=True)

    robot = create_robot("staubli_rx90b")
    poses = {
        "home": np.zeros(6),
        "base 90 deg": np.array([np.pi / 2, 0, 0, 0, 0, 0]),
        "shoulder 90 deg": np.array([0, np.pi / 2, 0, 0, 0, 0]),
        "elbow 90 deg": np.array([0, 0, np.pi / 2, 0, 0, 0]),
        "all joints 45 deg": np.full(6, np.pi / 4),
    }
    for label, q in poses.items():
        pose = robot.forward_kinematics(q)
        logger.info("%s: position %s\norientation\n%s", label, pose.position, pose.orientation)
    logger.info("joints: %d, maximum reach: %.3f m", robot.num_joints, robot.workspace_radius())

    # Set trace=True and level=logging.DEBUG to follow the IK sweep.
    arm = create_robot("three_dof_arm", IKOptions(trace=False))
    target = np.array([0.5, 0.2, 0.3])
    result = arm.inverse_kinematics(target)
    if not result.valid:
        logger.info("no solution for %s", target)
        return
    for q, err in zip(result.solutions, result.errors):
        logger.info("solution %s -> %s (error %.4f)", q, arm.forward_kinematics(q).position, err)


if __name__ == "__main__":
    main()
