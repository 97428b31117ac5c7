"""Denavit–Hartenberg kinematics engine for serial manipulators."""
from .config import config_from_dict, config_from_json, config_to_dict, config_to_json, load_config, save_config
from .errors import ConfigError, StructuralError
from .ik import IKOptions, is_reachable, solve_ik
from .kinematics import FKResult, SerialDHRobot, SerialKinematics, dh_transform, fk
from .presets import available_presets, create_robot, load_preset
from .robot import RobotKinematics
from .types import DHLink, Frames, IKResult, Limits, Pose, RobotConfig

__all__ = [
    "DHLink",
    "Frames",
    "Limits",
    "RobotConfig",
    "Pose",
    "IKResult",
    "StructuralError",
    "ConfigError",
    "dh_transform",
    "SerialKinematics",
    "SerialDHRobot",
    "FKResult",
    "fk",
    "IKOptions",
    "solve_ik",
    "is_reachable",
    "RobotKinematics",
    "config_from_dict",
    "config_to_dict",
    "config_from_json",
    "config_to_json",
    "load_config",
    "save_config",
    "available_presets",
    "load_preset",
    "create_robot",
]
