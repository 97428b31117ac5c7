"""Bundled robot descriptions, selected by name."""
from __future__ import annotations

from typing import Callable, Dict, Tuple

from ..errors import ConfigError
from ..ik import IKOptions
from ..robot import RobotKinematics
from ..types import RobotConfig
from .abb_irb120 import abb_irb120_config
from .kuka_kr6 import kuka_kr6_config
from .staubli_rx90b import staubli_rx90b_config, three_dof_arm_config

PRESETS: Dict[str, Callable[[], RobotConfig]] = {
    "staubli_rx90b": staubli_rx90b_config,
    "kuka_kr6": kuka_kr6_config,
    "abb_irb120": abb_irb120_config,
    "three_dof_arm": three_dof_arm_config,
}


def available_presets() -> Tuple[str, ...]:
    return tuple(sorted(PRESETS))


def load_preset(name: str) -> RobotConfig:
    try:
        factory = PRESETS[name]
    except KeyError:
        raise ConfigError(f"Robot configuration not found: {name}") from None
    return factory()


def create_robot(name: str, ik_options: IKOptions | None = None) -> RobotKinematics:
    """Instantiate a bundled robot by name."""

    return RobotKinematics(load_preset(name), ik_options)


__all__ = [
    "PRESETS",
    "available_presets",
    "load_preset",
    "create_robot",
    "staubli_rx90b_config",
    "three_dof_arm_config",
    "kuka_kr6_config",
    "abb_irb120_config",
]
