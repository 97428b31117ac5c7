"""JSON robot descriptions.

A description is a record of the form::

    {
      "name": "...",
      "description": "...",
      "dhParameters": [{"theta": 0.0, "d": 0.325, "a": 0.225, "alpha": -1.5708}, ...],
      "jointLimits": [{"min": -3.1416, "max": 3.1416}, ...],
      "jointTypes": ["revolute", ...],
      "baseOffset": {"x": 0.0, "y": 0.0, "z": 0.0},
      "toolOffset": {"x": 0.0, "y": 0.0, "z": 0.0}
    }

Angles are in radians, lengths in metres.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import numpy as np

from .errors import ConfigError, StructuralError
from .types import DHLink, Frames, Limits, RobotConfig

JOINT_TYPES = ("revolute", "prismatic")


def _field(record: Mapping[str, Any], key: str, where: str) -> Any:
    try:
        return record[key]
    except KeyError:
        raise ConfigError(f"{where}: missing field '{key}'") from None
    except TypeError:
        raise ConfigError(f"{where}: expected an object, got {type(record).__name__}") from None


def _number(record: Mapping[str, Any], key: str, where: str) -> float:
    value = _field(record, key, where)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{where}: field '{key}' must be a number, got {value!r}")
    return float(value)


def _list(record: Mapping[str, Any], key: str) -> list:
    value = _field(record, key, "robot")
    if not isinstance(value, list):
        raise ConfigError(f"robot: field '{key}' must be a list")
    return value


def _point(record: Mapping[str, Any], key: str) -> np.ndarray:
    value = record.get(key, {"x": 0.0, "y": 0.0, "z": 0.0})
    return np.array([_number(value, axis, key) for axis in ("x", "y", "z")])


def config_from_dict(record: Mapping[str, Any]) -> RobotConfig:
    """Build a :class:`RobotConfig` from a decoded description record."""

    params = _list(record, "dhParameters")
    limits = _list(record, "jointLimits")
    types = _list(record, "jointTypes")
    if not len(params) == len(limits) == len(types):
        raise StructuralError(
            f"description lists differ in length: {len(params)} DH entries, "
            f"{len(limits)} joint limits, {len(types)} joint types"
        )
    for i, jt in enumerate(types):
        if jt not in JOINT_TYPES:
            raise ConfigError(f"jointTypes[{i}]: unknown joint type {jt!r}")

    dh = tuple(
        DHLink(
            a=_number(p, "a", f"dhParameters[{i}]"),
            alpha=_number(p, "alpha", f"dhParameters[{i}]"),
            d=_number(p, "d", f"dhParameters[{i}]"),
            theta0=_number(p, "theta", f"dhParameters[{i}]"),
            revolute=jt == "revolute",
        )
        for i, (p, jt) in enumerate(zip(params, types))
    )
    q_limits = np.array(
        [[_number(lim, "min", f"jointLimits[{i}]"), _number(lim, "max", f"jointLimits[{i}]")] for i, lim in enumerate(limits)],
        dtype=float,
    ).reshape(-1, 2)
    return RobotConfig(
        dh=dh,
        limits=Limits(q_min=q_limits[:, 0], q_max=q_limits[:, 1]),
        frames=Frames(base_offset=_point(record, "baseOffset"), tool_offset=_point(record, "toolOffset")),
        name=str(_field(record, "name", "robot")),
        description=str(record.get("description", "")),
    )


def config_to_dict(config: RobotConfig) -> dict:
    def point(v: np.ndarray) -> dict:
        return {"x": float(v[0]), "y": float(v[1]), "z": float(v[2])}

    return {
        "name": config.name,
        "description": config.description,
        "dhParameters": [
            {"theta": link.theta0, "d": link.d, "a": link.a, "alpha": link.alpha} for link in config.dh
        ],
        "jointLimits": [
            {"min": float(lo), "max": float(hi)} for lo, hi in zip(config.limits.q_min, config.limits.q_max)
        ],
        "jointTypes": list(config.joint_types),
        "baseOffset": point(config.frames.base_offset),
        "toolOffset": point(config.frames.tool_offset),
    }


def config_from_json(text: str) -> RobotConfig:
    try:
        record = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid robot description: {exc}") from exc
    return config_from_dict(record)


def config_to_json(config: RobotConfig) -> str:
    return json.dumps(config_to_dict(config), indent=2)


def load_config(path: Path | str) -> RobotConfig:
    """Read a robot description from a ``.json`` file."""

    return config_from_json(Path(path).read_text(encoding="utf-8"))


def save_config(path: Path | str, config: RobotConfig) -> Path:
    """Write ``config`` as a ``.json`` description, creating parent directories."""

    dest = Path(path)
    if dest.suffix != ".json":
        dest = dest.with_suffix(".json")
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(config_to_json(config), encoding="utf-8")
    return dest
