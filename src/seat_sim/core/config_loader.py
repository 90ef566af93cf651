"""YAML configuration loader for the simulator."""

from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Union

import yaml

from seat_sim.core.types import PostureThresholds, SimulatorConfig


def load_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Load raw configuration from YAML file.

    Args:
        path: Path to YAML configuration file

    Returns:
        Parsed configuration dictionary (empty if the file is empty)
    """
    path = Path(path)
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def config_from_dict(config: dict[str, Any]) -> SimulatorConfig:
    """Create simulator configuration from a dictionary.

    Accepts either a bare mapping or one nested under a 'simulator' key.

    Args:
        config: Configuration dictionary

    Returns:
        Validated simulator configuration

    Raises:
        ValueError: If the mapping contains unknown keys or invalid values
    """
    data = dict(config.get("simulator", config))

    known = {f.name for f in fields(SimulatorConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown simulator config keys: {sorted(unknown)}")

    posture_data = data.pop("posture", None) or {}
    posture_known = {f.name for f in fields(PostureThresholds)}
    posture_unknown = set(posture_data) - posture_known
    if posture_unknown:
        raise ValueError(f"Unknown posture config keys: {sorted(posture_unknown)}")

    return SimulatorConfig(posture=PostureThresholds(**posture_data), **data)


def load_config(path: Union[str, Path]) -> SimulatorConfig:
    """Load simulator configuration from YAML file.

    Args:
        path: Path to configuration file

    Returns:
        Validated simulator configuration
    """
    return config_from_dict(load_config_file(path))


def save_config(config: SimulatorConfig, path: Union[str, Path]) -> Path:
    """Save simulator configuration to YAML file.

    Args:
        config: Configuration to save
        path: Output file path

    Returns:
        Path to saved file
    """
    data = asdict(config)
    data["scan_speed"] = config.scan_speed.value

    path = Path(path)
    with open(path, "w") as f:
        yaml.dump({"simulator": data}, f, default_flow_style=False, sort_keys=False)

    return path
