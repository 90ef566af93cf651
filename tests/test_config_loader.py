"""Tests for YAML configuration loading."""
import pytest

from seat_sim.core import (
    ScanSpeed,
    SimulatorConfig,
    config_from_dict,
    load_config,
    save_config,
)


def test_defaults():
    config = SimulatorConfig()
    assert config.scan_speed is ScanSpeed.REALTIME
    assert config.critical_threshold == 900
    assert config.static_time_limit_ms == 5000
    assert config.posture.noise_floor == 20


def test_save_load_roundtrip(tmp_path):
    config = SimulatorConfig(scan_speed="analysis", language="zh", brush_intensity=150)
    path = save_config(config, tmp_path / "sim.yaml")

    loaded = load_config(path)
    assert loaded == config
    assert loaded.scan_speed is ScanSpeed.ANALYSIS


def test_nested_and_bare_mappings():
    nested = config_from_dict({"simulator": {"critical_zone_count": 3}})
    bare = config_from_dict({"critical_zone_count": 3})
    assert nested.critical_zone_count == bare.critical_zone_count == 3


def test_posture_section(tmp_path):
    path = tmp_path / "sim.yaml"
    path.write_text(
        "simulator:\n"
        "  scan_speed: analysis\n"
        "  posture:\n"
        "    noise_floor: 30\n"
        "    lateral_left: 0.6\n"
    )
    config = load_config(path)
    assert config.posture.noise_floor == 30
    assert config.posture.lateral_left == 0.6
    assert config.posture.lateral_right == 0.45


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == SimulatorConfig()


@pytest.mark.parametrize(
    "data",
    [
        {"unknown_key": 1},
        {"posture": {"bogus": 1}},
        {"scan_speed": "turbo"},
        {"language": "fr"},
        {"brush_radius": -1},
        {"recording_interval_ms": 0},
        {"posture": {"sagittal_forward": 0.2}},
    ],
)
def test_invalid_config(data):
    with pytest.raises(ValueError):
        config_from_dict(data)
