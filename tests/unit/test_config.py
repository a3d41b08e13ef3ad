import os
import textwrap

import pytest

from config.config_loader import ConfigLoader
from config.settings import AppSettings

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))


def test_missing_file_yields_empty_config(tmp_path):
    loader = ConfigLoader(str(tmp_path / "absent.yaml"))
    assert loader.config == {}
    assert loader.get("movement", "speed", default=3.0) == 3.0


def test_get_walks_nested_keys(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("movement:\n  speed: 4.5\n  enabled: false\n", encoding="utf-8")
    loader = ConfigLoader(str(path))

    assert loader.get("movement", "speed") == 4.5
    assert loader.get("movement") == {"speed": 4.5, "enabled": False}
    # Falsy stored values are returned, not replaced by the default.
    assert loader.get("movement", "enabled", default=True) is False


def test_get_without_default_raises_key_error():
    loader = ConfigLoader.from_string("window: {width: 100}")
    with pytest.raises(KeyError):
        loader.get("window", "height")
    with pytest.raises(KeyError):
        loader.get("window", "width", "nested")
    assert loader.get("window", "height", default=None) is None


def test_non_mapping_document_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ConfigLoader(str(path))


def test_repository_settings_file_loads():
    settings = AppSettings.load(os.path.join(REPO_ROOT, "settings.yaml"))
    assert settings.movement_speed == 1.5
    assert settings.window_title == "Point Controller"
    assert settings.quit_key == "q"
    assert settings.log_dir is None


def test_settings_defaults_for_empty_config():
    settings = AppSettings.from_loader(ConfigLoader.from_string(""))
    assert settings == AppSettings()
    assert settings.start_position == (0.0, 0.0)


def test_settings_from_yaml_values():
    loader = ConfigLoader.from_string(textwrap.dedent("""
        window: {width: 640, height: 480, title: Demo}
        movement: {speed: 3, start_x: 1, start_y: -2}
        input: {quit_key: x}
        logging: {level: debug, log_dir: logs}
    """))
    settings = AppSettings.from_loader(loader)

    assert (settings.window_width, settings.window_height, settings.window_title) == (640, 480, "Demo")
    assert settings.movement_speed == 3.0
    assert settings.start_position == (1.0, -2.0)
    assert settings.quit_key == "x"
    assert settings.log_level == "DEBUG"
    assert settings.log_dir == "logs"


@pytest.mark.parametrize(
    "text",
    [
        "movement: {speed: 0}",
        "movement: {speed: -2}",
        "movement: {speed: fast}",
        "window: {width: 0}",
        "input: {quit_key: w}",
        "input: {quit_key: ''}",
        "logging: {level: verbose}",
    ],
)
def test_invalid_settings_rejected(text):
    with pytest.raises(ValueError):
        AppSettings.from_loader(ConfigLoader.from_string(text))


def test_overrides_skip_none_and_validate():
    settings = AppSettings().with_overrides(movement_speed=4.0, log_level=None)
    assert settings.movement_speed == 4.0
    assert settings.log_level == "INFO"
    with pytest.raises(ValueError):
        AppSettings().with_overrides(movement_speed=-1.0)
