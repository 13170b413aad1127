"""Test settings loading."""
import json

import pytest
from hitcraft.core.config import SETTINGS_FILE, Settings, load_settings
from hitcraft.core.events import ErrorPolicy


def test_default_file_loads():
    settings = load_settings()
    assert isinstance(settings, Settings)
    assert settings.error_policy is ErrorPolicy.PROPAGATE
    assert SETTINGS_FILE.exists()


def test_overrides():
    settings = load_settings(enemy_count=7, error_policy="isolate")
    assert settings.enemy_count == 7
    assert settings.error_policy is ErrorPolicy.ISOLATE


def test_sim_dt():
    assert load_settings(sim_hz=20).sim_dt == pytest.approx(0.05)


def test_custom_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"enemy_hp": 9}))
    settings = load_settings(path)
    assert settings.enemy_hp == 9
    assert settings.enemy_count == Settings().enemy_count


def test_unknown_key(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"lives": 3}))
    with pytest.raises(ValueError, match="lives"):
        load_settings(path)


def test_unknown_policy():
    with pytest.raises(ValueError, match="error_policy"):
        load_settings(error_policy="retry")


@pytest.mark.parametrize("name", ["sim_hz", "fire_interval"])
@pytest.mark.parametrize("value", [0, -1])
def test_non_positive_rates_rejected(name, value):
    with pytest.raises(ValueError, match=name):
        load_settings(**{name: value})
