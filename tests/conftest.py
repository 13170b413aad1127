"""Pytest fixtures for HitCraft tests."""
import pytest
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root():
    """Return the project root path."""
    return PROJECT_ROOT


@pytest.fixture
def channel():
    """A fresh channel with the default (propagate) policy."""
    from hitcraft.core.events import EventChannel
    return EventChannel("test")


@pytest.fixture
def calls():
    """Shared call log plus a factory for handlers that append to it."""
    log = []

    def make(name):
        def handler(source, payload):
            log.append((name, source, payload))
        return handler

    return log, make


@pytest.fixture
def settings():
    """Small, fast settings for game tests."""
    from hitcraft.core.config import load_settings
    return load_settings(enemy_count=2, enemy_hp=2, fire_interval=0.5)


@pytest.fixture
def game(settings):
    """Create a Game instance (without renderer)."""
    from hitcraft.main import Game
    g = Game(settings)
    g.setup()
    yield g
    g.cleanup()
