import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from levelgen.level import LevelConfig, generate_level  # noqa: E402

ENV_KEYS = (
    "LEVELGEN_HALF_HEIGHT",
    "LEVELGEN_HALF_WIDTH",
    "LEVELGEN_MAX_EMPTY_SPACES",
    "LEVELGEN_MIN_EMPTY_SPACES",
    "LEVELGEN_SEED",
    "LEVELGEN_MAX_ATTEMPTS",
    "LEVELGEN_ENABLE_METRICS",
)


def pytest_configure(config):  # register custom marker
    config.addinivalue_line("markers", "performance: coarse generation runtime guard")


@pytest.fixture(scope="session")
def default_level():
    """Scenario A level (15x14 half grid, 0.45 ceiling) shared across invariant tests."""
    return generate_level(LevelConfig(half_height=15, half_width=14, max_empty_spaces=0.45, seed=1234))


@pytest.fixture()
def clean_env(monkeypatch):
    """Remove LEVELGEN_* variables for the test and drop anything a .env load adds.

    setenv before delenv makes the teardown delete the key even when the test
    (or load_dotenv) sets it again.
    """
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch
