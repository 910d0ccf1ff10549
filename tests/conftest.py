from __future__ import annotations

import pytest

_ENV_KEYS = ("RESERVOIR_SAMPLE_SIZE", "RESERVOIR_SECURE_RANDOM", "LOG_LEVEL", "LOG_DIR")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Run each test from an empty directory with no sampler settings in the environment."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
