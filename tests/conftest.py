"""
Shared fixtures: a recording npm runner and a clean NPM_* environment.
"""

import pytest

from npmfeed import config as cfg

FEED_ENV_VARS = [
    cfg.ENV_NPM_CMD,
    cfg.ENV_NPMRC,
    cfg.ENV_FEED,
    cfg.ENV_REGISTRY,
    cfg.ENV_SCOPE,
    cfg.ENV_TOKEN,
    cfg.ENV_WEBSITE_SKU,
]


class RecordingRunner:
    """Stands in for run_npm; records calls and returns queued exit codes."""

    def __init__(self, codes=None):
        self.calls = []
        self.codes = list(codes or [])

    def __call__(self, command, args):
        self.calls.append((command, list(args)))
        return self.codes.pop(0) if self.codes else 0


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def clean_env(monkeypatch):
    for name in FEED_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def npmrc(tmp_path):
    return tmp_path / ".npmrc"
