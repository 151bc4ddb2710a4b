"""Shared fixtures for site audit tests."""

import logging
import zlib

import pytest


CONFIG_ENV_VARS = ("SITE_AUDIT_PROJECT_ROOT", "SITE_AUDIT_BUILD_DIR", "SITE_AUDIT_LOG_LEVEL")


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no SITE_AUDIT_* variables and no stray .env file in cwd."""
    for name in CONFIG_ENV_VARS:
        # setenv first so monkeypatch removes anything load_dotenv adds later
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "home")
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def build_dir(tmp_path):
    """An empty `.next/static` tree; returns the `.next` directory."""
    build = tmp_path / ".next"
    (build / "static").mkdir(parents=True)
    return build


@pytest.fixture
def gzipped_len():
    """Reference gzip size at zlib's default level."""

    def _measure(data: bytes) -> int:
        compressor = zlib.compressobj(zlib.Z_DEFAULT_COMPRESSION, zlib.DEFLATED, 31)
        return len(compressor.compress(data)) + len(compressor.flush())

    return _measure
