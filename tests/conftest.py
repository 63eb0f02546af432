"""
Pytest configuration and shared fixtures for the binshrink test suite.

This module provides common fixtures for temporary workspaces, configuration
files and fake external tools.
"""

import os
import shutil
import stat
import sys
import tempfile
from pathlib import Path

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

MIB = 1024 * 1024


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "e2e: mark test as an end-to-end test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def scratch_dir(temp_dir, monkeypatch):
    """Redirect tempfile to an empty directory so leftover scripts can be counted."""
    path = temp_dir / "tmp"
    path.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(path))
    return path


@pytest.fixture
def bin_dir(temp_dir):
    """An empty directory used as the only search path for tools."""
    path = temp_dir / "bin"
    path.mkdir()
    return path


@pytest.fixture
def target_dir(temp_dir):
    """The build output directory artifacts are discovered in."""
    path = temp_dir / "target"
    path.mkdir()
    return path


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "wrapper": {
            "target_dir": "./target/",
            "artifact_names": ["geph4-exit", "geph4-exit.exe"],
            "min_compress_size": 31457280,
            "log_level": "INFO",
            "mode": "native",
        },
        "tools": {
            "packer": "upx",
            "packer_args": [],
            "archiver": "xz",
            "archiver_args": ["-c", "-v", "-e", "-9"],
            "archiver_suffix": ".xz",
            "compressor": "gzip",
            "compressor_args": ["-c", "-9"],
            "compressor_suffix": ".gz",
            "stripper": "strip",
            "stripper_args": [],
        },
    }


@pytest.fixture
def config_file(temp_dir, sample_config_data):
    """Write sample_config_data to a temporary config.toml."""
    import toml

    path = temp_dir / "config.toml"
    with open(path, "w") as f:
        toml.dump(sample_config_data, f)
    return path


# ============================================================================
# Tool Fixtures
# ============================================================================


class ToolFactory:
    """Creates fake tool executables in a directory."""

    def __init__(self, directory: Path):
        self.directory = directory

    def script(self, name: str, body: str) -> Path:
        """Create ``name`` as a /bin/sh script with the given body."""
        path = self.directory / name
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    def link_system(self, *names: str) -> None:
        """Make real system utilities visible in the directory."""
        for name in names:
            real = shutil.which(name)
            if real is None:
                pytest.skip(f"{name} is not installed")
            link = self.directory / name
            if not link.exists():
                os.symlink(real, link)


@pytest.fixture
def tools(bin_dir):
    """Factory for fake tools living in bin_dir."""
    return ToolFactory(bin_dir)


# ============================================================================
# Artifact helpers
# ============================================================================


def write_artifact(path: Path, size: int, fill: bytes = b"\x7fELF") -> Path:
    """Write a file of exactly ``size`` bytes, repeating ``fill``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    repeats = size // len(fill) + 1
    path.write_bytes((fill * repeats)[:size])
    return path


@pytest.fixture
def make_artifact():
    """Provide write_artifact as a fixture."""
    return write_artifact


@pytest.fixture(autouse=True)
def clear_config_after_test(monkeypatch):
    """Isolate every test from the environment and the configuration cache."""
    monkeypatch.delenv("BINSHRINK_CONFIG", raising=False)
    monkeypatch.delenv("BINSHRINK_LOG_LEVEL", raising=False)

    yield

    from binshrink.config import clear_config_cache, set_config_path

    set_config_path(None)
    clear_config_cache()
