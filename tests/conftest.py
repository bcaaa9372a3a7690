"""Shared pytest fixtures for NoiseFilter tests."""
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Generator
from unittest.mock import MagicMock

import pytest
import yaml

from noisefilter.infrastructure.config_manager import set_global_config
from noisefilter.infrastructure.logger import Logger, LogLevel, set_global_logger


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_ignore_file(temp_dir: Path) -> Callable[..., Path]:
    """Factory writing an ignore file from a list of lines."""

    def _write(lines, name: str = ".noiseignore", newline: str = "\n") -> Path:
        path = temp_dir / name
        path.write_bytes(newline.join(lines).encode("utf-8"))
        return path

    return _write


@pytest.fixture
def sample_ignore_file(write_ignore_file) -> Path:
    """Ignore file with comments, blanks, and three patterns."""
    return write_ignore_file(
        [
            "# Static assets",
            r"favicon\.ico",
            "",
            "   ",
            "# Dev server",
            r"^\[HMR\]",
            r"google-analytics\.com",
        ]
    )


@pytest.fixture
def mock_handler() -> MagicMock:
    """Logging handler mock that records every handled record."""
    handler = MagicMock(spec=logging.Handler)
    handler.level = logging.DEBUG
    return handler


@pytest.fixture
def test_logger(mock_handler: MagicMock) -> Logger:
    """Debug-level logger writing only to the mock handler."""
    return Logger(name="noisefilter.test", level=LogLevel.DEBUG, handlers=[mock_handler])


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """Provide a sample NoiseFilter configuration."""
    return {
        "noisefilter": {
            "ignore_file": None,
            "encoding": "utf-8",
            "logging": {
                "level": "DEBUG",
                "file": None,
            },
        }
    }


@pytest.fixture
def config_file(temp_dir: Path, sample_config: Dict[str, Any]) -> Path:
    """Create a configuration file."""
    config_path = temp_dir / "noisefilter.yaml"
    with open(config_path, "w") as f:
        yaml.dump(sample_config, f)
    return config_path


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Reset global instances and NOISEFILTER_* variables between tests."""
    for key in list(os.environ):
        if key.startswith("NOISEFILTER_"):
            monkeypatch.delenv(key)

    set_global_config(None)
    set_global_logger(None)
    yield
    set_global_config(None)
    set_global_logger(None)
