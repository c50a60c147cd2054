"""Shared fixtures for the domain-validator test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog

from domain_validator import yaml_config


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None, None, None]:
    """Undo logging setup and the cached config.yml after every test."""
    yield
    structlog.reset_defaults()
    yaml_config.reset_cache()


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write text content to a file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def tld_file(write_file: Callable[[str, str], Path]) -> Path:
    """A small IANA-style TLD list with a version header."""
    return write_file(
        "tlds-alpha-by-domain.txt",
        "# Version 2019012900, Last Updated Tue Jan 29 07:07:01 2019 UTC\nCOM\nNET\nORG\nIO\n",
    )
