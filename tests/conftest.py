"""Shared fixtures for flagbot tests."""

import re

import pytest

from core.config import ConfigurationSet


@pytest.fixture
def flag_config():
    return ConfigurationSet(
        responses=("no flags please",),
        gifs=("https://example.com/nope.gif",),
        patterns=(re.compile(r"sun\{.*\}"),),
    )


@pytest.fixture
def write_config(tmp_path):
    """Write the three configuration files into tmp_path and return it."""

    def _write(gifs="https://example.com/a.gif\n", responses="stop that\n", patterns="sun\\{.*\\}\n"):
        (tmp_path / "gifs.txt").write_text(gifs, encoding="utf-8")
        (tmp_path / "responses.txt").write_text(responses, encoding="utf-8")
        (tmp_path / "patterns.txt").write_text(patterns, encoding="utf-8")
        return tmp_path

    return _write
