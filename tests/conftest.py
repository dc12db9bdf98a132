from __future__ import annotations

from pathlib import Path

import pytest

from pyinireader import IniReader

SAMPLE_INI = """; sample config
[General]
name = pyinireader
version = 1
plugin = alpha
plugin = beta
plugin_dir = ./plugins
enabled = true

[Audio]
volume = 80
channels = 1,2,3

# nothing below gets stored
[Empty]
"""


@pytest.fixture()
def sample_text() -> str:
    return SAMPLE_INI


@pytest.fixture()
def reader(sample_text: str) -> IniReader:
    ini = IniReader()
    ini.parse(sample_text)
    return ini


@pytest.fixture()
def sample_file(tmp_path: Path, sample_text: str) -> Path:
    path = tmp_path / "sample.ini"
    path.write_text(sample_text, encoding="utf-8")
    return path
