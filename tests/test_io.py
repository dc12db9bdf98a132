from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pyinireader import IniParser, IniReader, ParseOptions
from pyinireader.ini.parser import read_text, render, write_text

CHINESE_INI = (
    "[General]\n"
    "name = 红色警戒\n"
    "desc = 这是一个用于测试的中文配置文件，包含一些常见的中文字符。\n"
    "note = 读取时应当自动识别文件的编码，而不是直接报错。\n"
)


def test_read_and_write_text(tmp_path: Path):
    path = tmp_path / "out.ini"
    assert write_text(path, "[a]\r\nx = 1\r\n")
    # line endings are left for the splitter.
    assert read_text(path, "utf-8") == "[a]\r\nx = 1\r\n"


def test_read_missing_file(tmp_path: Path):
    with pytest.raises(OSError):
        read_text(tmp_path / "missing.ini")


def test_write_failure_is_reported(tmp_path: Path, caplog):
    with caplog.at_level(logging.WARNING):
        assert not write_text(tmp_path, "[a]\nx = 1\n")
    assert "Unable to write INI" in caplog.text


def test_reader_parse_file(sample_file: Path):
    ini = IniReader(sample_file)
    assert ini.sections() == ["General", "Audio"]
    assert ini.get("Audio", "volume") == "80"


def test_reader_to_file(tmp_path: Path, reader: IniReader):
    out = tmp_path / "copy.ini"
    assert reader.to_file(out)
    assert out.read_text(encoding="utf-8") == reader.to_text()
    assert IniReader(out).to_dict() == reader.to_dict()


def test_reader_to_file_failure(tmp_path: Path, reader: IniReader):
    assert not reader.to_file(tmp_path)


def test_explicit_encoding(tmp_path: Path):
    path = tmp_path / "gbk.ini"
    path.write_bytes(CHINESE_INI.encode("gbk"))
    ini = IniReader(path, options=ParseOptions(encoding="gbk"))
    assert ini.get("General", "name") == "红色警戒"


def test_undecodable_file_falls_back_to_guessing(tmp_path: Path):
    path = tmp_path / "gbk.ini"
    path.write_bytes(CHINESE_INI.encode("gbk"))
    ini = IniReader(path, options=ParseOptions(encoding="utf-8"))
    assert ini.exists("General")
    assert ini.item_exists("General", "desc")
    assert ini.item_count("General") == 3


def test_ini_parser(sample_file: Path, tmp_path: Path):
    doc = IniParser(sample_file, "utf-8").read()
    assert list(doc) == ["General", "Audio"]

    out = tmp_path / "written.ini"
    assert IniParser(out).write(doc)
    assert out.read_text(encoding="utf-8") == render(doc)
    assert str(sample_file) in str(IniParser(sample_file))


def test_ini_parser_with_options(sample_file: Path):
    options = ParseOptions(encoding="utf-8")
    options.sections.exclude_section("General")
    doc = IniParser(sample_file, options=options).read()
    assert list(doc) == ["Audio"]


class TestYamlOptions:
    def test_load(self, tmp_path: Path):
        path = tmp_path / "options.yaml"
        path.write_text(
            "store_any_line: true\n"
            "encoding: utf-8\n"
            "include: [General, Audio]\n"
            "exclude: [Debug]\n",
            encoding="utf-8",
        )
        options = ParseOptions.from_yaml(path)
        assert options.store_any_line
        assert not options.transcode
        assert options.encoding == "utf-8"
        assert options.sections.include == {"General", "Audio"}
        assert options.sections.exclude == {"Debug"}

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "options.yaml"
        path.write_text("", encoding="utf-8")
        assert ParseOptions.from_yaml(path) == ParseOptions()

    def test_unknown_keys_warn(self, tmp_path: Path):
        path = tmp_path / "options.yaml"
        path.write_text("transcode: true\ncolour: blue\n", encoding="utf-8")
        with pytest.warns(UserWarning, match="colour"):
            options = ParseOptions.from_yaml(path)
        assert options.transcode

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "options.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError):
            ParseOptions.from_yaml(path)

    def test_used_by_reader(self, tmp_path: Path, sample_file: Path):
        path = tmp_path / "options.yaml"
        path.write_text("exclude: [Audio]\n", encoding="utf-8")
        ini = IniReader(sample_file, options=ParseOptions.from_yaml(path))
        assert ini.sections() == ["General"]
