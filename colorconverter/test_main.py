#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/test_main.py

import pytest

from colorconverter import __version__
from colorconverter.main import main


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "colorconverter.yaml"
    path.write_text("")
    return path


def run_cli(config_path, *argv):
    main([*argv, "-c", str(config_path)])


def test_hex_to_rgb(config_path, capsys):
    run_cli(config_path, "-x", "FF0000", "-o", "RGB")
    out = capsys.readouterr().out
    assert out == "Converted to RGB notation your value is:\n ==>  rgb(255,0,0)\n"


def test_rgb_to_hex(config_path, capsys):
    run_cli(config_path, "-r", "0", "-g", "255", "-b", "0", "-o", "HEX")
    assert capsys.readouterr().out.endswith("Converted to hex value your value is:\n ==>  #00FF00\n")


def test_hsl_gray_to_rgb(config_path, capsys):
    run_cli(config_path, "-h", "0", "-s", "0", "-l", "50", "-o", "RGB")
    assert " ==>  rgb(128,128,128)" in capsys.readouterr().out


def test_black_to_hsl(config_path, capsys):
    run_cli(config_path, "--hex", "000000", "--output", "HSL")
    out = capsys.readouterr().out
    assert out.startswith("Converted to HSL notation your value is:")
    assert " ==>  hsl(0,0%,0%)" in out


def test_lowercase_output_is_rejected(config_path, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(config_path, "-x", "FF0000", "-o", "rgb")
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert "output must be one of" in captured.err
    assert "Converted" not in captured.out


@pytest.mark.parametrize(
    "argv, message",
    [
        (["-o", "HEX"], "is required"),
        (["-r", "0", "-g", "0", "-o", "HEX"], "--red requires --blue"),
        (["-s", "10", "-o", "HEX"], "--saturation requires --hue, --luminance"),
        (["-x", "FFFFFF", "-r", "0", "-g", "0", "-b", "0", "-o", "HEX"], "only one input group"),
        (["-x", "FFFFFF"], "required"),
    ],
)
def test_invalid_argument_sets(config_path, capsys, argv, message):
    with pytest.raises(SystemExit) as exc:
        run_cli(config_path, *argv)
    assert exc.value.code == 2
    assert message in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv, message",
    [
        (["-r", "abc", "-g", "0", "-b", "0"], "red value not a valid number: 'abc'"),
        (["-r", "-5", "-g", "0", "-b", "0"], "red value outside 0..255: '-5'"),
        (["-x", "FFZZ00"], "not a valid hex value: 'ZZ'"),
        (["-x", "FFF"], "exactly 6 digits"),
        (["-h", "x", "-s", "0", "-l", "0"], "hue value not a valid number"),
        (["-r", "1" * 5000, "-g", "0", "-b", "0"], "red value not a valid number"),
        (["-h", "90", "-s", "5_0", "-l", "50"], "saturation value not a valid number"),
    ],
)
def test_conversion_errors_exit_with_message(config_path, capsys, argv, message):
    with pytest.raises(SystemExit) as exc:
        run_cli(config_path, *argv, "-o", "HEX")
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert message in captured.err
    assert captured.out == ""


def test_config_is_created_when_missing(tmp_path, capsys):
    path = tmp_path / "cfg" / "colorconverter.yaml"
    run_cli(path, "-x", "00FF00", "-o", "HEX")
    out = capsys.readouterr().out
    assert path.exists()
    assert "could not find config file" in out
    assert out.endswith(" ==>  #00FF00\n")


def test_broken_config_aborts(tmp_path, capsys):
    path = tmp_path / "colorconverter.yaml"
    path.write_text("- not\n- a mapping\n")
    with pytest.raises(SystemExit) as exc:
        run_cli(path, "-x", "00FF00", "-o", "HEX")
    assert exc.value.code == 2
    assert "top level must be a mapping" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == f"colorconverter {__version__}"


def test_run_formats_through_convert(config_path, capsys, monkeypatch):
    from colorconverter.logic.convert import engine

    calls = []

    def fake_convert(output, **fields):
        calls.append((output, fields["hex"]))
        return "#ABCDEF"

    monkeypatch.setattr(engine, "convert", fake_convert)
    run_cli(config_path, "-x", "123456", "-o", "HEX")
    assert calls and calls[0][1] == "123456"
    assert capsys.readouterr().out.endswith(" ==>  #ABCDEF\n")
