#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/core/test_user_config.py

import pytest

from colorconverter.core import user_config
from colorconverter.core.errors import ConfigError
from colorconverter.core.user_config import UserConfig


def test_missing_file_is_created_empty(tmp_path, capsys):
    path = tmp_path / "nested" / "colorconverter.yaml"
    cfg = UserConfig(path)
    assert not cfg.loaded

    assert cfg.load() == {}
    assert path.exists() and path.read_text() == ""
    assert cfg.loaded
    assert "could not find config file" in capsys.readouterr().out


def test_existing_file_is_parsed(tmp_path, capsys):
    path = tmp_path / "colorconverter.yaml"
    path.write_text("theme: dark\nprecision: 2\n")
    cfg = UserConfig(path)

    assert cfg.load() == {"theme": "dark", "precision": 2}
    assert cfg.get("theme") == "dark"
    assert cfg.get("missing", "x") == "x"
    assert capsys.readouterr().out == ""


def test_load_only_reads_once(tmp_path):
    path = tmp_path / "colorconverter.yaml"
    path.write_text("a: 1\n")
    cfg = UserConfig(path)
    first = cfg.load()
    path.write_text("a: 2\n")
    assert cfg.load() is first
    assert cfg.get("a") == 1


def test_settings_before_load_raises(tmp_path):
    with pytest.raises(RuntimeError):
        UserConfig(tmp_path / "x.yaml").settings


@pytest.mark.parametrize("content", ["key: [unclosed\n", "- a\n- b\n", "just a string\n"])
def test_bad_documents_raise_config_error(tmp_path, content):
    path = tmp_path / "colorconverter.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError) as exc:
        UserConfig(path).load()
    assert str(path) in str(exc.value)


def test_default_path_follows_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(user_config.sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert user_config.default_config_path() == tmp_path / "colorconverter.yaml"


def test_default_path_without_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(user_config.sys, "platform", "linux")
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert user_config.default_config_path() == tmp_path / ".config" / "colorconverter.yaml"


def test_default_path_on_windows(monkeypatch, tmp_path):
    monkeypatch.setattr(user_config.sys, "platform", "win32")
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert user_config.default_config_path() == tmp_path / "colorconverter.yaml"
