#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/core/user_config.py

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from colorconverter.shared.logger import log
from . import config as c
from .errors import ConfigError


def default_config_dir() -> Path:
    """Platform configuration directory for the current user."""
    if sys.platform == "win32":
        appdata = os.environ.get(c.CONFIG_ENV_APPDATA)
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get(c.CONFIG_ENV_XDG)
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    return Path.home() / ".config"


def default_config_path() -> Path:
    return default_config_dir() / c.CONFIG_FILENAME


class UserConfig:
    """
    Per-user YAML settings file.

    Nothing touches the file system until load() is called; later calls
    return the settings read the first time.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else default_config_path()
        self._settings: Optional[Dict[str, Any]] = None

    @property
    def loaded(self) -> bool:
        return self._settings is not None

    @property
    def settings(self) -> Dict[str, Any]:
        if self._settings is None:
            raise RuntimeError("UserConfig.load() has not been called")
        return self._settings

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def load(self) -> Dict[str, Any]:
        if self._settings is not None:
            return self._settings

        if not self.path.exists():
            log("info", f"could not find config file, creating it: {self.path}")
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
            except OSError as e:
                raise ConfigError(self.path, f"could not be created ({e.strerror or e})") from e

        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(self.path, f"could not be read ({e})") from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(self.path, f"invalid YAML ({e})") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(self.path, "top level must be a mapping")

        self._settings = data
        return self._settings
