"""JSON configuration: a document on disk and the settings read from it."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .logger import log_line

DEFAULT_LOGGER_PORT = 3080

DEFAULT_CONFIG = """
{
    "myModOption": true,
    "logger": {
        "enable": false,
        "reconnect": false,
        "ip": "192.168.1.110",
        "port": 3080
    }
}
"""

_TOKENS = re.compile(r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?\*/|/\*', re.DOTALL)


class ConfigError(Exception):
    """The configuration could not be opened, read, parsed or written."""


def parse_json_with_comments(text: str) -> Any:
    """Parse JSON that may hold ``//`` line comments and ``/* */`` block comments."""

    def replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token.startswith('"'):
            return token
        if token == "/*":
            raise ValueError("unterminated block comment")
        return "\n" if token.startswith("/*") and "\n" in token else " "

    return json.loads(_TOKENS.sub(replace, text))


def _lookup(document: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(document, dict):
            return None
        document = document.get(key)
    return document


def _bool_or(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _int_or(value: Any, default: int) -> int:
    return value if isinstance(value, int) and not isinstance(value, bool) else default


@dataclass
class ConfigBase:
    """Logger settings every configuration carries."""

    enable_logger: bool = False
    try_reconnect_logger: bool = False
    logger_ip: str | None = None
    logger_port: int = 0

    def read(self, config: dict[str, Any]) -> None:
        """Fill the fields from a parsed document; wrong or missing values get defaults."""
        self.enable_logger = _bool_or(_lookup(config, "logger", "enable"), False)
        ip = _lookup(config, "logger", "ip")
        self.logger_ip = ip if isinstance(ip, str) else None
        port = _int_or(_lookup(config, "logger", "port"), DEFAULT_LOGGER_PORT)
        self.logger_port = port & 0xFFFF
        self.try_reconnect_logger = _bool_or(_lookup(config, "logger", "reconnect"), False)


@dataclass
class ModOptions(ConfigBase):
    """Settings of the mod itself on top of the logger settings."""

    my_mod_option: bool = False

    def read(self, config: dict[str, Any]) -> None:
        super().read(config)
        self.my_mod_option = _bool_or(_lookup(config, "myModOption"), False)


class ConfigStore:
    """Loads, holds and saves the configuration document."""

    def __init__(
        self,
        path: str | Path,
        emu_path: str | Path | None = None,
        default_config: str = DEFAULT_CONFIG,
        settings: ConfigBase | None = None,
        emulator_marker: str | Path | None = None,
    ) -> None:
        self.path = Path(path)
        self.emu_path = Path(emu_path) if emu_path is not None else None
        self.default_config = default_config
        self.settings = settings
        self.emulator_marker = Path(emulator_marker) if emulator_marker is not None else None
        self.document: Any = None
        self._loaded = False
        self._failed = False

    def is_emu(self) -> bool:
        """Running on an emulator: the marker path given is not a regular file."""
        if self.emulator_marker is None:
            return False
        return not self.emulator_marker.is_file()

    def calc_config_path(self) -> Path:
        if self.is_emu() and self.emu_path is not None:
            return self.emu_path
        return self.path

    def is_loaded(self) -> bool:
        return self._loaded

    def get_config_json(self) -> Any:
        """The document; an empty object when nothing has been loaded."""
        if not self._loaded:
            self.document = {}
        return self.document

    def load(self, retry: bool = False) -> bool:
        """Load the document from disk, creating an empty file if there is none.

        Returns ``False`` without trying when an earlier load failed and
        ``retry`` is false; raises ``ConfigError`` when loading fails.
        """
        if not isinstance(self.document, dict):
            self.document = {}
        if self._failed and not retry:
            return False

        target = self.calc_config_path()
        try:
            if not target.exists():
                target.touch()
            raw = target.read_bytes()
        except OSError as exc:
            self._failed = True
            log_line("Failed to open config file")
            raise ConfigError(f"cannot read {target}: {exc}") from exc

        try:
            document = parse_json_with_comments(raw.split(b"\0", 1)[0].decode("utf-8"))
        except ValueError as exc:
            self._failed = True
            log_line("Failed to parse config file")
            raise ConfigError(f"cannot parse {target}: {exc}") from exc

        self.document = document
        self._loaded = True
        self._failed = False
        log_line("Config loaded")
        return True

    def use_default(self) -> None:
        """Replace the document with the built-in default configuration."""
        try:
            self.document = parse_json_with_comments(self.default_config)
        except ValueError as exc:
            log_line("Failed to deserialize default config")
            self._loaded = False
            raise ConfigError(f"default configuration is invalid: {exc}") from exc
        self._loaded = True

    def read_to_struct(self) -> bool:
        """Copy the document into ``settings``; ``False`` if there is nothing to copy."""
        if not self._loaded or self.settings is None:
            return False
        log_line("Reading config to struct")
        self.settings.read(self.document if isinstance(self.document, dict) else {})
        return True

    def save(self) -> None:
        """Write the document to disk as indented JSON."""
        target = self.calc_config_path()
        text = json.dumps(self.document, indent=2, ensure_ascii=False)
        try:
            with target.open("w", encoding="utf-8") as handle:
                handle.write(text)
                handle.flush()
        except OSError as exc:
            log_line("Failed to open config file")
            raise ConfigError(f"cannot write {target}: {exc}") from exc