"""TOML config loading for sigproto.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_NAME = "sigproto.toml"


@dataclass
class EmitConfig:
    package: str = "main"
    types: dict[str, str] = field(default_factory=dict)


@dataclass
class FormatConfig:
    elide_types: bool = True


@dataclass
class SigprotoConfig:
    emit: EmitConfig = field(default_factory=EmitConfig)
    format: FormatConfig = field(default_factory=FormatConfig)


def find_config(start_path: Path | None = None) -> Path:
    """Walk up directories to find sigproto.toml. Raises FileNotFoundError."""
    start = (start_path or Path.cwd()).resolve()
    if start.is_file():
        start = start.parent
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_NAME
        if candidate.is_file():
            return candidate
    raise FileNotFoundError(f"No {CONFIG_NAME} found in any parent directory")


def load_config(path: Path) -> SigprotoConfig:
    """Parse a sigproto.toml file into a SigprotoConfig."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = SigprotoConfig()

    if "emit" in data:
        emit = data["emit"]
        config.emit = EmitConfig(
            package=emit.get("package", "main"),
            types={str(k): str(v) for k, v in emit.get("types", {}).items()},
        )

    if "format" in data:
        fmt = data["format"]
        config.format = FormatConfig(
            elide_types=fmt.get("elide_types", True),
        )

    return config
