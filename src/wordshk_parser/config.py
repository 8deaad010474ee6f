"""
Configuration for the batch parser, loaded from YAML.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .exceptions import ConfigError

NO_DATA_MARKER = "未有內容 NO DATA"
UNREVIEWED_MARKER = (
    "未經覆核，可能有錯漏 UNREVIEWED ENTRY - MAY CONTAIN ERRORS OR OMISSIONS"
)
PUBLISHED_VALUE = "已公開"


@dataclass(frozen=True)
class ParserConfig:
    """Settings for reading and parsing an export."""
    skip_lines: int = 2
    no_data_marker: str = NO_DATA_MARKER
    unreviewed_marker: str = UNREVIEWED_MARKER
    published_value: str = PUBLISHED_VALUE
    workers: int = 1
    chunk_size: int = 100


_FIELD_TYPES: Dict[str, type] = {
    "skip_lines": int,
    "no_data_marker": str,
    "unreviewed_marker": str,
    "published_value": str,
    "workers": int,
    "chunk_size": int,
}


def load_config(
    source: Union[str, Path, Dict[str, Any], None] = None,
) -> ParserConfig:
    """Load parser settings from a YAML file, YAML string or dictionary.

    Args:
        source: Path to YAML file, YAML string, or parsed dictionary.
            ``None`` gives the defaults.

    Returns:
        ParserConfig object

    Raises:
        ConfigError: If the YAML is invalid or a setting is unknown or invalid
        FileNotFoundError: If the file does not exist
    """
    if source is None:
        return ParserConfig()

    if isinstance(source, dict):
        data = source
    elif isinstance(source, Path) or (isinstance(source, str) and _is_file_path(source)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = _load_yaml(f.read())
    else:
        data = _load_yaml(source)

    return _build_config(data)


def _is_file_path(s: str) -> bool:
    """Check if a string looks like a file path."""
    if "\n" in s:
        return False
    if "/" in s or "\\" in s:
        return True
    return s.endswith((".yaml", ".yml"))


def _load_yaml(s: str) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(s)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line_info = f" (line {mark.line + 1})" if mark else ""
        raise ConfigError(f"Invalid YAML{line_info}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("YAML root must be a mapping (dictionary)")
    return data


def _build_config(data: Dict[str, Any]) -> ParserConfig:
    known = {f.name for f in fields(ParserConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for name, value in data.items():
        expected = _FIELD_TYPES[name]
        # bool is an int subclass
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ConfigError(
                f"Setting '{name}' must be of type {expected.__name__}"
            )
        values[name] = value

    config = ParserConfig(**values)
    _check_ranges(config)
    return config


def _check_ranges(config: ParserConfig) -> None:
    if config.skip_lines < 0:
        raise ConfigError("Setting 'skip_lines' cannot be negative")
    if config.workers < 1:
        raise ConfigError("Setting 'workers' must be at least 1")
    if config.chunk_size < 1:
        raise ConfigError("Setting 'chunk_size' must be at least 1")
    if not config.no_data_marker:
        raise ConfigError("Setting 'no_data_marker' cannot be empty")
