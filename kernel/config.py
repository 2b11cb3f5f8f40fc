"""
kernel/config.py — Paths, default settings and benchmark config loading.

All path constants and default settings live here. The CLI and the
benchmark harness import from this file.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any

import yaml

from domain.models import BenchConfig, Strategy

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

STATE_DIR_NAME = ".synthaccess"
LOG_FILE_NAME = "synthaccess.log"
CONFIG_FILE_NAME = "synthaccess.yaml"


def state_dir(project_dir: Path) -> Path:
    """Return the .synthaccess directory path for a working directory."""
    return project_dir / STATE_DIR_NAME


def log_file(project_dir: Path) -> Path:
    """Return the log file path."""
    return state_dir(project_dir) / LOG_FILE_NAME


def config_file(project_dir: Path) -> Path:
    """Return the default config file path."""
    return project_dir / CONFIG_FILE_NAME


# ---------------------------------------------------------------------------
# Benchmark defaults
# ---------------------------------------------------------------------------

# Property exercised by the harness pojo
DEFAULT_PROPERTY = "field"

# Value the pojo starts with; the setter benchmarks overwrite it
INITIAL_VALUE = "_initial"

# Length of the random lowercase value written by setter benchmarks
VALUE_LENGTH = 8

# Calls per timed run and number of timed runs
NUMBER = 100_000
REPEAT = 5

DEFAULT_BINDER = "generated"

DEFAULTS = BenchConfig(
    property_name=DEFAULT_PROPERTY,
    initial_value=INITIAL_VALUE,
    value_length=VALUE_LENGTH,
    number=NUMBER,
    repeat=REPEAT,
    binder=DEFAULT_BINDER,
)

_INT_KEYS = ("value_length", "number", "repeat")
_STR_KEYS = ("property_name", "initial_value", "binder")
_KNOWN_KEYS = frozenset((*_INT_KEYS, *_STR_KEYS, "seed", "strategies"))

# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_config(path: Path | None = None, **overrides: Any) -> BenchConfig:
    """Build a BenchConfig from an optional YAML file plus overrides.

    A missing file yields the defaults. Overrides whose value is ``None``
    are ignored, so parsed CLI arguments can be passed straight through.

    Args:
        path: YAML file holding a mapping of BenchConfig field names.
        **overrides: Field values that win over the file.

    Returns:
        The merged configuration.

    Raises:
        ValueError: The file is not a mapping, names an unknown key, or
            holds a value of the wrong type or range.
    """
    data: dict[str, Any] = {}
    if path is not None and path.exists():
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            msg = f"{path}: expected a mapping, got {type(loaded).__name__}"
            raise ValueError(msg)
        data.update(loaded)

    data.update({k: v for k, v in overrides.items() if v is not None})
    return _config_from_dict(data)


def _config_from_dict(data: dict[str, Any]) -> BenchConfig:
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        msg = f"Unknown config key(s): {', '.join(unknown)}"
        raise ValueError(msg)

    values: dict[str, Any] = {}
    for key in _INT_KEYS:
        if key in data:
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                msg = f"{key} must be a positive integer, got {value!r}"
                raise ValueError(msg)
            values[key] = value
    for key in _STR_KEYS:
        if key in data:
            value = data[key]
            if not isinstance(value, str):
                msg = f"{key} must be a string, got {value!r}"
                raise ValueError(msg)
            values[key] = value
    if "seed" in data:
        values["seed"] = _parse_seed(data["seed"])
    if "strategies" in data:
        values["strategies"] = _parse_strategies(data["strategies"])

    return dataclasses.replace(DEFAULTS, **values)


def _parse_seed(raw: Any) -> int | None:
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int):
        msg = f"seed must be an integer or null, got {raw!r}"
        raise ValueError(msg)
    return raw


def _parse_strategies(raw: Any) -> tuple[Strategy, ...]:
    if isinstance(raw, str | Strategy):
        names = [raw]
    elif isinstance(raw, list | tuple):
        names = list(raw)
    else:
        msg = f"strategies must be a name or a list of names, got {raw!r}"
        raise ValueError(msg)
    try:
        strategies = tuple(
            name if isinstance(name, Strategy) else Strategy(str(name).lower()) for name in names
        )
    except ValueError:
        known = ", ".join(s.value for s in Strategy)
        msg = f"strategies must be drawn from: {known}, got {raw!r}"
        raise ValueError(msg) from None
    if not strategies:
        msg = "strategies must not be empty"
        raise ValueError(msg)
    return strategies

