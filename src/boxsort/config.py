from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any

import yaml

REORDER_DELAY_MIN_MS = 100
REORDER_DELAY_MAX_MS = 1000

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReorderConfig:
    enable_auto_reorder: bool = True
    # Quiet period after the last toggle before a pass runs.
    reorder_delay_ms: int = 300

    @property
    def reorder_delay_s(self) -> float:
        return self.reorder_delay_ms / 1000.0


def _coerce_bool(value: Any, *, field_name: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raw = str(value).strip().lower()
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Invalid value for {field_name}: {value!r}. Expected a boolean")


def _coerce_delay_ms(value: Any, *, field_name: str, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError(f"Invalid value for {field_name}: {value!r}. Expected an integer")
    try:
        delay = int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid value for {field_name}: {value!r}. Expected an integer") from e
    if not REORDER_DELAY_MIN_MS <= delay <= REORDER_DELAY_MAX_MS:
        raise ValueError(
            f"Invalid value for {field_name}: {delay}. "
            f"Allowed range: {REORDER_DELAY_MIN_MS}..{REORDER_DELAY_MAX_MS}"
        )
    return delay


def config_from_mapping(data: dict[str, Any] | None) -> ReorderConfig:
    """Build a snapshot from raw settings, falling back to defaults field by field."""
    data = data or {}
    defaults = ReorderConfig()
    return ReorderConfig(
        enable_auto_reorder=_coerce_bool(
            data.get("enable_auto_reorder"),
            field_name="enable_auto_reorder",
            default=defaults.enable_auto_reorder,
        ),
        reorder_delay_ms=_coerce_delay_ms(
            data.get("reorder_delay_ms"),
            field_name="reorder_delay_ms",
            default=defaults.reorder_delay_ms,
        ),
    )


def load_config(path: str | Path) -> ReorderConfig:
    cfg_path = Path(path)
    if not cfg_path.exists():
        _logger.debug(f"Config not found, using defaults: {cfg_path}")
        return ReorderConfig()
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {cfg_path} must be a mapping, got {type(data).__name__}")
    return config_from_mapping(data)


def save_config(cfg: ReorderConfig, path: str | Path) -> None:
    cfg_path = Path(path)
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    cfg_path.write_text(yaml.safe_dump(asdict(cfg), sort_keys=False), encoding="utf-8")


class SettingsStore:
    """Owns the process-wide settings snapshot and persists every update."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._settings = load_config(self.path)

    @property
    def settings(self) -> ReorderConfig:
        return self._settings

    def update(self, **changes: Any) -> ReorderConfig:
        unknown = set(changes) - set(asdict(self._settings))
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
        merged = replace(self._settings, **changes)
        cfg = config_from_mapping(asdict(merged))
        save_config(cfg, self.path)
        self._settings = cfg
        _logger.info(
            f"Settings saved: enable_auto_reorder={cfg.enable_auto_reorder}; "
            f"reorder_delay_ms={cfg.reorder_delay_ms}"
        )
        return cfg
