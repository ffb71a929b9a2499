"""Configuration loading and validation."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from clubfacts.common.constants import DEFAULT_DELAY_SECONDS, HUB_URL, LOCATION_LABELS, USER_AGENT
from clubfacts.common.errors import ConfigError
from clubfacts.common.fs import read_yaml
from clubfacts.common.http import TimeoutConfig
from clubfacts.common.schema import validate_crawler_config

CONFIG_FILENAME = "crawler.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "hub": {"url": HUB_URL},
    "http": {
        "user_agent": USER_AGENT,
        "timeout": {"connect": 20.0, "read": 60.0},
    },
    "pacing": {"delay_seconds": DEFAULT_DELAY_SECONDS},
    "extraction": {"location_labels": list(LOCATION_LABELS)},
}


@dataclass(frozen=True)
class CrawlerConfig:
    hub_url: str
    user_agent: str
    timeout: TimeoutConfig
    delay_seconds: float
    location_labels: frozenset[str]


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _read_layer(path: Path | None) -> dict:
    if path is None or not path.exists():
        return {}
    try:
        layer = read_yaml(path)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file is not valid YAML: {path}") from exc
    if layer is None:
        return {}
    if not isinstance(layer, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return layer


def _to_config(raw: dict) -> CrawlerConfig:
    timeout = raw["http"]["timeout"]
    return CrawlerConfig(
        hub_url=str(raw["hub"]["url"]),
        user_agent=str(raw["http"]["user_agent"]),
        timeout=TimeoutConfig(connect=float(timeout["connect"]), read=float(timeout["read"])),
        delay_seconds=float(raw["pacing"]["delay_seconds"]),
        location_labels=frozenset(str(label).strip().lower() for label in raw["extraction"]["location_labels"]),
    )


def load_crawler_config(
    config_dir: Path | None = None,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
    overrides: dict | None = None,
) -> CrawlerConfig:
    """Build the crawler config from defaults, config files and overrides.

    Layers apply in order: built-in defaults, `<config_dir>/crawler.yml`,
    `<overlay_config_dir>/crawler.yml`, then `overrides` (command-line
    values). Missing files are skipped. The merged result is validated as a
    whole.
    """
    merged = copy.deepcopy(DEFAULT_CONFIG)
    for directory in (config_dir, overlay_config_dir):
        if directory is not None:
            merged = _deep_merge(merged, _read_layer(directory / CONFIG_FILENAME))
    if overrides:
        merged = _deep_merge(merged, overrides)
    return _to_config(validate_crawler_config(merged, allow_unknown=allow_unknown))
