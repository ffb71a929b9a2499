"""Minimal strict schema for YAML crawler config validation."""

from __future__ import annotations

from urllib.parse import urlparse

from clubfacts.common.errors import ConfigError


def _assert_mapping(obj: object, ctx: str) -> dict:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    return obj


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_section(cfg: dict, name: str, required: set[str], allow_unknown: bool) -> dict:
    section = _assert_mapping(cfg[name], name)
    _assert_required_keys(section, required, name)
    _assert_no_unknown_keys(section, required, name, allow_unknown)
    return section


def _non_negative_number(value: object, ctx: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{ctx} must be a number")
    if value < 0:
        raise ConfigError(f"{ctx} must not be negative")
    return float(value)


def validate_crawler_config(cfg: object, *, allow_unknown: bool = False) -> dict:
    cfg = _assert_mapping(cfg, "crawler config")
    top_required = {"hub", "http", "pacing", "extraction"}
    _assert_required_keys(cfg, top_required, "crawler config")
    _assert_no_unknown_keys(cfg, top_required, "crawler config", allow_unknown)

    hub = _assert_section(cfg, "hub", {"url"}, allow_unknown)
    parsed = urlparse(str(hub["url"]))
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ConfigError(f"hub.url must be an absolute http(s) URL: {hub['url']}")

    http = _assert_section(cfg, "http", {"user_agent", "timeout"}, allow_unknown)
    if not str(http["user_agent"]).strip():
        raise ConfigError("http.user_agent must not be empty")
    timeout = _assert_mapping(http["timeout"], "http.timeout")
    _assert_required_keys(timeout, {"connect", "read"}, "http.timeout")
    _non_negative_number(timeout["connect"], "http.timeout.connect")
    _non_negative_number(timeout["read"], "http.timeout.read")

    pacing = _assert_section(cfg, "pacing", {"delay_seconds"}, allow_unknown)
    _non_negative_number(pacing["delay_seconds"], "pacing.delay_seconds")

    extraction = _assert_section(cfg, "extraction", {"location_labels"}, allow_unknown)
    labels = extraction["location_labels"]
    if not isinstance(labels, list) or not labels:
        raise ConfigError("extraction.location_labels must be a non-empty list")
    if any(not str(label).strip() for label in labels):
        raise ConfigError("extraction.location_labels must not contain blank labels")

    return cfg
