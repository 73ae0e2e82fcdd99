"""Load SitemapConfig from sitemapkit.yaml if present.

Merges file config with explicit keyword overrides. Overrides take precedence.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from sitemapkit._errors import ConfigError
from sitemapkit.config import SitemapConfig

CONFIG_FILENAMES = ("sitemapkit.yaml", "sitemapkit.yml", "sitemapkit.toml")

_KNOWN_KEYS = frozenset(
    {"path", "gzip", "document_root", "read", "max_urls", "max_bytes"}
)


def load_config(root: Path | str, **overrides: object) -> SitemapConfig:
    """Load SitemapConfig for *root*, optionally merging sitemapkit.yaml.

    Looks for sitemapkit.yaml, sitemapkit.yml, or sitemapkit.toml in root.
    Relative ``path`` and ``document_root`` values resolve against root.

    Raises:
        ConfigError: If the config file cannot be parsed, a value has the
            wrong type, or no sitemap path is configured.

    """
    root = Path(root)
    merged = {**_read_config_file(root), **overrides}

    if merged.get("path") is None:
        msg = f"No sitemap path configured (checked {root})"
        raise ConfigError(msg)
    merged["path"] = _resolve(root, merged["path"])
    if merged.get("document_root") is not None:
        merged["document_root"] = _resolve(root, merged["document_root"])

    for key in ("max_urls", "max_bytes"):
        if key in merged:
            merged[key] = _as_int(key, merged[key])
    for key in ("gzip", "read"):
        if key in merged and not isinstance(merged[key], bool):
            msg = f"{key} must be true or false, got {merged[key]!r}"
            raise ConfigError(msg)

    return SitemapConfig(**merged)  # type: ignore[arg-type]


def _resolve(root: Path, value: object) -> Path:
    path = Path(str(value))
    return path if path.is_absolute() else root / path


def _as_int(key: str, value: object) -> int:
    if isinstance(value, bool):
        msg = f"{key} must be an integer, got {value!r}"
        raise ConfigError(msg)
    try:
        return int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        msg = f"{key} must be an integer, got {value!r}"
        raise ConfigError(msg) from None


def _read_config_file(root: Path) -> dict[str, object]:
    """Read sitemapkit config from yaml/toml if present. Returns empty dict otherwise."""
    for name in CONFIG_FILENAMES:
        path = root / name
        if not path.is_file():
            continue
        if path.suffix == ".toml":
            return _parse_toml(path)
        return _parse_yaml(path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_sitemap_section(path, data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_sitemap_section(path, data)


def _flatten_sitemap_section(path: Path, data: object) -> dict[str, object]:
    """Extract sitemap.* keys and known top-level keys into one mapping."""
    if not isinstance(data, dict):
        msg = f"Expected a mapping at the top of {path}"
        raise ConfigError(msg)
    result: dict[str, object] = {
        k: v for k, v in data.items() if k != "sitemap" and k in _KNOWN_KEYS
    }
    section = data.get("sitemap")
    if isinstance(section, dict):
        for k, v in section.items():
            if k in _KNOWN_KEYS:
                result[k] = v
    return result
