"""Configuration loading for addons-pull (.addons-pull.yml)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".addons-pull.yml"

_BUNDLED_ADDONS = Path(__file__).resolve().parent / "data" / "addons.json"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class UpstreamConfig:
    """Location of the upstream repository and its local checkout."""

    url: str = "https://github.com/GarboMuffin/ScratchAddons"
    branch: str = "tw"
    path: str = "ScratchAddons"


@dataclass
class ContributorsConfig:
    """Where translator credits are fetched from and written to."""

    enabled: bool = True
    url: str = (
        "https://raw.githubusercontent.com/ScratchAddons/contributors/master/.all-contributorsrc"
    )
    output: str = "translators.json"
    timeout: Optional[float] = None


@dataclass
class L10nConfig:
    """Locale aggregation settings."""

    base_locale: str = "en"


@dataclass
class PullConfig:
    """Represents the settings of one pull run."""

    root: Path
    upstream: UpstreamConfig = field(default_factory=UpstreamConfig)
    contributors: ContributorsConfig = field(default_factory=ContributorsConfig)
    l10n: L10nConfig = field(default_factory=L10nConfig)
    addons: List[str] = field(default_factory=list)

    @property
    def upstream_path(self) -> Path:
        return (self.root / self.upstream.path).resolve()

    @property
    def contributors_path(self) -> Path:
        return self.root / self.contributors.output


def load_default_addons() -> List[str]:
    """Return the checked-in list of addon identifiers."""
    payload = json.loads(_BUNDLED_ADDONS.read_text(encoding="utf-8"))
    return _as_str_list(payload)


def load_config(root: Path, config_path: Path | None = None) -> PullConfig:
    """Load configuration for ``root``, falling back to defaults when no file exists."""
    root = root.expanduser().resolve()
    config_file = (config_path or root / CONFIG_FILENAME).expanduser()

    if not config_file.exists():
        if config_path is not None:
            raise ConfigError(f"Configuration file not found: {config_file}")
        return PullConfig(root=root, addons=load_default_addons())

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    upstream = UpstreamConfig()
    upstream_data = _as_dict(data.get("upstream"))
    if upstream_data:
        upstream.url = _as_str(upstream_data.get("url")) or upstream.url
        upstream.branch = _as_str(upstream_data.get("branch")) or upstream.branch
        upstream.path = _as_str(upstream_data.get("path")) or upstream.path

    contributors = ContributorsConfig()
    contributors_data = _as_dict(data.get("contributors"))
    if contributors_data:
        enabled = _as_bool(contributors_data.get("enabled"))
        if enabled is not None:
            contributors.enabled = enabled
        contributors.url = _as_str(contributors_data.get("url")) or contributors.url
        contributors.output = _as_str(contributors_data.get("output")) or contributors.output
        contributors.timeout = _as_float(contributors_data.get("timeout"))

    l10n = L10nConfig()
    l10n_data = _as_dict(data.get("l10n"))
    if l10n_data:
        l10n.base_locale = _as_str(l10n_data.get("base_locale")) or l10n.base_locale

    if "addons" in data:
        addons = _as_str_list(data.get("addons"))
    else:
        addons = load_default_addons()

    return PullConfig(
        root=root,
        upstream=upstream,
        contributors=contributors,
        l10n=l10n,
        addons=addons,
    )


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
