"""Build configuration: defaults, environment overrides and .vrbuild.yml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

CONFIG_FILENAME = ".vrbuild.yml"
CLI_LOCATION_ENV = "RN_CLI_LOCATION"

DEFAULT_EXCLUDES: tuple[str, ...] = (
    "node_modules",
    "build",
    "__tests__",
    "static_assets",
    ".babelrc",
    ".flowconfig",
    ".git",
    ".gitignore",
    ".watchmanconfig",
    "yarn.lock",
    "package.json",
    "rn-cli.config.js",
    CONFIG_FILENAME,
)

_DEFAULT_CLI_PARTS = ("node_modules", "react-native", "local-cli", "cli.js")


class ConfigError(RuntimeError):
    """Raised when the project configuration file cannot be parsed."""


def default_node_executable(platform: str | None = None) -> str:
    platform = platform or sys.platform
    return "node.exe" if platform.startswith("win") else "node"


@dataclass(frozen=True)
class BuildConfig:
    """Explicit settings for one orchestrated build."""

    start_dir: Path
    cli_location: Optional[Path] = None
    node: str = field(default_factory=default_node_executable)
    framework_dependency: str = "react-vr"
    build_dir_name: str = "build"
    static_assets_dir: str = "static_assets"
    platform: str = "vr"
    entry_suffix: str = ".vr.js"
    client_entry_name: str = "client.js"
    client_bundle_name: str = "client.bundle.js"
    exclude: tuple[str, ...] = DEFAULT_EXCLUDES

    def resolve_cli_location(self, root: Path) -> Path:
        """Return the bundler CLI script, falling back to the project's node_modules."""
        if self.cli_location is not None:
            location = self.cli_location.expanduser()
            return location if location.is_absolute() else (root / location).resolve()
        return root.joinpath(*_DEFAULT_CLI_PARTS)

    def exclusions(self) -> frozenset[str]:
        """Names skipped while walking; output and asset dirs are always included."""
        return frozenset(self.exclude) | {self.build_dir_name, self.static_assets_dir}


def config_from_environment(
    start_dir: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> BuildConfig:
    """Build a config from the process environment and explicit overrides.

    ``start_dir`` defaults to the current working directory. A
    ``RN_CLI_LOCATION`` value is used unless ``cli_location`` is passed.
    """
    env = os.environ if environ is None else environ
    start = Path(start_dir) if start_dir is not None else Path.cwd()
    values: Dict[str, Any] = {}
    env_location = env.get(CLI_LOCATION_ENV)
    if env_location:
        values["cli_location"] = Path(env_location)
    for key, value in overrides.items():
        if value is not None:
            values[key] = value
    if "exclude" in values:
        values["exclude"] = tuple(values["exclude"])
    return BuildConfig(start_dir=start.expanduser().resolve(), **values)


def load_project_config(config: BuildConfig, root: Path) -> BuildConfig:
    """Merge ``<root>/.vrbuild.yml`` into ``config`` when the file exists."""
    config_file = root / CONFIG_FILENAME
    if not config_file.exists():
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    updates: Dict[str, Any] = {}
    for key, attr in (
        ("build_dir", "build_dir_name"),
        ("static_assets", "static_assets_dir"),
        ("platform", "platform"),
        ("node", "node"),
    ):
        value = _as_str(data.get(key))
        if value:
            updates[attr] = value

    # An explicit CLI or environment override beats the project file.
    cli_location = _as_str(data.get("cli_location"))
    if cli_location and config.cli_location is None:
        updates["cli_location"] = Path(cli_location)

    extra = _as_str_list(data.get("exclude"))
    if extra:
        updates["exclude"] = tuple(dict.fromkeys([*config.exclude, *extra]))

    return replace(config, **updates) if updates else config


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    raise ConfigError("'exclude' must be a string or a list of names")


__all__ = [
    "BuildConfig",
    "CLI_LOCATION_ENV",
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_EXCLUDES",
    "config_from_environment",
    "default_node_executable",
    "load_project_config",
]
