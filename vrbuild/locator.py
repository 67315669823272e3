"""Upward search for the project root."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

from .errors import ProjectNotFoundError
from .logging import get_logger

MANIFEST_NAME = "package.json"

logger = get_logger("locator")


def load_package_json(directory: Path) -> Dict[str, object]:
    """Return the parsed package.json in ``directory`` or an empty dict."""
    package_json = directory / MANIFEST_NAME
    if not package_json.is_file():
        return {}
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.debug("Ignoring unreadable %s: %s", package_json, exc)
        return {}
    if isinstance(data, dict):
        return data
    return {}


def has_framework_dependency(directory: Path, dependency: str) -> bool:
    """True when ``directory``'s package.json lists ``dependency`` as a runtime dependency."""
    deps = load_package_json(directory).get("dependencies")
    return isinstance(deps, dict) and bool(deps.get(dependency))


class ProjectLocator:
    """Finds the nearest ancestor directory that is a project of the framework."""

    def __init__(self, dependency: str = "react-vr") -> None:
        self.dependency = dependency

    def locate(self, start_dir: Path | str) -> Path:
        start = Path(start_dir).expanduser().resolve()
        current = start
        while not has_framework_dependency(current, self.dependency):
            parent = current.parent
            if parent == current:
                raise ProjectNotFoundError(start, self.dependency)
            current = parent
        logger.debug("Project root resolved to %s", current)
        return current


__all__ = ["MANIFEST_NAME", "ProjectLocator", "has_framework_dependency", "load_package_json"]
