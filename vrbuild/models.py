"""Value types shared across the build pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Tuple


class FileKind(Enum):
    """Role a discovered file plays in the build."""

    ENTRY = "entry"
    CLIENT = "client"
    HTML = "html"
    OTHER = "other"


@dataclass(frozen=True)
class BuildTarget:
    """One bundler invocation: an entry file and the bundle it produces."""

    entry_file: Path
    output_file: Path


@dataclass(frozen=True)
class HtmlTarget:
    """An HTML page to rewrite into the output directory."""

    source: Path
    output_dir: Path


@dataclass(frozen=True)
class AssetTarget:
    """The static asset directory and where it is copied to."""

    source_dir: Path
    dest_dir: Path


@dataclass(frozen=True)
class BuildPlan:
    """Everything one build run will execute."""

    root: Path
    output_dir: Path
    bundles: Tuple[BuildTarget, ...]
    html: Tuple[HtmlTarget, ...]
    assets: AssetTarget
    client: BuildTarget

    @property
    def operation_count(self) -> int:
        return len(self.bundles) + len(self.html) + 1


@dataclass
class BuildOutcome:
    """Result of a successful build."""

    output_dir: Path
    plan: BuildPlan


__all__ = [
    "AssetTarget",
    "BuildOutcome",
    "BuildPlan",
    "BuildTarget",
    "FileKind",
    "HtmlTarget",
]
