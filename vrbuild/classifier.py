"""Sorting walked files into bundle, client, and HTML targets."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .config import BuildConfig
from .errors import ClientEntryNotFoundError
from .logging import get_logger
from .models import AssetTarget, BuildPlan, BuildTarget, FileKind, HtmlTarget

logger = get_logger("classifier")

_HTML_SUFFIX = ".html"


def classify(path: Path, root: Path, config: BuildConfig) -> FileKind:
    """Return the single role ``path`` plays; entry suffix wins over client name."""
    if path.name.endswith(config.entry_suffix):
        return FileKind.ENTRY
    try:
        relative = path.relative_to(root).as_posix()
    except ValueError:
        relative = path.as_posix()
    if config.client_entry_name in relative:
        return FileKind.CLIENT
    if path.suffix == _HTML_SUFFIX:
        return FileKind.HTML
    return FileKind.OTHER


def bundle_name_for(entry: Path, suffix: str) -> str:
    name = entry.name
    stem = name[: -len(suffix)] if suffix and name.endswith(suffix) else entry.stem
    return f"{stem}.bundle.js"


def build_plan(
    files: Iterable[Path],
    root: Path,
    output_dir: Path,
    config: BuildConfig,
) -> BuildPlan:
    """Classify ``files`` in one pass and lay out the targets for a build."""
    entries: List[BuildTarget] = []
    html: List[HtmlTarget] = []
    client_entry: Optional[Path] = None

    for path in files:
        kind = classify(path, root, config)
        if kind is FileKind.ENTRY:
            entries.append(
                BuildTarget(
                    entry_file=path.resolve(),
                    output_file=output_dir / bundle_name_for(path, config.entry_suffix),
                )
            )
        elif kind is FileKind.CLIENT:
            if client_entry is None:
                client_entry = path.resolve()
            else:
                logger.warning("Ignoring extra client entry %s (using %s)", path, client_entry)
        elif kind is FileKind.HTML:
            html.append(HtmlTarget(source=path, output_dir=output_dir))

    if client_entry is None:
        raise ClientEntryNotFoundError(root, config.client_entry_name)

    client = BuildTarget(entry_file=client_entry, output_file=output_dir / config.client_bundle_name)
    return BuildPlan(
        root=root,
        output_dir=output_dir,
        bundles=(*entries, client),
        html=tuple(html),
        assets=AssetTarget(
            source_dir=root / config.static_assets_dir,
            dest_dir=output_dir / config.static_assets_dir,
        ),
        client=client,
    )


__all__ = ["build_plan", "bundle_name_for", "classify"]
