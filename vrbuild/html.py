"""Rewriting development bundle URLs in HTML pages to production bundle paths."""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

from .errors import FileIOFailure
from .logging import get_logger

# A run of non-quote characters around a literal ".bundle".
BUNDLE_REFERENCE = re.compile(r"""[^"']+\.bundle[^"']+""")


def normalized_bundle_path(reference: str) -> str:
    """Map a reference like ``./index.bundle?platform=vr`` to ``/index.bundle.js``."""
    basename = re.split(r"[/\\]", reference)[-1]
    return f"/{basename.split('.')[0]}.bundle.js"


def rewrite_bundle_references(text: str) -> str:
    """Replace every bundle reference in ``text`` in a single pass."""
    return BUNDLE_REFERENCE.sub(lambda match: normalized_bundle_path(match.group(0)), text)


class HtmlRewriter:
    """Writes each HTML page into the output directory with bundle paths fixed up."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self.logger = get_logger("html")

    async def rewrite(self, file_path: Path, output_dir: Path) -> Path:
        return await asyncio.to_thread(self.rewrite_sync, file_path, output_dir)

    def rewrite_sync(self, file_path: Path, output_dir: Path) -> Path:
        target = output_dir / file_path.name
        try:
            data = file_path.read_bytes()
        except OSError as exc:
            raise FileIOFailure(file_path, exc) from exc

        text = data.decode(self.encoding, errors="surrogateescape")
        references = BUNDLE_REFERENCE.findall(text)
        if references:
            self.logger.debug("Rewriting %d bundle reference(s) in %s", len(references), file_path.name)
            data = rewrite_bundle_references(text).encode(self.encoding, errors="surrogateescape")
        else:
            self.logger.debug("No bundle references in %s; copying as-is", file_path.name)

        try:
            target.write_bytes(data)
        except OSError as exc:
            raise FileIOFailure(target, exc) from exc
        return target


__all__ = [
    "BUNDLE_REFERENCE",
    "HtmlRewriter",
    "normalized_bundle_path",
    "rewrite_bundle_references",
]
