"""Tests for vrbuild.assets."""

from __future__ import annotations

import asyncio
import shutil
import sys
from pathlib import Path

import pytest

from vrbuild.assets import AssetCopier
from vrbuild.errors import SubprocessFailure

posix_only = pytest.mark.skipif(
    sys.platform.startswith("win") or shutil.which("cp") is None,
    reason="requires the POSIX cp utility",
)


def test_build_command_per_platform(tmp_path: Path) -> None:
    source = tmp_path / "static_assets"
    dest = tmp_path / "build" / "static_assets"

    assert AssetCopier(platform="linux").build_command(source, dest) == [
        "cp",
        "-R",
        f"{source}/.",
        str(dest),
    ]
    assert AssetCopier(platform="win32").build_command(source, dest) == [
        "Xcopy",
        str(source),
        str(dest),
        "/E",
        "/I",
        "/Y",
    ]


@posix_only
def test_copy_is_recursive_and_byte_for_byte(tmp_path: Path) -> None:
    source = tmp_path / "static_assets"
    (source / "textures").mkdir(parents=True)
    payload = bytes(range(256))
    (source / "textures" / "floor.png").write_bytes(payload)
    (source / "pano.txt").write_text("sky\n", encoding="utf-8")
    dest = tmp_path / "build" / "static_assets"

    copier = AssetCopier()
    asyncio.run(copier.copy(tmp_path, source, dest))
    # A second run overwrites in place instead of nesting.
    asyncio.run(copier.copy(tmp_path, source, dest))

    assert (dest / "textures" / "floor.png").read_bytes() == payload
    assert (dest / "pano.txt").read_text(encoding="utf-8") == "sky\n"
    assert not (dest / "static_assets").exists()


@posix_only
def test_copy_fails_when_source_is_missing(tmp_path: Path) -> None:
    with pytest.raises(SubprocessFailure) as excinfo:
        asyncio.run(AssetCopier().copy(tmp_path, tmp_path / "missing", tmp_path / "build" / "missing"))

    assert excinfo.value.exit_code != 0
