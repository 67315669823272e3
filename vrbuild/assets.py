"""Recursive copy of the static asset directory."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

from .errors import SubprocessFailure
from .logging import get_logger
from .process import CommandRunner, run_command


class AssetCopier:
    """Copies a directory tree with the platform's copy utility."""

    def __init__(self, runner: CommandRunner | None = None, platform: str | None = None) -> None:
        self._runner = runner or run_command
        self._windows = (platform or sys.platform).startswith("win")
        self.logger = get_logger("assets")

    def build_command(self, source_dir: Path, dest_dir: Path) -> List[str]:
        if self._windows:
            return ["Xcopy", str(source_dir), str(dest_dir), "/E", "/I", "/Y"]
        # Copying "<src>/." into an existing dest never nests on re-runs.
        return ["cp", "-R", f"{source_dir}/.", str(dest_dir)]

    async def copy(self, root: Path, source_dir: Path, dest_dir: Path) -> None:
        command = self.build_command(source_dir, dest_dir)
        if not self._windows:
            try:
                dest_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                self.logger.error("Cannot create %s: %s", dest_dir, exc)
                raise SubprocessFailure(command, exc.errno or 1) from exc
        self.logger.info("Copying %s -> %s", source_dir.name, dest_dir)
        code = await self._runner(command, cwd=root, quiet=True)
        if code != 0:
            self.logger.error("Copying %s failed with exit code %s", source_dir, code)
            raise SubprocessFailure(command, code)


__all__ = ["AssetCopier"]
