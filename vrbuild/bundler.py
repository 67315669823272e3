"""Invoking the React Native bundler CLI for one entry file."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .config import BuildConfig
from .errors import SubprocessFailure
from .logging import get_logger
from .process import CommandRunner, run_command


class BundleInvoker:
    """Spawns ``<node> <cli> bundle ...`` once per build target."""

    def __init__(self, config: BuildConfig, runner: CommandRunner | None = None) -> None:
        self.config = config
        self._runner = runner or run_command
        self.logger = get_logger("bundler")

    def build_command(
        self, root: Path, output_dir: Path, entry_file: Path, output_file: Path
    ) -> List[str]:
        return [
            self.config.node,
            str(self.config.resolve_cli_location(root)),
            "bundle",
            "--entry-file",
            str(entry_file),
            "--platform",
            self.config.platform,
            "--bundle-output",
            str(output_file),
            "--dev",
            "false",
            "--assets-dest",
            str(output_dir),
        ]

    async def invoke(
        self, root: Path, output_dir: Path, entry_file: Path, output_file: Path
    ) -> None:
        """Bundle ``entry_file`` into ``output_file``; raise on a non-zero exit."""
        command = self.build_command(root, output_dir, entry_file, output_file)
        self.logger.info("Bundling %s -> %s", entry_file.name, output_file.name)
        code = await self._runner(command, cwd=root)
        if code != 0:
            self.logger.error("Bundler failed for %s with exit code %s", entry_file, code)
            raise SubprocessFailure(command, code)
        self.logger.debug("Bundled %s", output_file)


__all__ = ["BundleInvoker"]
