"""Failure types raised while producing a production build."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class BuildError(RuntimeError):
    """Base class for unrecoverable build failures."""

    exit_code: int = 1


class ProjectNotFoundError(BuildError):
    """Raised when no ancestor directory holds a qualifying package.json."""

    def __init__(self, start_dir: Path, dependency: str) -> None:
        super().__init__(
            f"No package.json declaring '{dependency}' found from {start_dir} upwards"
        )
        self.start_dir = start_dir
        self.dependency = dependency


class OutputDirCreationFailed(BuildError):
    """Raised when the build output directory cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to create '{path.name}' directory: {reason}")
        self.path = path


class ClientEntryNotFoundError(BuildError):
    """Raised when the project tree has no client runtime entry file."""

    def __init__(self, root: Path, name: str) -> None:
        super().__init__(f"No '{name}' entry file found under {root}")
        self.root = root
        self.name = name


class SubprocessFailure(BuildError):
    """A spawned bundler or copy process exited with a non-zero status."""

    def __init__(self, command: Sequence[str], exit_code: int) -> None:
        program = command[0] if command else "<unknown>"
        super().__init__(f"{program} exited with code {exit_code}")
        self.command = list(command)
        self.exit_code = exit_code


class FileIOFailure(BuildError):
    """Reading or writing an HTML file failed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"I/O error on {path}: {cause}")
        self.path = path
        self.cause = cause
        self.exit_code = cause.errno or 1


__all__ = [
    "BuildError",
    "ClientEntryNotFoundError",
    "FileIOFailure",
    "OutputDirCreationFailed",
    "ProjectNotFoundError",
    "SubprocessFailure",
]
