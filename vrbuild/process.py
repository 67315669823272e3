"""Async subprocess helpers shared by the bundler and asset copy steps."""

from __future__ import annotations

import asyncio
import subprocess
from pathlib import Path
from typing import Awaitable, Callable, Sequence

from .logging import get_logger

# Shell convention for "command not found".
SPAWN_FAILURE_CODE = 127

CommandRunner = Callable[..., Awaitable[int]]

logger = get_logger("process")


async def run_command(args: Sequence[str], *, cwd: Path, quiet: bool = False) -> int:
    """Run ``args`` in ``cwd`` and return its exit status.

    Standard streams are inherited from the parent unless ``quiet`` is set,
    in which case stdout is discarded. Termination by signal ``N`` returns
    ``-N``.
    """
    logger.debug("Spawning %s (cwd=%s)", " ".join(args), cwd)
    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            cwd=str(cwd),
            stdout=subprocess.DEVNULL if quiet else None,
        )
    except OSError as exc:
        logger.error("Could not start %s: %s", args[0], exc)
        return SPAWN_FAILURE_CODE
    return await process.wait()


__all__ = ["CommandRunner", "SPAWN_FAILURE_CODE", "run_command"]
