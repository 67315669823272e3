"""Pipeline orchestration for a production build."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Awaitable, List

from .assets import AssetCopier
from .bundler import BundleInvoker
from .classifier import build_plan
from .config import BuildConfig, load_project_config
from .errors import OutputDirCreationFailed
from .html import HtmlRewriter
from .locator import ProjectLocator
from .logging import get_logger
from .models import BuildOutcome, BuildPlan
from .walker import DirectoryWalker


class Orchestrator:
    """Locates the project, plans the targets, and runs them concurrently."""

    def __init__(
        self,
        config: BuildConfig,
        locator: ProjectLocator | None = None,
        walker: DirectoryWalker | None = None,
        bundler: BundleInvoker | None = None,
        copier: AssetCopier | None = None,
        rewriter: HtmlRewriter | None = None,
    ) -> None:
        self.config = config
        self.locator = locator or ProjectLocator(config.framework_dependency)
        self.walker = walker or DirectoryWalker()
        self._bundler = bundler
        self.copier = copier or AssetCopier()
        self.rewriter = rewriter or HtmlRewriter()
        self.logger = get_logger("orchestrator")

    def run(self) -> BuildOutcome:
        """Run the build to completion on a fresh event loop."""
        return asyncio.run(self.run_async())

    async def run_async(self) -> BuildOutcome:
        root = self.locator.locate(self.config.start_dir)
        self.logger.info("Building project at %s", root)
        config = load_project_config(self.config, root)
        bundler = self._bundler or BundleInvoker(config)

        output_dir = self._ensure_output_dir(root / config.build_dir_name)
        files = self.walker.walk(root, config.exclusions())
        self.logger.debug("Walker discovered %d files", len(files))

        plan = build_plan(files, root, output_dir, config)
        self.logger.info(
            "Planned %d bundle(s), %d HTML file(s), and the %s copy",
            len(plan.bundles),
            len(plan.html),
            config.static_assets_dir,
        )

        await self._execute(plan, bundler)
        return BuildOutcome(output_dir=output_dir, plan=plan)

    def _ensure_output_dir(self, output_dir: Path) -> Path:
        try:
            output_dir.mkdir(exist_ok=True)
        except FileExistsError as exc:
            raise OutputDirCreationFailed(output_dir, "path exists and is not a directory") from exc
        except OSError as exc:
            raise OutputDirCreationFailed(output_dir, str(exc)) from exc
        return output_dir.resolve()

    async def _execute(self, plan: BuildPlan, bundler: BundleInvoker) -> None:
        operations: List[Awaitable[object]] = [
            bundler.invoke(plan.root, plan.output_dir, target.entry_file, target.output_file)
            for target in plan.bundles
        ]
        operations.extend(
            self.rewriter.rewrite(target.source, target.output_dir) for target in plan.html
        )
        operations.append(
            self.copier.copy(plan.root, plan.assets.source_dir, plan.assets.dest_dir)
        )
        tasks = [asyncio.ensure_future(operation) for operation in operations]
        # Failures never cancel siblings; the first one observed is raised after the join.
        first_failure: BaseException | None = None
        for finished in asyncio.as_completed(tasks):
            try:
                await finished
            except Exception as exc:
                if first_failure is None:
                    first_failure = exc
                else:
                    self.logger.debug("Additional failure not reported: %s", exc)
        if first_failure is not None:
            raise first_failure


__all__ = ["Orchestrator"]
