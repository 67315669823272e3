"""CLI entrypoint for producing production builds."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_EXCLUDES, ConfigError, config_from_environment
from .errors import (
    BuildError,
    ClientEntryNotFoundError,
    OutputDirCreationFailed,
    ProjectNotFoundError,
)
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vrbuild",
        description=(
            "Produce production builds of the React VR components (*.vr.js) "
            "and the client runtime (client.js)."
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to start the project search from (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--cli-location",
        type=Path,
        default=None,
        help="Path to the bundler CLI script (overrides RN_CLI_LOCATION).",
    )
    parser.add_argument(
        "--build-dir",
        default=None,
        help="Name of the output directory under the project root (default: build).",
    )
    parser.add_argument(
        "--platform",
        default=None,
        help="Platform identifier passed to the bundler (default: vr).",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="NAME",
        help="Additional file or directory name to skip; may be repeated.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write detailed logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for vrbuild."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    config = config_from_environment(
        args.path,
        cli_location=args.cli_location,
        build_dir_name=args.build_dir,
        platform=args.platform,
        exclude=(*DEFAULT_EXCLUDES, *args.exclude) if args.exclude else None,
    )
    orchestrator = Orchestrator(config)

    try:
        outcome = orchestrator.run()
    except ProjectNotFoundError:
        parser.exit(1, "Could not find a React VR project directory\n")
    except OutputDirCreationFailed as exc:
        parser.exit(1, f"Failed to create '{exc.path.name}' directory\n")
    except (ClientEntryNotFoundError, ConfigError) as exc:
        parser.exit(1, f"{exc}\n")
    except BuildError as exc:
        parser.exit(
            1,
            f"An error occurred during the bundling process. Exited with code {exc.exit_code}.\n"
            "Look at the packager output above to see what went wrong.\n",
        )
    print(
        "Production versions were successfully built.\n"
        f"They can be found at {outcome.output_dir}."
    )


if __name__ == "__main__":
    main(sys.argv[1:])
