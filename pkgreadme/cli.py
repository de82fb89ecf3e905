"""CLI entrypoint for pkgreadme."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import PkgReadmeError
from .logging import configure_logging, get_logger
from .orchestrator import Orchestrator

logger = get_logger("cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pkgreadme",
        description=(
            "Regenerate the README.md header from package.json, keeping everything "
            "below the template marker."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(
    argv: list[str] | None = None,
    *,
    cwd: Path | None = None,
    orchestrator: Orchestrator | None = None,
) -> None:
    """Update the README in ``cwd`` (the process working directory by default)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    orchestrator = orchestrator or Orchestrator()
    root = cwd if cwd is not None else Path.cwd()

    try:
        result = orchestrator.run_update(root)
    except PkgReadmeError as exc:
        parser.exit(1, f"{exc}\n")
    except Exception as exc:
        logger.debug("Update failed", exc_info=True)
        parser.exit(1, f"{exc}\n")

    print(f"README updated at {_relativize(result.path, root)}")


def _relativize(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(Path(root).resolve()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
