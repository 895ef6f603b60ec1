"""CLI entrypoint for vmasync."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .logging import configure_logging
from .orchestrator import DEFAULT_REVISION, Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vmasync",
        description=(
            "Update the vendored vk_mem_alloc.h from VulkanMemoryAllocator, "
            "refresh README version markers and regenerate C++ bindings."
        ),
    )
    parser.add_argument(
        "revision",
        nargs="?",
        default=DEFAULT_REVISION,
        help=(
            "VMA branch name or commit hash (defaults to master). "
            "Pass a revision starting with '-' after '--'."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Project root holding the header, README and .vmasync.yml (defaults to current directory).",
    )
    parser.add_argument(
        "--no-generate",
        dest="generate",
        action="store_false",
        help="Update the header and README without running the bindings generator.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns the generator's exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    try:
        orchestrator = Orchestrator(Path(args.root))
        outcome = orchestrator.run_update(args.revision, generate=bool(args.generate))
    except (RuntimeError, OSError) as exc:
        parser.exit(1, f"vmasync update failed: {exc}\nRun with --verbose for more details.\n")

    return outcome.exit_code if outcome.exit_code is not None else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
