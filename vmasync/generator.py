"""Adapter for the external C++ bindings generator."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Sequence


class GeneratorError(RuntimeError):
    """Raised when the generator process cannot be started."""


class GeneratorRunner:
    """Runs the bindings generator with inherited stdout/stderr."""

    def __init__(
        self,
        command: Sequence[str],
        *,
        runner: Callable[..., int] | None = None,
    ) -> None:
        if not command:
            raise GeneratorError("Generator command must not be empty.")
        self.command = list(command)
        self._runner = runner or self._default_runner

    def run(self, cwd: Path) -> int:
        """Block until the generator exits and return its exit code."""
        try:
            return self._runner(self.command, cwd=cwd)
        except FileNotFoundError as exc:
            raise GeneratorError(
                f"Unable to locate generator executable '{self.command[0]}'."
            ) from exc

    @staticmethod
    def _default_runner(args: Sequence[str], *, cwd: Path) -> int:
        # No capture: the child writes straight to our stdout/stderr.
        completed = subprocess.run(list(args), cwd=str(cwd), check=False)
        if completed.returncode < 0:
            # Killed by a signal; report it the way a shell does.
            return 128 - completed.returncode
        return completed.returncode


__all__ = ["GeneratorError", "GeneratorRunner"]
