"""Running external commands with inherited standard streams."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from typing import Protocol, Union

StrPath = Union[str, "os.PathLike[str]"]


class CommandRunner(Protocol):
    """Something that can run external commands."""

    def run(self, command: str, *args: str) -> None:
        """Run a command in the current working directory."""

    def run_in_dir(self, directory: StrPath, command: str, *args: str) -> None:
        """Run a command in the given directory."""


class RunCommandError(Exception):
    """A command could not be started or exited unsuccessfully."""

    def __init__(self, argv: Sequence[str], cause: BaseException) -> None:
        self.argv = list(argv)
        self.cause = cause
        super().__init__(f"{' '.join(self.argv)}: {cause}")


def run_command(argv: Sequence[str], cwd: StrPath | None = None) -> None:
    """Run ``argv`` with the parent's stdout and stderr.

    Raises RunCommandError if the command cannot be started or exits non-zero.
    """
    command = list(argv)
    try:
        subprocess.run(command, cwd=cwd, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise RunCommandError(command, exc) from exc


class DefaultCommandRunner:
    """CommandRunner backed by subprocess."""

    def run(self, command: str, *args: str) -> None:
        """Run a command in the current working directory."""
        run_command([command, *args])

    def run_in_dir(self, directory: StrPath, command: str, *args: str) -> None:
        """Run a command in the given directory."""
        run_command([command, *args], cwd=directory)