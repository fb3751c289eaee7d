"""Fetching packages from git repositories or local directories."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from ajisai.cmd import CommandRunner, DefaultCommandRunner
from ajisai.paths import empty_dir, ensure_dir, is_dir_exists, resolve_abs_path


class ImportType(str, Enum):
    """Where an imported package comes from."""

    LOCAL = "local"
    GIT = "git"

    def __str__(self) -> str:
        return self.value


@dataclass
class GitImportDetails:
    """A package in a git repository, optionally at a given revision."""

    repository: str
    revision: str = ""


@dataclass
class LocalImportDetails:
    """A package in a local directory."""

    path: str


ImportDetails = Union[GitImportDetails, LocalImportDetails]


@dataclass
class ImportedPackage:
    """An import entry: its source type, details, and the presets to include."""

    type: ImportType
    details: ImportDetails
    include: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.type = ImportType(self.type)


class InvalidSourceTypeError(Exception):
    """A fetcher was given a source of another type."""

    def __init__(self, expected_type: ImportType, actual_type: ImportType) -> None:
        self.expected_type = ImportType(expected_type)
        self.actual_type = ImportType(actual_type)
        super().__init__(
            f"expected source type: {self.expected_type.value}, got: {self.actual_type.value}"
        )


class GitFetchError(Exception):
    """A git step of fetching failed; the cause holds the underlying error."""


def _invalid_source(expected: ImportType, source: ImportedPackage) -> InvalidSourceTypeError:
    return InvalidSourceTypeError(expected, source.type)


class GitFetcher:
    """Clones a repository, or updates an existing clone."""

    def __init__(self, runner: Optional[CommandRunner] = None) -> None:
        self._runner: CommandRunner = runner if runner is not None else DefaultCommandRunner()

    def fetch(self, source: ImportedPackage, destination_dir: str) -> None:
        """Clone into ``destination_dir`` if it is missing, otherwise update it.

        An existing clone has its working tree reset; with a revision the
        remote is fetched and the revision checked out, otherwise it is pulled.
        """
        details = source.details
        if not isinstance(details, GitImportDetails):
            cause = TypeError(f"cannot fetch from source type: {source.type.value}")
            raise _invalid_source(ImportType.GIT, source) from cause

        if not details.repository:
            raise ValueError("git repository URL cannot be empty")

        destination = resolve_abs_path(destination_dir)

        if not is_dir_exists(destination):
            self._runner.run("git", "clone", details.repository, destination)
            return

        try:
            self._runner.run_in_dir(destination, "git", "checkout", ".")
        except Exception as exc:
            raise GitFetchError(f"failed to clear dirty files in {destination}: {exc}") from exc

        if details.revision:
            try:
                self._runner.run_in_dir(destination, "git", "fetch", "origin")
            except Exception as exc:
                raise GitFetchError(
                    f"failed to fetch updates for repository in {destination}: {exc}"
                ) from exc
            self._runner.run_in_dir(destination, "git", "checkout", details.revision)
            return

        self._runner.run_in_dir(destination, "git", "pull")


def _validate_source(source_dir: str) -> None:
    if not source_dir:
        raise ValueError("source path cannot be empty")
    if not is_dir_exists(source_dir):
        raise FileNotFoundError(f"source directory '{source_dir}' does not exist")


class LocalFetcher:
    """Copies a package from a local directory."""

    def fetch(self, source: ImportedPackage, destination_dir: str) -> None:
        """Replace ``destination_dir`` with a copy of the source directory."""
        details = source.details
        if not isinstance(details, LocalImportDetails):
            cause = TypeError(f"cannot fetch from source type: {source.type.value}")
            raise _invalid_source(ImportType.LOCAL, source) from cause

        source_dir = resolve_abs_path(details.path)
        destination = resolve_abs_path(destination_dir)

        _validate_source(source_dir)

        empty_dir(destination)
        ensure_dir(destination)
        shutil.copytree(source_dir, destination, symlinks=True, dirs_exist_ok=True)