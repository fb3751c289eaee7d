"""Path resolution and directory helpers."""

from __future__ import annotations

import os
import shutil
import stat
from typing import Union

StrPath = Union[str, "os.PathLike[str]"]


def resolve_abs_path(path: StrPath) -> str:
    """Return an absolute form of ``path``.

    Absolute paths are returned unchanged, ``~/`` is expanded to the home
    directory, an empty path means the working directory, and anything else
    is taken relative to the working directory.
    """
    text = os.fspath(path)
    if os.path.isabs(text):
        return text
    if text.startswith("~/"):
        home = os.path.expanduser("~")
        return os.path.normpath(os.path.join(home, text[2:]))
    cwd = os.getcwd()
    if text == "":
        return cwd
    return os.path.normpath(os.path.join(cwd, text))


def empty_dir(path: StrPath) -> None:
    """Remove ``path`` and everything below it; a missing path is fine."""
    target = resolve_abs_path(path)
    if os.path.isdir(target) and not os.path.islink(target):
        shutil.rmtree(target)
        return
    try:
        os.remove(target)
    except FileNotFoundError:
        pass


def ensure_dir(path: StrPath) -> None:
    """Create ``path`` as a directory if needed; fail if it is something else."""
    target = resolve_abs_path(path)
    try:
        info = os.stat(target)
    except FileNotFoundError:
        os.makedirs(target, mode=0o750, exist_ok=True)
        return
    if not stat.S_ISDIR(info.st_mode):
        raise NotADirectoryError(f"path '{target}' is not a directory")


def is_dir_exists(path: StrPath) -> bool:
    """Return whether ``path`` is an existing directory.

    A missing path gives False; a path that exists but is not a directory
    raises NotADirectoryError.
    """
    text = os.fspath(path)
    try:
        info = os.stat(text)
    except FileNotFoundError:
        return False
    if not stat.S_ISDIR(info.st_mode):
        raise NotADirectoryError(f"path '{text}' exists but is not a directory")
    return True