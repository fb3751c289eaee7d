"""Slugs for files below a base directory."""

from __future__ import annotations

import os
import posixpath


def _extension(path: str) -> str:
    name = path.rsplit(os.sep, 1)[-1]
    if os.altsep:
        name = name.rsplit(os.altsep, 1)[-1]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def get_slug_from_base_dir(base_abs_dir: str, target_path: str) -> str:
    """Return the slug of ``target_path`` relative to ``base_abs_dir``.

    The slug uses "/" as separator and drops the last extension::

        get_slug_from_base_dir("/base", "/base/foo/bar/baz.tar.gz")  # "foo/bar/baz.tar"

    Raises ValueError if the base is not an absolute directory, the target is
    not an absolute file, or the target is not below the base.
    """
    base = os.path.normpath(base_abs_dir)
    target = os.path.normpath(target_path)

    if not os.path.isabs(base) or _extension(base) != "":
        raise ValueError(f"baseAbsDir {base_abs_dir} is not an absolute directory")
    if not os.path.isabs(target) or _extension(target) == "":
        raise ValueError(f"targetPath {target_path} is not an absolute file")

    try:
        relative = os.path.relpath(target, base)
    except ValueError as exc:
        raise ValueError(f"failed to get relative path: {exc}") from exc

    if relative.startswith("."):
        raise ValueError(f"target path {target_path} is not under base path {base_abs_dir}")

    slashed = relative.replace(os.sep, "/")
    directory = posixpath.dirname(slashed) or "."
    name = posixpath.basename(slashed)
    ext = _extension(name)
    if ext:
        name = name[: -len(ext)]

    if directory == ".":
        return name
    return f"{directory}/{name}"