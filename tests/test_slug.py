import os

import pytest

from ajisai.slug import get_slug_from_base_dir


def _platform(path):
    return path.replace("/", os.sep)


@pytest.mark.parametrize(
    ("base_abs_dir", "target_path", "expected"),
    [
        ("/base", "/base/foo/bar.md", "foo/bar"),
        ("/another/base", "/another/base/baz/qux.txt", "baz/qux"),
        ("/base", "/base/my_prompt.md", "my_prompt"),
        ("/base", "/base/foo/.bar.md", "foo/.bar"),
        ("/base", "/base/archive.tar.gz", "archive.tar"),
        ("/base", "/base/sub/archive.tar.gz", "sub/archive.tar"),
    ],
)
def test_valid_slugs(base_abs_dir, target_path, expected):
    assert get_slug_from_base_dir(_platform(base_abs_dir), _platform(target_path)) == expected


@pytest.mark.parametrize(
    ("base_abs_dir", "target_path"),
    [
        ("/base", "/other/foo/bar.md"),
        ("/base", "/base/foo/bar"),
        ("/base/foo", "/base/foo"),
        ("/base/foo.md", "/base/foo.md"),
        ("base", "/base/foo/bar.md"),
        ("/base", "base/foo/bar.md"),
        ("not/abs", "/not/abs/foo/bar.md"),
        ("/abs/base", "not/abs/file.md"),
        ("/base", "/base/foo/"),
    ],
    ids=[
        "not-under-base",
        "no-extension",
        "same-directory",
        "base-is-file",
        "base-relative",
        "target-relative",
        "base-not-absolute",
        "target-not-absolute",
        "target-is-directory",
    ],
)
def test_invalid_slugs(base_abs_dir, target_path):
    with pytest.raises(ValueError):
        get_slug_from_base_dir(_platform(base_abs_dir), _platform(target_path))


def test_error_message_mentions_base():
    with pytest.raises(ValueError, match="is not an absolute directory"):
        get_slug_from_base_dir(_platform("/base/foo.md"), _platform("/base/foo.md"))


def test_error_message_mentions_not_under():
    with pytest.raises(ValueError, match="is not under base path"):
        get_slug_from_base_dir(_platform("/base"), _platform("/other/foo/bar.md"))