"""Tests for path helpers."""

import pytest

from mime_scout.utils.path import extname


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("index.html", ".html"),
        ("/var/www/index.HTML", ".HTML"),
        ("archive.tar.gz", ".gz"),
        ("x..html", ".html"),
        ("dir.d/README", ""),
        ("/etc/.bashrc", ""),
        ("file.", "."),
        ("page.html/", ".html"),
        (".html", ""),
        ("..html", ".html"),
        ("assets/..html", ".html"),
        ("..", ""),
        ("...", "."),
        ("a.", "."),
        ("", ""),
    ],
)
def test_extname(path: str, expected: str) -> None:
    """Extension of the last segment, dot included."""
    assert extname(path) == expected
