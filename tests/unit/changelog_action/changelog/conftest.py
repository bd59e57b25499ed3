"""Fixtures for changelog engine unit tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

WriteChangelog = Callable[..., Path]


def max_consecutive_blank_lines(text: str) -> int:
    """Longest run of blank or whitespace-only lines in the text."""
    longest = 0
    current = 0
    for line in text.split("\n"):
        if line.strip() == "":
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


@pytest.fixture
def write_changelog(tmp_path: Path) -> WriteChangelog:
    """Write changelog content to a file in tmp_path and return its path."""

    def _write(content: str, name: str = "CHANGES.md") -> Path:
        path = tmp_path / name
        # newline="" so CRLF test content reaches the file untouched
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return path

    return _write


@pytest.fixture
def missing_changelog(tmp_path: Path) -> Path:
    """Path of a changelog file that does not exist."""
    return tmp_path / "does-not-exist" / "CHANGES.md"
