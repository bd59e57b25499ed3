import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from changelog_action.changelog.exceptions import ChangelogDecodeError
from changelog_action.changelog.exceptions import ChangelogNotFoundError
from changelog_action.changelog.file_store import changelog_file_exists
from changelog_action.changelog.file_store import delete_changelog_file
from changelog_action.changelog.file_store import read_changelog_file
from changelog_action.changelog.file_store import write_changelog_file


def test_write_and_read_keep_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "CHANGES.md"
    write_changelog_file(path, "# Changelog\r\n\r\n## Unreleased\r\n")

    assert read_changelog_file(path) == "# Changelog\r\n\r\n## Unreleased\r\n"
    assert path.read_bytes() == b"# Changelog\r\n\r\n## Unreleased\r\n"


def test_write_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "docs" / "nested" / "CHANGES.md"
    write_changelog_file(path, "# Changelog\n")

    assert changelog_file_exists(path)
    assert stat.S_IMODE(path.stat().st_mode) == 0o644


def test_write_preserves_mode(tmp_path: Path) -> None:
    path = tmp_path / "CHANGES.md"
    path.write_text("old\n", encoding="utf-8")
    os.chmod(path, 0o600)

    write_changelog_file(path, "new\n")

    assert path.read_text(encoding="utf-8") == "new\n"
    assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_failed_write_keeps_previous_file(tmp_path: Path) -> None:
    """A write that fails before the rename leaves no partial file behind."""
    path = tmp_path / "CHANGES.md"
    path.write_text("old\n", encoding="utf-8")

    with patch(
        "changelog_action.changelog.file_store.os.replace",
        side_effect=OSError("disk full"),
    ):
        with pytest.raises(OSError, match="disk full"):
            write_changelog_file(path, "new\n")

    assert path.read_text(encoding="utf-8") == "old\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["CHANGES.md"]


def test_read_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ChangelogNotFoundError, match="not found"):
        read_changelog_file(tmp_path / "CHANGES.md")


def test_changelog_file_exists(tmp_path: Path) -> None:
    assert not changelog_file_exists(tmp_path / "CHANGES.md")
    assert not changelog_file_exists(tmp_path)


def test_delete(tmp_path: Path) -> None:
    path = tmp_path / "CHANGES.md"
    path.write_text("# Changelog\n", encoding="utf-8")

    delete_changelog_file(path)
    assert not path.exists()

    with pytest.raises(ChangelogNotFoundError):
        delete_changelog_file(path)
    delete_changelog_file(path, missing_ok=True)


def test_read_drops_byte_order_mark(tmp_path: Path) -> None:
    path = tmp_path / "CHANGES.md"
    path.write_bytes(b"\xef\xbb\xbf## 1.0.0\n")

    assert read_changelog_file(path) == "## 1.0.0\n"


def test_read_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "CHANGES.md"
    path.write_bytes(b"- caf\xe9 fix\n")

    with pytest.raises(ChangelogDecodeError) as exc_info:
        read_changelog_file(path)

    assert exc_info.value.path == str(path)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
