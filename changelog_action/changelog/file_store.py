"""Whole-file access to changelog files.

Reads and writes keep line endings untouched so the engine decides how
lines are terminated. Writes go through a temporary file in the same
directory followed by os.replace(), so readers never see a half-written
changelog and a failed write leaves the previous file in place.
"""

import os
import stat
from pathlib import Path
from tempfile import NamedTemporaryFile

from changelog_action.changelog.exceptions import ChangelogDecodeError
from changelog_action.changelog.exceptions import ChangelogNotFoundError

# Permissions for changelog files created from scratch
_NEW_FILE_MODE = 0o644


def changelog_file_exists(path: str | Path) -> bool:
    return Path(path).is_file()


def read_changelog_file(path: str | Path) -> str:
    """Read the whole file, without a leading byte order mark.

    Raises:
        ChangelogNotFoundError: If the file does not exist
        ChangelogDecodeError: If the file is not valid UTF-8
        OSError: For any other read failure
    """
    try:
        with open(path, encoding="utf-8-sig", newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise ChangelogNotFoundError(path) from e
    except UnicodeDecodeError as e:
        raise ChangelogDecodeError(path) from e


def write_changelog_file(path: str | Path, content: str) -> None:
    """Atomically replace the file with the given content."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    if target.exists():
        mode = stat.S_IMODE(target.stat().st_mode)
    else:
        mode = _NEW_FILE_MODE

    tmp = NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        newline="",
        dir=target.parent,
        prefix=f".{target.name}.",
        suffix=".tmp",
        delete=False,
    )
    tmp_path = tmp.name
    try:
        with tmp:
            tmp.write(content)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, target)
    except Exception:
        Path(tmp_path).unlink(missing_ok=True)
        raise


def delete_changelog_file(path: str | Path, missing_ok: bool = False) -> None:
    """Delete the file.

    Raises:
        ChangelogNotFoundError: If the file does not exist and missing_ok is False
    """
    try:
        Path(path).unlink()
    except FileNotFoundError as e:
        if not missing_ok:
            raise ChangelogNotFoundError(path) from e
