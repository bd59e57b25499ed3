"""Read-only lookups on a changelog file.

None of these raise: a missing or unreadable file answers like an empty
changelog.
"""

import re
from pathlib import Path

from changelog_action.changelog.exceptions import ChangelogDecodeError
from changelog_action.changelog.exceptions import ChangelogNotFoundError
from changelog_action.changelog.file_store import read_changelog_file
from changelog_action.changelog.models import ChangelogDocument
from changelog_action.changelog.parsing import parse_changelog_text
from changelog_action.configs.app_configs import UNRELEASED_HEADER
from changelog_action.utils.logger import setup_logger
from changelog_action.utils.text_processing import normalize_line_endings

logger = setup_logger()

_LIST_ITEM_PATTERN = re.compile(r"^\s*[-*+]\s")


def _read_or_none(path: str | Path) -> str | None:
    try:
        return read_changelog_file(path)
    except ChangelogNotFoundError:
        logger.debug(f"Changelog {path} does not exist")
        return None
    except (ChangelogDecodeError, OSError) as e:
        logger.warning(f"Could not read changelog {path}: {e}")
        return None


def _load_or_none(
    path: str | Path, unreleased_header: str | None = None
) -> ChangelogDocument | None:
    text = _read_or_none(path)
    if text is None:
        return None
    return parse_changelog_text(text, unreleased_header)


def has_version(path: str | Path, version: str) -> bool:
    """Whether the changelog has a section for exactly this version.

    A leading "v" is ignored on both sides, "1.0.1" does not match "1.0.10".
    """
    document = _load_or_none(path)
    return document is not None and document.find_version(version) is not None


def get_versions(path: str | Path) -> list[str]:
    """Versions in document order, without the Unreleased section."""
    document = _load_or_none(path)
    if document is None:
        return []
    return document.versions()


def get_unreleased_content(
    path: str | Path, unreleased_header: str = UNRELEASED_HEADER
) -> str | None:
    """Content of the Unreleased section, None when there is nothing pending."""
    document = _load_or_none(path, unreleased_header)
    if document is None:
        return None

    section = document.unreleased_section()
    if section is None or section.is_empty:
        return None
    return section.content


def is_entry_in_changelog(path: str | Path, message: str) -> bool:
    """Whether any list item anywhere in the changelog contains the message.

    Matching is case-insensitive and the message is taken literally, so
    "array[0]" or "a.b.c" only match themselves.
    """
    if not message.strip():
        return False

    text = _read_or_none(path)
    if text is None:
        return False

    message_pattern = re.compile(re.escape(message), re.IGNORECASE)
    return any(
        _LIST_ITEM_PATTERN.match(line) and message_pattern.search(line)
        for line in normalize_line_endings(text).split("\n")
    )


def find_missing_versions(path: str | Path, tags: list[str]) -> list[str]:
    """Tags, in the given order, that have no version section in the changelog."""
    document = _load_or_none(path)
    if document is None:
        return list(tags)
    return [tag for tag in tags if document.find_version(tag) is None]
