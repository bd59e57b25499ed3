"""Rendering of changelog documents and commit entries to markdown."""

from changelog_action.changelog.constants import SHORT_SHA_LENGTH
from changelog_action.changelog.models import ChangelogDocument
from changelog_action.changelog.models import CommitEntry
from changelog_action.changelog.versions import with_v_prefix
from changelog_action.utils.text_processing import clean_block


# ============================================================================
# Commit Entries
# ============================================================================


def _entry_link(entry: CommitEntry) -> str | None:
    # A PR link is preferred over a commit link when both are known
    if entry.pr_number is not None:
        if entry.repo_url:
            pr_url = f"{entry.repo_url}/pull/{entry.pr_number}"
            return f"([#{entry.pr_number}]({pr_url}))"
        return f"(#{entry.pr_number})"

    if entry.commit_sha and entry.repo_url:
        short_sha = entry.commit_sha[:SHORT_SHA_LENGTH]
        commit_url = f"{entry.repo_url}/commit/{entry.commit_sha}"
        return f"([{short_sha}]({commit_url}))"

    return None


def format_commit_entry(entry: CommitEntry) -> str:
    """Format an entry as a single markdown list item.

    "- Add new feature by @davesnx ([#42](https://github.com/o/r/pull/42))"

    Message and author are inserted as-is, no markdown escaping.
    """
    author = entry.author.removeprefix("@")
    line = f"- {entry.message} by @{author}"

    link = _entry_link(entry)
    if link:
        return f"{line} {link}"
    return line


def format_commit_entries(entries: list[CommitEntry]) -> str:
    return "\n".join(format_commit_entry(entry) for entry in entries)


# ============================================================================
# Section Headers
# ============================================================================


def build_version_header(prefix: str, version: str, date: str | None) -> str:
    """Build a version header, e.g. "## v1.2.0 (2025-01-15)"."""
    header = f"{prefix} {with_v_prefix(version)}"
    if date:
        return f"{header} ({date})"
    return header


# ============================================================================
# Documents
# ============================================================================


def render_changelog(document: ChangelogDocument) -> str:
    """Render a document back to text.

    Every block (preamble, section header, section content) is separated from
    the next by exactly one blank line, blank-line runs inside a block are
    collapsed, and the text ends with a single newline. Rendering the result
    of parsing rendered output gives the same text back, so repeated updates
    never drift.
    """
    blocks: list[list[str]] = []

    preamble = clean_block(document.preamble)
    if preamble:
        blocks.append(preamble)

    for section in document.sections:
        blocks.append([section.header.strip()])
        content = clean_block(section.content)
        if content:
            blocks.append(content)

    if not blocks:
        return ""

    lines: list[str] = []
    for block in blocks:
        if lines:
            lines.append("")
        lines.extend(block)

    newline = document.line_ending
    return newline.join(lines) + newline
