"""Parsing of changelog text into a preamble and ordered sections."""

from pathlib import Path

from changelog_action.changelog.constants import BYTE_ORDER_MARK
from changelog_action.changelog.exceptions import ChangelogDecodeError
from changelog_action.changelog.exceptions import ChangelogNotFoundError
from changelog_action.changelog.file_store import read_changelog_file
from changelog_action.changelog.headers import parse_header
from changelog_action.changelog.models import ChangelogDocument
from changelog_action.changelog.models import HeaderMatch
from changelog_action.changelog.models import Section
from changelog_action.utils.logger import setup_logger
from changelog_action.utils.text_processing import detect_line_ending
from changelog_action.utils.text_processing import next_fence
from changelog_action.utils.text_processing import normalize_line_endings
from changelog_action.utils.text_processing import strip_blank_edges

logger = setup_logger()


def _build_section(header_line: str, match: HeaderMatch, lines: list[str]) -> Section:
    return Section(
        kind=match.kind,
        header=header_line.strip(),
        version=match.version,
        date=match.date,
        content="\n".join(strip_blank_edges(lines)),
    )


def _split_lines(
    lines: list[str], unreleased_header: str | None, respect_fences: bool
) -> tuple[list[str], list[Section], bool]:
    preamble_lines: list[str] = []
    sections: list[Section] = []

    current_header: str | None = None
    current_match: HeaderMatch | None = None
    current_lines: list[str] = preamble_lines

    open_fence: str | None = None
    for line in lines:
        in_code = open_fence is not None
        if respect_fences:
            open_fence = next_fence(open_fence, line)

        if not in_code and open_fence is None:
            match = parse_header(line, unreleased_header)
            if match is not None:
                if current_header is not None and current_match is not None:
                    sections.append(
                        _build_section(current_header, current_match, current_lines)
                    )
                current_header = line
                current_match = match
                current_lines = []
                continue

        current_lines.append(line)

    if current_header is not None and current_match is not None:
        sections.append(_build_section(current_header, current_match, current_lines))

    return preamble_lines, sections, open_fence is not None


def parse_changelog_text(
    text: str, unreleased_header: str | None = None
) -> ChangelogDocument:
    """Split changelog text into the preamble and one section per header.

    Each section gets every line between its header and the next one, with
    the surrounding blank lines removed and everything else kept as written.
    Headings inside fenced code blocks are content. When a fence is never
    closed the text is split again ignoring fences, so a stray fence cannot
    hide the headers below it.
    """
    text = text.removeprefix(BYTE_ORDER_MARK)
    line_ending = detect_line_ending(text)
    lines = normalize_line_endings(text).split("\n")

    preamble_lines, sections, unclosed = _split_lines(
        lines, unreleased_header, respect_fences=True
    )
    if unclosed:
        logger.warning("Changelog has an unclosed code fence, ignoring fences")
        preamble_lines, sections, _ = _split_lines(
            lines, unreleased_header, respect_fences=False
        )

    return ChangelogDocument(
        preamble="\n".join(strip_blank_edges(preamble_lines)),
        sections=sections,
        line_ending=line_ending,
    )


def parse_sections(text: str) -> list[Section]:
    return parse_changelog_text(text).sections


def load_changelog(
    path: str | Path, unreleased_header: str | None = None
) -> ChangelogDocument:
    """Read and parse a changelog file.

    Raises:
        ChangelogNotFoundError: If the file does not exist
        ChangelogDecodeError: If the file is not valid UTF-8
    """
    return parse_changelog_text(read_changelog_file(path), unreleased_header)


def parse_changelog(path: str | Path) -> list[Section]:
    """Parse the sections of a changelog file, empty if it cannot be read."""
    try:
        return load_changelog(path).sections
    except ChangelogNotFoundError:
        return []
    except (ChangelogDecodeError, OSError) as e:
        logger.warning(f"Could not read changelog {path}: {e}")
        return []
