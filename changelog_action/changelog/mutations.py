"""Updates to a changelog file.

Every operation reads the file, builds a new document and rewrites the whole
file. Preconditions are checked before anything is written, so a failing
operation leaves the file as it was.
"""

from datetime import date as date_type
from pathlib import Path

from changelog_action.changelog.constants import DEFAULT_SECTION_PREFIX
from changelog_action.changelog.constants import SECTION_DATE_FORMAT
from changelog_action.changelog.exceptions import ChangelogNotFoundError
from changelog_action.changelog.exceptions import EmptySectionError
from changelog_action.changelog.exceptions import MissingSectionError
from changelog_action.changelog.exceptions import VersionExistsError
from changelog_action.changelog.exceptions import VersionNotFoundError
from changelog_action.changelog.file_store import write_changelog_file
from changelog_action.changelog.formatting import build_version_header
from changelog_action.changelog.formatting import format_commit_entries
from changelog_action.changelog.formatting import render_changelog
from changelog_action.changelog.headers import header_prefix
from changelog_action.changelog.headers import ISO_DATE_PATTERN
from changelog_action.changelog.models import ChangelogDocument
from changelog_action.changelog.models import CommitEntry
from changelog_action.changelog.models import Section
from changelog_action.changelog.models import SectionKind
from changelog_action.changelog.parsing import load_changelog
from changelog_action.changelog.versions import normalize_version
from changelog_action.changelog.versions import with_v_prefix
from changelog_action.configs.app_configs import CHANGELOG_TITLE
from changelog_action.configs.app_configs import UNRELEASED_HEADER
from changelog_action.utils.logger import setup_logger

logger = setup_logger()


# ============================================================================
# Helpers
# ============================================================================


def _today() -> str:
    return date_type.today().strftime(SECTION_DATE_FORMAT)


def _load_or_create(path: str | Path, unreleased_header: str) -> ChangelogDocument:
    try:
        return load_changelog(path, unreleased_header)
    except ChangelogNotFoundError:
        logger.info(f"Changelog {path} does not exist, creating it")
        return ChangelogDocument(preamble=CHANGELOG_TITLE)


def _write_document(path: str | Path, document: ChangelogDocument) -> None:
    write_changelog_file(path, render_changelog(document))


def _sections_with_unreleased_first(
    document: ChangelogDocument, unreleased_header: str
) -> list[Section]:
    """The document's sections with the authoritative Unreleased section first.

    An empty Unreleased section is created when there is none.
    """
    sections = list(document.sections)
    index = next(
        (i for i, section in enumerate(sections) if section.is_unreleased), None
    )

    if index is None:
        unreleased = Section(
            kind=SectionKind.UNRELEASED, header=unreleased_header.strip()
        )
        return [unreleased, *sections]

    if index > 0:
        logger.info(f"Moving '{sections[index].header}' above the released versions")
        sections.insert(0, sections.pop(index))
    return sections


def _new_version_section(
    prefix: str, version: str, date: str | None, content: str
) -> Section:
    return Section(
        kind=SectionKind.VERSION,
        header=build_version_header(prefix, version, date),
        version=normalize_version(version),
        date=date if date and ISO_DATE_PATTERN.match(date) else None,
        content=content,
    )


# ============================================================================
# Operations
# ============================================================================


def add_to_unreleased(
    path: str | Path,
    entries: list[CommitEntry],
    unreleased_header: str = UNRELEASED_HEADER,
) -> None:
    """Append formatted entries, in order, to the end of the Unreleased section.

    Creates the file (title plus Unreleased section) or the Unreleased
    section when missing. Does nothing, not even a rewrite, without entries.
    """
    if not entries:
        logger.debug(f"No entries to add to {path}")
        return

    document = _load_or_create(path, unreleased_header)
    sections = _sections_with_unreleased_first(document, unreleased_header)

    unreleased = sections[0]
    new_lines = format_commit_entries(entries)
    if unreleased.is_empty:
        content = new_lines
    else:
        content = f"{unreleased.content.rstrip()}\n{new_lines}"
    sections[0] = unreleased.model_copy(update={"content": content})

    _write_document(path, document.model_copy(update={"sections": sections}))
    logger.info(f"Added {len(entries)} entries to '{unreleased.header}' in {path}")


def promote_unreleased_to_version(
    path: str | Path,
    version: str,
    date: str | None = None,
    unreleased_header: str = UNRELEASED_HEADER,
) -> None:
    """Move the Unreleased content into a new "v<version> (<date>)" section.

    The Unreleased header stays, now empty, directly above the new section.
    All other sections keep their order. The date defaults to today.

    Raises:
        ChangelogNotFoundError: If the changelog does not exist
        ChangelogDecodeError: If the changelog is not valid UTF-8
        MissingSectionError: If there is no Unreleased section
        EmptySectionError: If the Unreleased section has no content
        VersionExistsError: If the version already has a section
    """
    document = load_changelog(path, unreleased_header)
    tag = with_v_prefix(version)

    unreleased = document.unreleased_section()
    if unreleased is None:
        raise MissingSectionError(f"Unreleased section not found in {path}")
    if unreleased.is_empty:
        raise EmptySectionError(
            f"Unreleased section in {path} is empty, nothing to release as {tag}"
        )
    if document.find_version(version) is not None:
        raise VersionExistsError(f"{path} already has a section for {tag}")

    release_date = date or _today()
    released = _new_version_section(
        header_prefix(unreleased.header, DEFAULT_SECTION_PREFIX),
        version,
        release_date,
        unreleased.content,
    )

    sections = _sections_with_unreleased_first(document, unreleased_header)
    sections = [
        sections[0].model_copy(update={"content": ""}),
        released,
        *sections[1:],
    ]

    _write_document(path, document.model_copy(update={"sections": sections}))
    logger.info(f"Promoted Unreleased section to {tag} ({release_date}) in {path}")


def add_version_section(
    path: str | Path,
    version: str,
    date: str | None,
    entries: list[CommitEntry],
    unreleased_header: str = UNRELEASED_HEADER,
) -> None:
    """Insert a section for a past release, used to backfill missing tags.

    The section goes right after the Unreleased section, or at the top, and
    always above every existing version. Versions are not sorted, callers
    backfilling several releases go from oldest to newest. Nothing is written
    without entries or when the version already has a section.
    """
    if not entries:
        logger.debug(f"No entries for {with_v_prefix(version)}, not adding a section")
        return

    document = _load_or_create(path, unreleased_header)
    if document.find_version(version) is not None:
        logger.warning(
            f"{path} already has a section for {with_v_prefix(version)}, skipping"
        )
        return

    if document.unreleased_section() is not None:
        sections = _sections_with_unreleased_first(document, unreleased_header)
    else:
        sections = list(document.sections)
    insert_at = next(
        (i for i, section in enumerate(sections) if not section.is_unreleased),
        len(sections),
    )
    # Match the heading depth the document already uses
    first_header = sections[0].header if sections else None
    prefix = header_prefix(first_header, DEFAULT_SECTION_PREFIX)

    section = _new_version_section(
        prefix, version, date, format_commit_entries(entries)
    )
    sections.insert(insert_at, section)

    _write_document(path, document.model_copy(update={"sections": sections}))
    logger.info(f"Added {section.header} with {len(entries)} entries to {path}")


def extract_version_changelog(
    input_path: str | Path, version: str, output_path: str | Path
) -> None:
    """Write a changelog holding only the given version's header and content.

    Raises:
        ChangelogNotFoundError: If the input changelog does not exist
        VersionNotFoundError: If the version has no section
    """
    document = load_changelog(input_path)

    section = document.find_version(version)
    if section is None:
        raise VersionNotFoundError(version, input_path)

    extracted = ChangelogDocument(sections=[section], line_ending=document.line_ending)
    _write_document(output_path, extracted)
    logger.info(f"Extracted {section.header} from {input_path} to {output_path}")
