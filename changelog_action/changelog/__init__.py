"""Changelog engine.

Parses, validates, queries and updates a markdown changelog made of an
optional preamble, an Unreleased section and one section per released
version:

    # Changelog

    ## Unreleased

    - Add new feature by @davesnx (#42)

    ## v1.0.0 (2025-01-13)

    - Initial release by @davesnx

Usage:
    from changelog_action.changelog import add_to_unreleased
    from changelog_action.changelog import CommitEntry

    add_to_unreleased("CHANGES.md", [CommitEntry(message="Fix bug", author="davesnx")])

Module structure:
    - headers.py: section header recognition
    - parsing.py: text -> ChangelogDocument
    - formatting.py: ChangelogDocument -> text, CommitEntry -> list item
    - queries.py / validation.py: read-only checks, never raise
    - mutations.py: read, transform and rewrite a changelog file
    - commits.py / releases.py: preparation around the release flow
"""

from changelog_action.changelog.commits import filter_new_commits
from changelog_action.changelog.commits import to_commit_entry
from changelog_action.changelog.exceptions import ChangelogDecodeError
from changelog_action.changelog.exceptions import ChangelogError
from changelog_action.changelog.exceptions import ChangelogNotFoundError
from changelog_action.changelog.exceptions import ChangelogValidationError
from changelog_action.changelog.exceptions import EmptySectionError
from changelog_action.changelog.exceptions import MissingSectionError
from changelog_action.changelog.exceptions import VersionExistsError
from changelog_action.changelog.exceptions import VersionNotFoundError
from changelog_action.changelog.formatting import format_commit_entry
from changelog_action.changelog.formatting import render_changelog
from changelog_action.changelog.models import ChangelogDocument
from changelog_action.changelog.models import CommitEntry
from changelog_action.changelog.models import CommitInfo
from changelog_action.changelog.models import Section
from changelog_action.changelog.models import SectionKind
from changelog_action.changelog.models import ValidationResult
from changelog_action.changelog.mutations import add_to_unreleased
from changelog_action.changelog.mutations import add_version_section
from changelog_action.changelog.mutations import extract_version_changelog
from changelog_action.changelog.mutations import promote_unreleased_to_version
from changelog_action.changelog.parsing import load_changelog
from changelog_action.changelog.parsing import parse_changelog
from changelog_action.changelog.parsing import parse_changelog_text
from changelog_action.changelog.parsing import parse_sections
from changelog_action.changelog.queries import find_missing_versions
from changelog_action.changelog.queries import get_unreleased_content
from changelog_action.changelog.queries import get_versions
from changelog_action.changelog.queries import has_version
from changelog_action.changelog.queries import is_entry_in_changelog
from changelog_action.changelog.releases import prepare_release_changelog
from changelog_action.changelog.releases import version_changelog_path
from changelog_action.changelog.validation import validate_changelog

__all__ = [
    # Parsing and rendering
    "load_changelog",
    "parse_changelog",
    "parse_changelog_text",
    "parse_sections",
    "render_changelog",
    "format_commit_entry",
    # Queries
    "find_missing_versions",
    "get_unreleased_content",
    "get_versions",
    "has_version",
    "is_entry_in_changelog",
    "validate_changelog",
    # Updates
    "add_to_unreleased",
    "add_version_section",
    "extract_version_changelog",
    "promote_unreleased_to_version",
    # Release flow
    "filter_new_commits",
    "to_commit_entry",
    "prepare_release_changelog",
    "version_changelog_path",
    # Models
    "ChangelogDocument",
    "CommitEntry",
    "CommitInfo",
    "Section",
    "SectionKind",
    "ValidationResult",
    # Errors
    "ChangelogDecodeError",
    "ChangelogError",
    "ChangelogNotFoundError",
    "ChangelogValidationError",
    "EmptySectionError",
    "MissingSectionError",
    "VersionExistsError",
    "VersionNotFoundError",
]
