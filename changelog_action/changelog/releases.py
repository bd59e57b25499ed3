"""Changelog preparation for a release.

The release pipeline publishes with a changelog that only holds the released
version. This module validates the main changelog and writes that
version-specific file next to it.
"""

from pathlib import Path

from changelog_action.changelog.exceptions import ChangelogValidationError
from changelog_action.changelog.mutations import extract_version_changelog
from changelog_action.changelog.validation import validate_changelog
from changelog_action.utils.logger import setup_logger


def version_changelog_path(changelog_path: str | Path, version: str) -> Path:
    """CHANGES.md + v1.2.0 -> CHANGES-v1.2.0.md, in the same directory."""
    path = Path(changelog_path).resolve()
    return path.with_name(f"{path.stem}-{version}{path.suffix}")


def prepare_release_changelog(changelog_path: str | Path, version: str) -> Path:
    """Validate the changelog for a release and extract the version's section.

    Validation warnings are logged and do not stop the release.

    Returns:
        Absolute path of the version-specific changelog

    Raises:
        ChangelogValidationError: If validation reported any error
    """
    logger = setup_logger(extra={"changelog_path": str(changelog_path)})

    validation = validate_changelog(changelog_path, version)
    for warning in validation.warnings:
        logger.warning(warning)

    if not validation.valid:
        for error in validation.errors:
            logger.error(error)
        raise ChangelogValidationError(
            "Changelog validation failed. Please fix the issues and try again.",
            validation.errors,
        )

    output_path = version_changelog_path(changelog_path, version)
    extract_version_changelog(Path(changelog_path).resolve(), version, output_path)
    logger.notice(f"Created version-specific changelog at {output_path}")
    return output_path
