"""Release readiness checks for a changelog."""

from pathlib import Path

from changelog_action.changelog.exceptions import ChangelogDecodeError
from changelog_action.changelog.exceptions import ChangelogNotFoundError
from changelog_action.changelog.models import ValidationResult
from changelog_action.changelog.parsing import load_changelog
from changelog_action.changelog.versions import normalize_version
from changelog_action.configs.app_configs import MIN_VERSION_CONTENT_LENGTH
from changelog_action.utils.logger import setup_logger

logger = setup_logger()


def validate_changelog(path: str | Path, version: str) -> ValidationResult:
    """Check that the changelog is ready for releasing a version.

    Errors make the result invalid:
    - the file is missing or unreadable
    - there is no section for the version
    - the version's section is empty

    Warnings are advisory only:
    - the version's section is very short
    - the Unreleased section still has content
    - there is more than one Unreleased section

    Never raises, problems are reported in the result.
    """
    try:
        document = load_changelog(path)
    except ChangelogNotFoundError:
        return ValidationResult(valid=False, errors=[f"{path} not found"])
    except ChangelogDecodeError as e:
        logger.warning(f"Could not read changelog {path}: {e}")
        return ValidationResult(valid=False, errors=[str(e)])
    except OSError as e:
        logger.warning(f"Could not read changelog {path}: {e}")
        return ValidationResult(valid=False, errors=[f"{path} not found"])

    errors: list[str] = []
    warnings: list[str] = []
    has_version_entry = False
    version_content: str | None = None

    normalized = normalize_version(version)
    section = document.find_version(normalized)
    if section is None:
        errors.append(
            f"{path} does not contain an entry for version {normalized}. "
            f"Add a section such as '## {normalized}' describing the changes."
        )
    elif section.is_empty:
        errors.append(f"Changelog entry for version {normalized} is empty")
    else:
        has_version_entry = True
        version_content = section.content
        content_length = len(section.content.strip())
        if content_length < MIN_VERSION_CONTENT_LENGTH:
            warnings.append(
                f"Changelog entry for version {normalized} seems very short "
                f"({content_length} characters)"
            )

    unreleased_sections = document.unreleased_sections()
    has_unreleased = bool(unreleased_sections) and not unreleased_sections[0].is_empty
    if has_unreleased:
        warnings.append(
            "Changelog has content in the Unreleased section that will not be "
            f"part of the {normalized} release"
        )
    if len(unreleased_sections) > 1:
        warnings.append(
            f"Changelog has {len(unreleased_sections)} Unreleased sections, "
            "only the first one is used"
        )

    return ValidationResult(
        valid=not errors,
        has_version_entry=has_version_entry,
        has_unreleased=has_unreleased,
        version_content=version_content,
        errors=errors,
        warnings=warnings,
    )
