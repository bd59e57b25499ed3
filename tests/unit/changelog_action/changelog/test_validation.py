"""Unit tests for release readiness validation."""

from pathlib import Path

from changelog_action.changelog.validation import validate_changelog
from tests.unit.changelog_action.changelog.conftest import WriteChangelog


class TestValidateChangelog:
    def test_valid(self, write_changelog: WriteChangelog) -> None:
        path = write_changelog(
            "# Changelog\n\n## Unreleased\n\n## v1.2.0 (2025-01-15)\n\n"
            "- Add new feature by @davesnx (#42)\n"
        )
        result = validate_changelog(path, "v1.2.0")

        assert result.valid
        assert result.has_version_entry
        assert not result.has_unreleased
        assert result.version_content == "- Add new feature by @davesnx (#42)"
        assert result.errors == []
        assert result.warnings == []

    def test_accepts_version_without_prefix(
        self, write_changelog: WriteChangelog
    ) -> None:
        path = write_changelog("## 1.2.0\n\n- Add new feature by @davesnx\n")
        assert validate_changelog(path, "1.2.0").valid
        assert validate_changelog(path, "v1.2.0").valid

    def test_missing_file(self, missing_changelog: Path) -> None:
        result = validate_changelog(missing_changelog, "1.0.0")

        assert not result.valid
        assert result.errors == [f"{missing_changelog} not found"]
        assert not result.has_version_entry

    def test_missing_version(self, write_changelog: WriteChangelog) -> None:
        path = write_changelog("## v1.0.0\n\n- Initial release by @davesnx\n")
        result = validate_changelog(path, "v2.0.0")

        assert not result.valid
        assert not result.has_version_entry
        assert result.version_content is None
        assert len(result.errors) == 1
        assert "does not contain an entry for version 2.0.0" in result.errors[0]
        assert "## 2.0.0" in result.errors[0]

    def test_empty_version(self, write_changelog: WriteChangelog) -> None:
        path = write_changelog("## v1.0.0\n\n\n## v0.9.0\n\n- Beta by @davesnx\n")
        result = validate_changelog(path, "1.0.0")

        assert not result.valid
        assert result.errors == ["Changelog entry for version 1.0.0 is empty"]

    def test_short_entry_warns(self, write_changelog: WriteChangelog) -> None:
        """Very short entries are flagged but still valid."""
        path = write_changelog("## v1.0.0\n\n- Fix\n")
        result = validate_changelog(path, "1.0.0")

        assert result.valid
        assert result.has_version_entry
        assert len(result.warnings) == 1
        assert "seems very short" in result.warnings[0]
        assert "(5 characters)" in result.warnings[0]

    def test_unreleased_content_warns(self, write_changelog: WriteChangelog) -> None:
        path = write_changelog(
            "## Unreleased\n\n- Pending change by @davesnx\n\n"
            "## v1.0.0\n\n- Initial release by @davesnx\n"
        )
        result = validate_changelog(path, "v1.0.0")

        assert result.valid
        assert result.has_unreleased
        assert result.warnings == [
            "Changelog has content in the Unreleased section that will not be "
            "part of the 1.0.0 release"
        ]

    def test_missing_version_with_pending_unreleased(
        self, write_changelog: WriteChangelog
    ) -> None:
        """Forgetting to promote Unreleased gives an error and a warning."""
        path = write_changelog(
            "## Unreleased\n\n- Pending change by @davesnx\n\n"
            "## v1.0.0\n\n- Initial release by @davesnx\n"
        )
        result = validate_changelog(path, "1.1.0")

        assert not result.valid
        assert len(result.errors) == 1
        assert result.has_unreleased
        assert len(result.warnings) == 1

    def test_multiple_unreleased_sections_warn(
        self, write_changelog: WriteChangelog
    ) -> None:
        path = write_changelog(
            "## Unreleased\n\n## v1.0.0\n\n- Initial release by @davesnx\n\n"
            "## [Unreleased]\n\n- Stray entry by @davesnx\n"
        )
        result = validate_changelog(path, "1.0.0")

        assert result.valid
        assert not result.has_unreleased
        assert result.warnings == [
            "Changelog has 2 Unreleased sections, only the first one is used"
        ]

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "CHANGES.md"
        path.write_bytes(b"## 1.0.0\n\n- caf\xe9 fix\n")

        result = validate_changelog(path, "1.0.0")

        assert not result.valid
        assert result.errors == [f"{path} could not be decoded as UTF-8"]

    def test_unclosed_fence_in_unreleased(
        self, write_changelog: WriteChangelog
    ) -> None:
        """A stray fence in pending entries does not hide released versions."""
        path = write_changelog(
            "## Unreleased\n\n- Document ``` usage\n  ```\n\n"
            "## 1.0.0\n\n- Added feature A\n\n## 0.9.0\n\n- Initial release\n"
        )

        result = validate_changelog(path, "1.0.0")

        assert result.valid
        assert result.version_content == "- Added feature A"

    def test_byte_order_mark(self, write_changelog: WriteChangelog) -> None:
        path = write_changelog("\ufeff## 1.0.0\n\n- Added feature A\n")
        assert validate_changelog(path, "1.0.0").valid
