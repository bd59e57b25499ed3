"""Pydantic models for changelog documents."""

from enum import Enum

from pydantic import BaseModel
from pydantic import field_validator

from changelog_action.changelog.versions import normalize_version


class SectionKind(str, Enum):
    UNRELEASED = "unreleased"
    VERSION = "version"


class HeaderMatch(BaseModel):
    """Result of recognizing a line as a section header."""

    model_config = {"frozen": True}

    kind: SectionKind
    version: str | None = None  # without leading "v", None for Unreleased
    date: str | None = None  # only set for YYYY-MM-DD dates


class Section(BaseModel):
    """A section header and the content block below it."""

    model_config = {"frozen": True}

    kind: SectionKind
    header: str  # header line as written in the file, e.g. "## v1.2.0 (2025-01-15)"
    version: str | None = None
    date: str | None = None
    content: str = ""

    @property
    def is_unreleased(self) -> bool:
        return self.kind == SectionKind.UNRELEASED

    @property
    def is_empty(self) -> bool:
        return not self.content.strip()


class ChangelogDocument(BaseModel):
    """A parsed changelog: the text before the first section plus the sections."""

    model_config = {"frozen": True}

    preamble: str = ""
    sections: list[Section] = []
    line_ending: str = "\n"

    def unreleased_sections(self) -> list[Section]:
        return [section for section in self.sections if section.is_unreleased]

    def unreleased_section(self) -> Section | None:
        """The authoritative Unreleased section, which is the first one."""
        return next(
            (section for section in self.sections if section.is_unreleased), None
        )

    def find_version(self, version: str) -> Section | None:
        target = normalize_version(version)
        return next(
            (
                section
                for section in self.sections
                if not section.is_unreleased and section.version == target
            ),
            None,
        )

    def versions(self) -> list[str]:
        return [
            section.version
            for section in self.sections
            if not section.is_unreleased and section.version is not None
        ]


class CommitEntry(BaseModel):
    """A resolved change, ready to be written as one changelog line."""

    model_config = {"frozen": True}

    message: str
    author: str  # hosting handle, with or without a leading "@"
    pr_number: int | None = None
    commit_sha: str | None = None
    repo_url: str | None = None

    @field_validator("pr_number", mode="before")
    @classmethod
    def drop_non_positive_pr_number(cls, value: int | None) -> int | None:
        """PR numbers start at 1, anything lower means there is no PR."""
        if isinstance(value, int) and value <= 0:
            return None
        return value

    @field_validator("repo_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.rstrip("/") or None


class CommitInfo(BaseModel):
    """A commit as read from version control, before it becomes an entry."""

    sha: str
    message: str
    author: str  # version control author name
    author_handle: str | None = None  # hosting handle, preferred when known
    pr_number: int | None = None


class ValidationResult(BaseModel):
    valid: bool = False
    has_version_entry: bool = False
    has_unreleased: bool = False
    version_content: str | None = None
    errors: list[str] = []
    warnings: list[str] = []
