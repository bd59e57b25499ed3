"""Exception classes raised by the changelog engine."""

from pathlib import Path


class ChangelogError(Exception):
    """Base exception for changelog errors."""


class ChangelogNotFoundError(ChangelogError, FileNotFoundError):
    """The changelog file does not exist."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"{path} not found")
        self.path = str(path)


class ChangelogDecodeError(ChangelogError):
    """The changelog file is not valid UTF-8 text."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"{path} could not be decoded as UTF-8")
        self.path = str(path)


class VersionNotFoundError(ChangelogError):
    """The changelog has no section for the requested version."""

    def __init__(self, version: str, path: str | Path) -> None:
        super().__init__(f"No changelog entry found for version {version} in {path}")
        self.version = version
        self.path = str(path)


class MissingSectionError(ChangelogError):
    """A section required by the operation is not in the changelog."""


class EmptySectionError(ChangelogError):
    """A section required to have content is empty."""


class VersionExistsError(ChangelogError):
    """The changelog already has a section for the version."""


class ChangelogValidationError(ChangelogError):
    """The changelog failed validation for a release."""

    def __init__(self, message: str, errors: list[str]) -> None:
        super().__init__(message)
        self.errors = errors
