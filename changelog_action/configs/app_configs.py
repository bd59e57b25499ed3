import os

#####
# Changelog Document
#####
# Header used when an Unreleased section has to be created, and the literal
# header recognized in addition to the built-in "Unreleased" patterns
UNRELEASED_HEADER = os.environ.get("CHANGELOG_UNRELEASED_HEADER") or "## Unreleased"

# Title written at the top of a changelog file that did not exist yet
CHANGELOG_TITLE = os.environ.get("CHANGELOG_TITLE") or "# Changelog"

# Version entries with fewer characters than this are flagged during validation.
# Only produces a warning, never fails the validation
MIN_VERSION_CONTENT_LENGTH = int(
    os.environ.get("CHANGELOG_MIN_VERSION_CONTENT_LENGTH") or 10
)

#####
# Hosting
#####
# Base URL used to build pull request and commit links for entries
GITHUB_SERVER_URL = (
    os.environ.get("GITHUB_SERVER_URL") or "https://github.com"
).rstrip("/")

#####
# Logging
#####
LOG_LEVEL = os.environ.get("LOG_LEVEL", "info")
