"""Recognition of changelog section headers.

A header is a markdown heading of depth 1 to 3 that names either the
Unreleased sentinel or a version:

    ## Unreleased
    ## [Unreleased]
    ## v1.2.0 (2025-01-15)
    ## 1.0.0-beta.1
    ## [2.0.0] - 2025-03-01

Everything else, including "### Added" style sub-headings and headings with
no version number, is ordinary section content.
"""

import re

from changelog_action.changelog.constants import MAX_SECTION_HEADER_DEPTH
from changelog_action.changelog.models import HeaderMatch
from changelog_action.changelog.models import SectionKind

_HEADER_PREFIX = rf"#{{1,{MAX_SECTION_HEADER_DEPTH}}}"

UNRELEASED_HEADER_PATTERN = re.compile(
    rf"^{_HEADER_PREFIX}\s*\[?\s*Unreleased\s*\]?\s*$", re.IGNORECASE
)

VERSION_HEADER_PATTERN = re.compile(
    rf"^{_HEADER_PREFIX}\s*\[?\s*[vV]?"
    r"(?P<version>\d+(?:\.\d+)*(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?)"
    r"\s*\]?"
    r"(?:\s*\((?P<paren_date>[^)]*)\)|\s+-\s+(?P<dash_date>\d{4}-\d{2}-\d{2}))?"
    r"\s*$"
)

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_HEADER_PREFIX_PATTERN = re.compile(rf"^{_HEADER_PREFIX}")


def parse_header(line: str, unreleased_header: str | None = None) -> HeaderMatch | None:
    """Classify a line as a section header, or return None for content.

    Only lines starting with "#" are considered, so version numbers in the
    middle of an entry are never mistaken for headers. Malformed headers are
    treated as content rather than raising.
    """
    if not line.startswith("#"):
        return None

    stripped = line.strip()
    if unreleased_header and stripped == unreleased_header.strip():
        return HeaderMatch(kind=SectionKind.UNRELEASED)

    if UNRELEASED_HEADER_PATTERN.match(stripped):
        return HeaderMatch(kind=SectionKind.UNRELEASED)

    match = VERSION_HEADER_PATTERN.match(stripped)
    if match is None:
        return None

    # Dates are cosmetic, anything that is not YYYY-MM-DD is dropped
    raw_date = (match.group("paren_date") or match.group("dash_date") or "").strip()
    date = raw_date if ISO_DATE_PATTERN.match(raw_date) else None

    return HeaderMatch(
        kind=SectionKind.VERSION, version=match.group("version"), date=date
    )


def header_prefix(header: str | None, default: str) -> str:
    """The leading "#" markup of a header line ("## Unreleased" -> "##")."""
    match = _HEADER_PREFIX_PATTERN.match(header or "")
    return match.group(0) if match else default
