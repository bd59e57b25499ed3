"""Constants for changelog parsing and rendering."""

# Deepest markdown heading ("###") that can open a changelog section
MAX_SECTION_HEADER_DEPTH = 3

# Heading prefix for sections created when no Unreleased header gives a hint
DEFAULT_SECTION_PREFIX = "##"

# Section dates are always rendered and recognized in this format
SECTION_DATE_FORMAT = "%Y-%m-%d"

# Commit links show an abbreviated SHA, like `git log --oneline`
SHORT_SHA_LENGTH = 7

MERGE_COMMIT_PREFIX = "Merge "

# Written by some editors at the start of UTF-8 files, never part of the text
BYTE_ORDER_MARK = "\ufeff"
