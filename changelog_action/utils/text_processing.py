import re

# Opening or closing line of a fenced code block, possibly indented under a
# list item. Group 1 is the marker run, group 2 the rest of the line
_FENCE_RE = re.compile(r"^\s*(`{3,}|~{3,})(.*)$")


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def detect_line_ending(text: str) -> str:
    """Return the dominant line ending of the text, LF when there is a tie."""
    crlf_count = text.count("\r\n")
    lf_count = text.count("\n") - crlf_count
    return "\r\n" if crlf_count > lf_count else "\n"


def is_blank(line: str) -> bool:
    return not line.strip()


def next_fence(open_fence: str | None, line: str) -> str | None:
    """Return the fence that is open after this line, None outside code blocks.

    A block opened with a run of backticks or tildes is only closed by a bare
    run of the same character that is at least as long, so a "~~~" line
    inside a "```" block is content.
    """
    match = _FENCE_RE.match(line)
    if match is None:
        return open_fence

    marker, rest = match.group(1), match.group(2)
    if open_fence is None:
        # "``` foo `bar`" is inline code, not an opening fence
        if marker[0] == "`" and "`" in rest:
            return None
        return marker

    if (
        marker[0] == open_fence[0]
        and len(marker) >= len(open_fence)
        and not rest.strip()
    ):
        return None
    return open_fence


def strip_blank_edges(lines: list[str]) -> list[str]:
    """Drop blank lines from the start and end of a block of lines."""
    start = 0
    end = len(lines)
    while start < end and is_blank(lines[start]):
        start += 1
    while end > start and is_blank(lines[end - 1]):
        end -= 1
    return lines[start:end]


def _collapse(lines: list[str], respect_fences: bool) -> tuple[list[str], bool]:
    result: list[str] = []
    open_fence: str | None = None
    for line in lines:
        if respect_fences:
            was_open = open_fence is not None
            open_fence = next_fence(open_fence, line)
            if was_open or open_fence is not None:
                result.append(line)
                continue

        if not is_blank(line):
            result.append(line)
            continue

        if result and result[-1] == "":
            continue
        result.append("")
    return result, open_fence is not None


def collapse_blank_lines(lines: list[str]) -> list[str]:
    """Collapse every run of blank or whitespace-only lines into one empty line.

    Lines inside fenced code blocks are kept exactly as they are, since
    blank lines can be meaningful there. A fence still open at the end of
    the lines is not a code block and gets no such treatment.
    """
    result, unclosed = _collapse(lines, respect_fences=True)
    if unclosed:
        result, _ = _collapse(lines, respect_fences=False)
    return result


def clean_block(text: str) -> list[str]:
    """Split a block of text into lines with normalized blank-line spacing."""
    lines = normalize_line_endings(text).split("\n")
    return strip_blank_edges(collapse_blank_lines(lines))
