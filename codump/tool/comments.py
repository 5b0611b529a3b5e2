# See LICENSE for details

from typing import List, Optional, Tuple

from codump.core.config import CommentPattern

_IDLE = 0
_IN_SINGLE = 1
_IN_MULTI = 2


def find_comments(lines: List[str], pattern: CommentPattern, skip: int = 0) -> Optional[Tuple[int, int]]:
    """
    Locate the first block of comments in a list of lines.

    A block is either consecutive lines matching the single line pattern, or the lines
    from a multi line start up to (and including) the next line matching the multi line end.
    The line that opens a multi line block never closes it, even when it also matches the
    end pattern. A block still open at the end of the input runs to the end of the input.

    Args:
        lines: Lines to scan.
        pattern: Comment patterns to use.
        skip: Number of leading characters of every line to ignore before matching.
              Lines shorter than this are matched as empty lines.

    Returns:
        (start, end) with start inclusive and end exclusive, or None if there is no comment.
    """
    state = _IDLE
    start = 0
    for i, line in enumerate(lines):
        view = line[skip:] if len(line) >= skip else ''
        if state == _IDLE:
            if pattern.single_line.search(view):
                state = _IN_SINGLE
                start = i
            elif pattern.multi_start is not None and pattern.multi_start.search(view):
                state = _IN_MULTI
                start = i
        elif state == _IN_SINGLE:
            if not pattern.single_line.search(view):
                return (start, i)
        elif pattern.multi_end.search(view):
            return (start, i + 1)

    if state == _IDLE:
        return None
    return (start, len(lines))
