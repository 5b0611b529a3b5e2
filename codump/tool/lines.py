# See LICENSE for details

from typing import List, Tuple

INDENT_CHARS = ' \t'
ELLIPSIS = '...'


def split_lines(text: str) -> List[str]:
    r"""
    Split file text into lines.

    Only '\n' ends a line, and one trailing '\r' is removed from each line. Other
    characters such as '\x0c' or a lone '\r' stay inside the line. A final line
    ending does not produce an extra empty line.
    """
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def is_indent_char(c: str) -> bool:
    return c in INDENT_CHARS


def starts_with_indent(line: str) -> bool:
    return bool(line) and is_indent_char(line[0])


def indent_string(line: str, indent: int) -> str:
    """Prefix a line with `indent` spaces. Empty lines stay empty."""
    if not line:
        return line
    return ' ' * indent + line


def find_indentation(lines: List[str]) -> int:
    """
    Find the indentation of a block.

    The indentation is the width of the leading whitespace of the first line that has
    leading whitespace followed by some content. Tabs and spaces count as one character
    each, no expansion is done.

    Returns:
        int: number of leading whitespace characters, 0 when no line is indented.
    """
    for line in lines:
        stripped = line.lstrip(INDENT_CHARS)
        if not stripped:
            continue
        width = len(line) - len(stripped)
        if width > 0:
            return width
    return 0


def unindent_lines_with_origin(lines: List[str], indent: int) -> List[Tuple[int, str]]:
    """
    Same as unindent_lines, but every kept line is paired with its index in `lines`.
    """
    if indent == 0:
        return list(enumerate(lines))

    output = []
    # Lines before the first non-empty one are treated as if they followed a dropped line
    last_non_empty_removed = True
    for i, line in enumerate(lines):
        if not line:
            if not last_non_empty_removed:
                output.append((i, ''))
        elif is_indent_char(line[0]):
            last_non_empty_removed = False
            output.append((i, line[indent:]))
        else:
            last_non_empty_removed = True
    return output


def unindent_lines(lines: List[str], indent: int) -> List[str]:
    """
    Remove `indent` leading characters and drop the lines that are not indented.

    The characters are removed mechanically, they are not checked to be whitespace.
    Empty lines are kept only when the closest non-empty line above them is kept.
    An indent of 0 returns a copy of the input.
    """
    return [line for _, line in unindent_lines_with_origin(lines, indent)]
