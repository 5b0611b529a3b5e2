# See LICENSE for details

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from codump.core.config import Config
from codump.tool.comments import find_comments
from codump.tool.lines import find_indentation, starts_with_indent, unindent_lines_with_origin


@dataclass
class Component:
    """
    A node of the outline tree, loosely a documented declaration.

    Attributes:
        is_root: True only for the node that represents the whole file.
        outer_comments: Comments that introduced this component, unindented. Empty for the root.
        body_lines: Body lines in the parent's frame, keeping their own indentation.
                    Includes the text of the children and the inner comments.
        inner_comments: Leading doc block inside the body, unindented.
        inner_comments_range: (start, end) of the inner comments in body_lines, end exclusive.
        indent: Indentation of the body relative to the parent.
        children: Child components in file order.
    """

    is_root: bool = False
    outer_comments: List[str] = field(default_factory=list)
    body_lines: List[str] = field(default_factory=list)
    inner_comments: List[str] = field(default_factory=list)
    inner_comments_range: Optional[Tuple[int, int]] = None
    indent: int = 0
    children: List['Component'] = field(default_factory=list)


def _find_child_comment(lines: List[str], start: int, config: Config) -> Optional[Tuple[int, int]]:
    """
    Find the next outer comment block at or after `start` that introduces a child.

    A block only counts when the line right after it exists, is not empty and is not indented.
    """
    while start < len(lines):
        found = find_comments(lines[start:], config.outer_comments)
        if found is None:
            return None
        block_start, block_end = start + found[0], start + found[1]
        if block_end < len(lines) and lines[block_end] and not starts_with_indent(lines[block_end]):
            return (block_start, block_end)
        start = block_end
    return None


def parse_component(
    outer_comments: List[str],
    body_lines: List[str],
    indent: int,
    is_root: bool,
    config: Config,
) -> Component:
    """
    Parse a component body into a Component with its children.

    body_lines are stored as given. The parsing itself runs on the body with `indent`
    characters removed, where lines that are not indented belong to this component
    and can not start a child.
    """
    inner_comments_range = find_comments(body_lines, config.inner_comments, indent)
    if inner_comments_range is not None:
        start, end = inner_comments_range
        inner_comments = [line[indent:] for line in body_lines[start:end]]
        scan_from_origin = end
    else:
        inner_comments = []
        scan_from_origin = 0

    component = Component(
        is_root=is_root,
        outer_comments=outer_comments,
        body_lines=body_lines,
        inner_comments=inner_comments,
        inner_comments_range=inner_comments_range,
        indent=indent,
    )

    rebased = [(i, line) for i, line in unindent_lines_with_origin(body_lines, indent) if not config.is_ignored(line)]
    lines = [line for _, line in rebased]
    # first rebased line that comes after the inner comments in body_lines
    scan_from = next((n for n, (i, _) in enumerate(rebased) if i >= scan_from_origin), len(lines))

    comment = _find_child_comment(lines, scan_from, config)
    while comment is not None:
        comment_start, comment_end = comment
        next_comment = _find_child_comment(lines, comment_end, config)
        body_end = next_comment[0] if next_comment is not None else len(lines)

        child_body = lines[comment_end:body_end]
        component.children.append(
            parse_component(
                lines[comment_start:comment_end],
                child_body,
                find_indentation(child_body),
                False,
                config,
            )
        )
        comment = next_comment

    return component


def parse_lines(lines: List[str], config: Config) -> Component:
    """Parse the lines of a whole file into the root component."""
    return parse_component([], list(lines), 0, True, config)
