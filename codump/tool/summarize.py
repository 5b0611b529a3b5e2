# See LICENSE for details

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from codump.tool.lines import ELLIPSIS, indent_string, starts_with_indent
from codump.tool.outline import Component


def summarize_lines(lines: List[str], indent: int, exclude: Optional[Tuple[int, int]] = None) -> List[str]:
    """
    Convert lines to the summary view.

    Every run of consecutive lines starting with a space or a tab is replaced by a single
    `...` line indented by `indent`. Empty lines inside such a run are dropped, empty lines
    outside of it are kept. Lines inside the `exclude` range (start inclusive, end exclusive)
    are never collapsed.
    """
    output = []
    in_indent = False
    for i, line in enumerate(lines):
        if not line and in_indent:
            continue
        excluded = exclude is not None and exclude[0] <= i < exclude[1]
        if starts_with_indent(line) and not excluded:
            if not in_indent:
                output.append(indent_string(ELLIPSIS, indent))
                in_indent = True
        else:
            output.append(line)
            in_indent = False
    return output


def _trim_after_last(lines: List[str], marker: str) -> List[str]:
    """Drop the lines after the last `marker`. Without a marker nothing is kept."""
    for i in range(len(lines) - 1, -1, -1):
        if lines[i] == marker:
            return lines[: i + 1]
    return []


@dataclass
class Context:
    """
    Compact view of an ancestor, used to bracket the output of a found component.

    begin_body_lines are printed before the component and end_body_lines after it.
    """

    outer_comments: List[str] = field(default_factory=list)
    begin_body_lines: List[str] = field(default_factory=list)
    end_body_lines: List[str] = field(default_factory=list)
    indent: int = 0

    @classmethod
    def from_component(cls, component: Component, include_comments: bool = False) -> 'Context':
        ellipsis = indent_string(ELLIPSIS, component.indent)
        body = component.body_lines
        indent = component.indent
        inner = [indent_string(line, indent) for line in component.inner_comments] if include_comments else []

        if component.is_root:
            begin = inner + [ellipsis]
            end = [ellipsis]
        elif component.inner_comments_range is not None:
            start, stop = component.inner_comments_range
            begin = summarize_lines(body[:start], indent)
            if include_comments:
                begin += inner + [ellipsis]
            elif not begin or begin[-1] != ellipsis:
                begin.append(ellipsis)
            end = summarize_lines(body[stop:], indent)
        else:
            begin = _trim_after_last(summarize_lines(body, indent), ellipsis)
            tail = summarize_lines(body[::-1], indent)
            if ellipsis in tail:
                end = tail[: tail.index(ellipsis) + 1][::-1]
            else:
                # nothing collapsed, both fragments are empty
                end = []

        return cls(
            outer_comments=list(component.outer_comments) if include_comments else [],
            begin_body_lines=begin,
            end_body_lines=end,
            indent=indent,
        )
