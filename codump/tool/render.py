# See LICENSE for details

from typing import List, Sequence

from codump.core.config import Format
from codump.tool.lines import indent_string
from codump.tool.outline import Component
from codump.tool.summarize import Context, summarize_lines


def format_summary(component: Component) -> List[str]:
    """Outer comments followed by the body with indented regions collapsed (inner comments kept)."""
    return list(component.outer_comments) + summarize_lines(
        component.body_lines, component.indent, component.inner_comments_range
    )


def format_comment(component: Component) -> List[str]:
    return list(component.outer_comments) + list(component.inner_comments)


def format_detail(component: Component) -> List[str]:
    # body_lines already include the inner comments
    return list(component.outer_comments) + list(component.body_lines)


_FORMATTERS = {
    Format.SUMMARY: format_summary,
    Format.COMMENT: format_comment,
    Format.DETAIL: format_detail,
}


def format_component(component: Component, fmt: Format = Format.SUMMARY) -> List[str]:
    return _FORMATTERS[Format.parse(fmt)](component)


def format_with_context(component: Component, contexts: Sequence[Context], fmt: Format = Format.SUMMARY) -> List[str]:
    """
    Format a component bracketed by its ancestors.

    Args:
        component: The component to print.
        contexts: Ancestor contexts, nearest ancestor first (as returned by find_component).
        fmt: Output format of the component itself.

    Returns:
        list: output lines, each ancestor adding its indentation to what it encloses.
    """
    indent = 0
    output = []
    for context in reversed(contexts):
        output.extend(indent_string(line, indent) for line in context.outer_comments)
        output.extend(indent_string(line, indent) for line in context.begin_body_lines)
        indent += context.indent

    output.extend(indent_string(line, indent) for line in format_component(component, fmt))

    for context in contexts:
        indent -= context.indent
        output.extend(indent_string(line, indent) for line in context.end_body_lines)

    return output
