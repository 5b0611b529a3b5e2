# See LICENSE for details

from dataclasses import dataclass, field
from typing import List, Sequence

from codump.tool.outline import Component
from codump.tool.summarize import Context


class FindComponentResult:
    """Outcome of find_component: one of Found, NotFound or Multiple."""


@dataclass
class Found(FindComponentResult):
    """
    The search path matched one component.

    contexts is the reversed path to the root: the nearest ancestor first and the
    file itself last.
    """

    component: Component
    contexts: List[Context] = field(default_factory=list)


@dataclass
class NotFound(FindComponentResult):
    """Nothing matched `term` at some level."""

    term: str


@dataclass
class Multiple(FindComponentResult):
    """More than one component matched `term` at the same level."""

    candidates: List[Component]
    term: str


def match_children(component: Component, term: str) -> List[Component]:
    """
    Find the children matching a search term.

    Lines are compared by offset into the child bodies: first every child's first line,
    then every child's second line, and so on. The first offset where any child contains
    `term` decides, and all children matching at that offset are returned.
    """
    longest = max((len(child.body_lines) for child in component.children), default=0)
    for offset in range(longest):
        matched = [
            child
            for child in component.children
            if offset < len(child.body_lines) and term in child.body_lines[offset]
        ]
        if matched:
            return matched
    return []


def find_component(
    component: Component, search_path: Sequence[str], include_comments: bool = False
) -> FindComponentResult:
    """
    Find a component following a search path of case sensitive substrings.

    An empty search path returns the component itself with no context.
    """
    if not search_path:
        return Found(component, [])

    term = search_path[0]
    matched = match_children(component, term)

    if not matched:
        return NotFound(term)
    if len(matched) > 1:
        return Multiple(matched, term)

    result = find_component(matched[0], search_path[1:], include_comments)
    if isinstance(result, Found):
        result.contexts.append(Context.from_component(component, include_comments))
    return result
