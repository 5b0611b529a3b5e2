# See LICENSE for details

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional, Pattern, Tuple

HELP_HINT = 'See --help for more.'


class ConfigError(ValueError):
    """Raised when the comment patterns or the options can not be turned into a Config."""


class Format(str, Enum):
    """Output format."""

    SUMMARY = 'summary'  # comments + abbreviated code
    COMMENT = 'comment'  # comments only
    DETAIL = 'detail'  # comments + all code

    @classmethod
    def parse(cls, value) -> 'Format':
        if isinstance(value, Format):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ', '.join(f.value for f in cls)
            raise ConfigError(f'Unknown format "{value}", expected one of: {choices}. {HELP_HINT}')


@dataclass
class CommentPattern:
    """
    Regex patterns for one kind of comment.

    The patterns are matched with search semantics against the whole line, anchor them
    with ^ and $ as needed. multi_end is required when multi_start is set.
    """

    single_line: Pattern
    multi_start: Optional[Pattern] = None
    multi_end: Optional[Pattern] = None

    def __post_init__(self):
        if self.multi_start is not None and self.multi_end is None:
            raise ConfigError(f'Multi line comment start "{self.multi_start.pattern}" has no end pattern. {HELP_HINT}')


@dataclass
class Config:
    """Settings shared by parsing, searching and formatting."""

    outer_comments: CommentPattern
    inner_comments: CommentPattern
    ignore_lines: List[Pattern] = field(default_factory=list)
    include_context: bool = False
    context_include_comments: bool = False
    format: Format = Format.SUMMARY

    def is_ignored(self, line: str) -> bool:
        return any(pattern.search(line) for pattern in self.ignore_lines)


def parse_regex(s: str) -> Pattern:
    try:
        return re.compile(s)
    except re.error as e:
        raise ConfigError(f'Invalid regex "{s}". {HELP_HINT}') from e


def _pattern_from_options(single: Optional[str], start: Optional[str], end: Optional[str]) -> CommentPattern:
    if single is None:
        raise ConfigError(
            f'Comment pattern missing. Either use a --preset or specify the --outer and --inner arguments. {HELP_HINT}'
        )
    return CommentPattern(
        single_line=parse_regex(single),
        multi_start=parse_regex(start) if start is not None else None,
        multi_end=parse_regex(end) if end is not None else None,
    )


def _override_pattern(
    base: CommentPattern, single: Optional[str], start: Optional[str], end: Optional[str]
) -> CommentPattern:
    return CommentPattern(
        single_line=parse_regex(single) if single is not None else base.single_line,
        multi_start=parse_regex(start) if start is not None else base.multi_start,
        multi_end=parse_regex(end) if end is not None else base.multi_end,
    )


def comment_patterns(options: Mapping[str, Any]) -> Tuple[CommentPattern, CommentPattern]:
    """
    Build the (outer, inner) comment patterns.

    With a preset, every pattern given in options replaces the corresponding part of the
    preset and the rest of the preset is kept. Without a preset, the single line outer and
    inner patterns are required.
    """
    # Imported here, presets build CommentPattern objects from this module
    from codump.core.presets import get_preset

    outer = (options.get('outer'), options.get('outer_start'), options.get('outer_end'))
    inner = (options.get('inner'), options.get('inner_start'), options.get('inner_end'))

    preset_name = options.get('preset')
    if preset_name:
        base_outer, base_inner = get_preset(preset_name)
        return _override_pattern(base_outer, *outer), _override_pattern(base_inner, *inner)

    return _pattern_from_options(*outer), _pattern_from_options(*inner)


def config_from_dict(options: Mapping[str, Any]) -> Config:
    """
    Build a Config from a plain mapping (YAML input or argparse namespace vars).

    Recognized keys: preset, outer, outer_start, outer_end, inner, inner_start, inner_end,
    ignore (list), format, context, context_comments. Unknown keys are ignored.

    Raises:
        ConfigError: on an invalid regex, unknown preset/format or missing patterns.
    """
    outer_comments, inner_comments = comment_patterns(options)

    ignore = options.get('ignore') or []
    if isinstance(ignore, str):
        ignore = [ignore]
    ignore_lines = [parse_regex(line) for line in ignore]

    context_comments = bool(options.get('context_comments', False))
    fmt = options.get('format')

    return Config(
        outer_comments=outer_comments,
        inner_comments=inner_comments,
        ignore_lines=ignore_lines,
        include_context=bool(options.get('context', False)) or context_comments,
        context_include_comments=context_comments,
        format=Format.parse(fmt) if fmt is not None else Format.SUMMARY,
    )


def config_from_args(args) -> Config:
    """Build a Config from an argparse Namespace."""
    return config_from_dict(vars(args))
