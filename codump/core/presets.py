# See LICENSE for details

import re
from typing import Dict, List, Tuple

from codump.core.config import CommentPattern, ConfigError, HELP_HINT

# Raw pattern sources per preset, as (single_line, multi_start, multi_end) for outer and inner
PRESETS: Dict[str, Dict[str, Tuple]] = {
    # Outer: ///   Inner: //!
    'rust': {
        'outer': (r'^///', None, None),
        'inner': (r'^//!', None, None),
    },
    # Rust style single line, Java/JS/TS style multi line
    'rust-java': {
        'outer': (r'^///', r'^/\*\*', r'\*/\s*$'),
        'inner': (r'^//!', r'^/\*\*', r'\*/\s*$'),
    },
    # Outer: ###   Inner: ### and """ ... """
    'python': {
        'outer': (r'^###', r'^"""', r'"""\s*$'),
        'inner': (r'^###', r'^"""', r'"""\s*$'),
    },
}


def preset_names() -> List[str]:
    return list(PRESETS)


def _compile(sources: Tuple) -> CommentPattern:
    single, start, end = sources
    return CommentPattern(
        single_line=re.compile(single),
        multi_start=re.compile(start) if start is not None else None,
        multi_end=re.compile(end) if end is not None else None,
    )


def get_preset(name: str) -> Tuple[CommentPattern, CommentPattern]:
    """
    Get the comment patterns of a preset.

    Returns:
        (outer, inner) comment patterns.

    Raises:
        ConfigError: if the preset does not exist.
    """
    key = name.lower().replace('_', '-')
    if key not in PRESETS:
        raise ConfigError(f'Unknown preset "{name}", expected one of: {", ".join(PRESETS)}. {HELP_HINT}')
    entry = PRESETS[key]
    return _compile(entry['outer']), _compile(entry['inner'])
