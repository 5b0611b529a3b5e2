#!/usr/bin/env python3
# See LICENSE for details
"""
codump command line.

Dump a documented component of a source file, found by a path of substrings.

Examples:
  # summary of the `new` method inside `Config`, Rust doc comments
  codump --preset rust src/config.rs Config new

  # same, with the enclosing components and their comments
  codump -p rust -C src/config.rs Config new

  # custom comment patterns
  codump --outer '^##' --inner '^#!' script.sh deploy
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from codump.core.config import ConfigError, Format, config_from_args
from codump.core.presets import preset_names
from codump.tool.codump import Codump, CodumpError, MultipleComponentsError

err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='codump',
        description='A straightforward tool for dumping code/comments from source files.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('file', help='The input file to parse')
    parser.add_argument(
        'search_path',
        nargs='+',
        help='The component search path. Each entry is a case-sensitive substring searched in the '
        'code after the doc comments, one entry per nesting level.',
    )
    parser.add_argument('--outer', help='Outer single line comment regex')
    parser.add_argument('--outer-start', dest='outer_start', help='Outer multi line comment start regex')
    parser.add_argument('--outer-end', dest='outer_end', help='Outer multi line comment end regex')
    parser.add_argument('--inner', help='Inner single line comment regex')
    parser.add_argument('--inner-start', dest='inner_start', help='Inner multi line comment start regex')
    parser.add_argument('--inner-end', dest='inner_end', help='Inner multi line comment end regex')
    parser.add_argument(
        '-i', '--ignore', action='append', default=[], help='Pattern for lines that should be ignored (repeatable)'
    )
    parser.add_argument(
        '-f', '--format', choices=[f.value for f in Format], default=Format.SUMMARY.value, help='Format for the output'
    )
    parser.add_argument(
        '-p',
        '--preset',
        choices=preset_names(),
        help='Use a preset configuration. Individual pattern options override the corresponding part of the preset.',
    )
    parser.add_argument(
        '-c', '--context', action='store_true', help='Print context (the parent components of the found component)'
    )
    parser.add_argument(
        '-C',
        '--context-comments',
        dest='context_comments',
        action='store_true',
        help='Print the comments of the parents along with the context (implies --context)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        config = config_from_args(args)
    except ConfigError as e:
        err_console.print(f'[red]error:[/red] {escape(str(e))}', highlight=False, soft_wrap=True)
        return 1

    tool = Codump()
    if not tool.setup(config):
        err_console.print(f'[red]error:[/red] {escape(tool.get_error())}', highlight=False, soft_wrap=True)
        return 1

    try:
        output = tool.execute(args.file, args.search_path)
    except MultipleComponentsError as e:
        for candidate in e.candidates:
            for line in candidate:
                err_console.print(line, markup=False, highlight=False, soft_wrap=True)
        err_console.print(f'[red]error:[/red] {escape(str(e))}', highlight=False, soft_wrap=True)
        return 1
    except CodumpError as e:
        err_console.print(f'[red]error:[/red] {escape(str(e))}', highlight=False, soft_wrap=True)
        return 1

    # source text goes out verbatim, no rich markup
    for line in output:
        print(line)
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
