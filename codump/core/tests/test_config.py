# See LICENSE for details

import argparse

import pytest

from codump.core.config import CommentPattern, ConfigError, Format, config_from_args, config_from_dict, parse_regex
from codump.core.presets import get_preset, preset_names


def test_preset_names():
    assert preset_names() == ['rust', 'rust-java', 'python']


@pytest.mark.parametrize('name', ['rust', 'RUST', 'rust_java', 'Rust-Java', 'python'])
def test_get_preset_normalizes_name(name):
    outer, inner = get_preset(name)
    assert isinstance(outer, CommentPattern)
    assert isinstance(inner, CommentPattern)


def test_get_preset_unknown():
    with pytest.raises(ConfigError, match='Unknown preset "cobol"'):
        get_preset('cobol')


def test_rust_java_preset_patterns():
    outer, inner = get_preset('rust-java')
    assert outer.single_line.search('/// doc')
    assert outer.multi_start.search('/** doc')
    assert outer.multi_end.search(' */  ')
    assert inner.single_line.search('//! doc')
    assert not inner.single_line.search('/// doc')


def test_python_preset_patterns():
    outer, inner = get_preset('python')
    assert outer.single_line.search('### doc')
    assert inner.multi_start.search('"""Docstring')
    assert inner.multi_end.search('end"""')
    assert not inner.multi_end.search('""" more')


def test_parse_regex_error():
    with pytest.raises(ConfigError) as excinfo:
        parse_regex('(')
    assert str(excinfo.value) == 'Invalid regex "(". See --help for more.'


def test_multi_start_requires_end():
    with pytest.raises(ConfigError, match='has no end pattern'):
        config_from_dict({'outer': '^///', 'outer_start': r'^/\*', 'inner': '^//!'})


def test_missing_patterns():
    with pytest.raises(ConfigError) as excinfo:
        config_from_dict({'outer': '^///'})
    assert str(excinfo.value) == (
        'Comment pattern missing. Either use a --preset or specify the --outer and --inner arguments. '
        'See --help for more.'
    )


def test_defaults():
    config = config_from_dict({'preset': 'rust'})
    assert config.format == Format.SUMMARY
    assert not config.include_context
    assert not config.context_include_comments
    assert config.ignore_lines == []


def test_options_override_preset():
    config = config_from_dict({'preset': 'rust', 'inner': '^//[!/]'})
    assert config.inner_comments.single_line.pattern == '^//[!/]'
    # the rest of the preset is kept
    assert config.outer_comments.single_line.pattern == '^///'


def test_context_comments_implies_context():
    config = config_from_dict({'preset': 'rust', 'context_comments': True})
    assert config.include_context
    assert config.context_include_comments


def test_ignore_lines():
    config = config_from_dict({'preset': 'rust', 'ignore': [r'^#\[', r'^\s*//\s*TODO']})
    assert config.is_ignored('#[derive(Debug)]')
    assert config.is_ignored('    // TODO: later')
    assert not config.is_ignored('fn a() {}')

    single = config_from_dict({'preset': 'rust', 'ignore': r'^#\['})
    assert len(single.ignore_lines) == 1


@pytest.mark.parametrize(
    'value, expected',
    [
        ('summary', Format.SUMMARY),
        ('Comment', Format.COMMENT),
        ('DETAIL', Format.DETAIL),
        (Format.DETAIL, Format.DETAIL),
    ],
)
def test_format_parse(value, expected):
    assert Format.parse(value) is expected


def test_format_parse_unknown():
    with pytest.raises(ConfigError, match='Unknown format "verbose"'):
        Format.parse('verbose')


def test_config_from_args():
    args = argparse.Namespace(
        preset='python',
        outer=None,
        outer_start=None,
        outer_end=None,
        inner=None,
        inner_start=None,
        inner_end=None,
        ignore=[],
        format='detail',
        context=True,
        context_comments=False,
    )
    config = config_from_args(args)
    assert config.format == Format.DETAIL
    assert config.include_context
    assert config.outer_comments.single_line.pattern == '^###'
