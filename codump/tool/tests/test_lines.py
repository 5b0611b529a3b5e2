# See LICENSE for details

from codump.tool.lines import find_indentation, indent_string, split_lines, unindent_lines, unindent_lines_with_origin


def test_find_indentation_no_indent():
    assert find_indentation([]) == 0
    assert find_indentation(['abc']) == 0
    assert find_indentation(['abc', 'abc2']) == 0


def test_find_indentation_first_indented_line():
    assert find_indentation([' abc', '  abc', 'abc2']) == 1
    assert find_indentation(['abc', '  abc', 'x']) == 2


def test_find_indentation_tabs_count_raw():
    assert find_indentation(['abc', '\tabc', 'abc2']) == 1
    assert find_indentation(['abc', '\t abc', 'abc2']) == 2


def test_find_indentation_skips_blank_lines():
    assert find_indentation(['', '    ', 'abc', '   x']) == 3


class TestUnindentLines:
    def test_indent_zero_is_identity(self):
        lines = ['abc', '', '  abc2']
        assert unindent_lines(lines, 0) == lines
        assert unindent_lines([], 0) == []

    def test_blank_after_kept_line(self):
        assert unindent_lines([' a', '', '  b', 'c'], 1) == ['a', '', ' b']

    def test_blank_after_dropped_line(self):
        assert unindent_lines(['a', '', '  b'], 1) == [' b']

    def test_mechanical_removal(self):
        # characters are removed without checking they are whitespace
        lines = [' \t\t   abcdef', '    abc', '\tabc2']
        assert unindent_lines(lines, 4) == ['  abcdef', 'abc', '2']

    def test_drop_unindented(self):
        lines = ['abc', ' abc', 'abc', '\tabc2', 'abc']
        assert unindent_lines(lines, 4) == ['', '2']

    def test_origin_indices(self):
        lines = ['fn x() {', '    a', '', '    b', '}', '']
        assert unindent_lines_with_origin(lines, 4) == [(1, 'a'), (2, ''), (3, 'b')]


def test_indent_string():
    assert indent_string('...', 4) == '    ...'
    assert indent_string('abc', 0) == 'abc'
    assert indent_string('', 8) == ''


def test_split_lines():
    assert split_lines('') == []
    assert split_lines('a\nb\n') == ['a', 'b']
    assert split_lines('a\nb') == ['a', 'b']
    assert split_lines('a\n\n') == ['a', '']
    assert split_lines('a\r\nb\r\n') == ['a', 'b']
    # only one trailing carriage return is removed, others stay in the line
    assert split_lines('a\r\r\nb\rc\n') == ['a\r', 'b\rc']
    assert split_lines('x\x0cy\x0bz w\n') == ['x\x0cy\x0bz w']
