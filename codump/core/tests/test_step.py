# See LICENSE for details

import pytest
from ruamel.yaml import YAML
from ruamel.yaml.scalarstring import LiteralScalarString

from codump.core.step import Step, wrap_literals


class Echo(Step):
    def run(self, data):
        out = data.copy()
        out['echo'] = 'line one\nline two'
        return out


class Broken(Step):
    def run(self, data):
        raise RuntimeError('boom')


@pytest.fixture
def io_files(tmp_path):
    return tmp_path / 'in.yaml', tmp_path / 'out.yaml'


def load(path):
    with open(path, 'r') as f:
        return YAML(typ='safe').load(f)


def test_wrap_literals():
    wrapped = wrap_literals({'one': 'single', 'many': ['a\nb', 3]})
    assert not isinstance(wrapped['one'], LiteralScalarString)
    assert isinstance(wrapped['many'][0], LiteralScalarString)
    assert wrapped['many'][1] == 3


def test_parse_arguments():
    step = Echo()
    step.parse_arguments(['-o', 'out.yaml', 'in.yaml'])
    assert step.input_file == 'in.yaml'
    assert step.output_file == 'out.yaml'


def test_parse_arguments_missing_output():
    with pytest.raises(SystemExit):
        Echo().parse_arguments(['in.yaml'])


def test_setup_requires_files():
    with pytest.raises(ValueError, match='must be called before setup'):
        Echo().setup()


def test_step_requires_setup(io_files):
    inp, out = io_files
    step = Echo()
    step.set_io(str(inp), str(out))
    with pytest.raises(NotImplementedError):
        step.step()


def test_step_round_trip(io_files):
    inp, out = io_files
    inp.write_text('name: test\nnested:\n  value: 1\n')

    step = Echo()
    step.set_io(str(inp), str(out))
    step.setup()
    result = step.step()

    assert result['echo'] == 'line one\nline two'
    assert '|' in out.read_text()
    data = load(out)
    assert data['name'] == 'test'
    assert data['nested'] == {'value': 1}
    assert data['echo'] == 'line one\nline two'
    assert data['step'] == 'Echo'
    assert data['tracing']['input'] == [str(inp)]
    assert data['tracing']['output'] == str(out)
    assert data['tracing']['elapsed'] >= 0


def test_empty_input(io_files):
    inp, out = io_files
    inp.write_text('')
    step = Echo()
    step.set_io(str(inp), str(out))
    step.setup()
    assert step.input_data == {}


def test_run_exception_becomes_error(io_files):
    inp, out = io_files
    inp.write_text('name: test\n')

    step = Broken()
    step.set_io(str(inp), str(out))
    step.setup()
    step.step()

    data = load(out)
    assert 'boom' in data['error']
    assert data['name'] == 'test'
    assert data['step'] == 'Broken'


def test_input_not_a_map(io_files):
    inp, out = io_files
    inp.write_text('- not\n- a map\n')

    step = Echo()
    step.set_io(str(inp), str(out))
    with pytest.raises(ValueError, match='must be a map'):
        step.setup()
    assert 'must be a map' in load(out)['error']


def test_missing_input(io_files):
    inp, out = io_files
    step = Echo()
    step.set_io(str(inp), str(out))
    with pytest.raises(ValueError, match='can not load input yaml'):
        step.setup()
    assert 'can not load input yaml' in load(out)['error']
