# See LICENSE for details

import argparse
import datetime
import logging
import time
from typing import Dict, List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.scalarstring import LiteralScalarString


def wrap_literals(obj):
    """Dump every multi line string (source text, candidates) as a YAML literal block."""
    if isinstance(obj, dict):
        return {k: wrap_literals(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [wrap_literals(v) for v in obj]
    if isinstance(obj, str) and '\n' in obj:
        return LiteralScalarString(obj)
    return obj


class Step:
    """
    A YAML driven operation: read a map, run(), write the resulting map.

    A failing run() does not abort: the output gets an `error` key instead, next to the
    input keys, so the next step in a pipeline can see what went wrong. Every output also
    carries the step name and a `tracing` block (times in microseconds).

    Usage:
        step = MyStep()
        step.set_io('in.yaml', 'out.yaml')   # or step.parse_arguments()
        step.setup()
        step.step()
    """

    def __init__(self):
        self.input_file: Optional[str] = None
        self.output_file: Optional[str] = None
        self.input_data: Dict = {}
        self.setup_called = False
        self.logger = logging.getLogger(__name__)

    def set_io(self, inp_file: str, out_file: str):
        self.input_file = inp_file
        self.output_file = out_file

    def parse_arguments(self, argv: Optional[List[str]] = None):
        """Set the files from the command line: `-o out.yaml in.yaml`."""
        parser = argparse.ArgumentParser(description=f'Run the {self.__class__.__name__} step')
        parser.add_argument('-o', '--output', required=True, help='Output YAML file')
        parser.add_argument('input', help='Input YAML file')
        args = parser.parse_args(argv)
        self.set_io(args.input, args.output)

    def read_input(self) -> Dict:
        try:
            with open(self.input_file, 'r') as f:
                data = YAML(typ='safe').load(f)
        except (OSError, YAMLError) as e:
            self.error(f'can not load input yaml {self.input_file}: {e}')

        if data is None:
            return {}
        if not isinstance(data, dict):
            self.error(f'input yaml {self.input_file} must be a map')
        return data

    def write_output(self, data: Dict):
        yaml_obj = YAML()
        yaml_obj.default_flow_style = False
        with open(self.output_file, 'w') as f:
            yaml_obj.dump(wrap_literals(data), f)

    def setup(self):
        """
        Load the input. Subclasses extend this to validate the input and build their tools.

        Raises:
            ValueError: the files are not set or the input can not be used (see error()).
        """
        if self.output_file is None or self.input_file is None:
            raise ValueError('set_io() or parse_arguments() must be called before setup()')
        self.setup_called = True
        self.input_data = self.read_input()

    def run(self, data: Dict) -> Dict:
        raise NotImplementedError('Subclasses should implement this!')

    def error(self, msg: str):
        """
        Write the input plus an `error` key to the output, then raise.

        Raises:
            ValueError: always, with `msg`.
        """
        output_data = dict(self.input_data)
        output_data['error'] = f'{self.__class__.__name__} {datetime.datetime.now().isoformat()} - {msg}'
        self.logger.error('%s: %s', self.__class__.__name__, msg)
        self.write_output(output_data)
        raise ValueError(msg)

    def step(self) -> Dict:
        """Run the step and write the output YAML. Returns the written data."""
        if not self.setup_called:
            raise NotImplementedError('must call setup before step')

        start = time.time()
        try:
            output_data = self.run(self.input_data) or {}
        except Exception as e:
            self.logger.exception('%s failed', self.__class__.__name__)
            output_data = dict(self.input_data)
            output_data['error'] = f'{self.__class__.__name__} {datetime.datetime.now().isoformat()} - {e}'
        elapsed = time.time() - start

        output_data['step'] = self.__class__.__name__
        output_data['tracing'] = {
            'start': start * 1_000_000,
            'elapsed': elapsed * 1_000_000,
            'input': [self.input_file],
            'output': self.output_file,
        }
        self.write_output(output_data)
        return output_data
