#!/usr/bin/env python3
# See LICENSE for details

from typing import Dict

from codump.core.config import ConfigError, config_from_dict
from codump.core.step import Step
from codump.tool.codump import Codump, CodumpError, MultipleComponentsError


class Dump(Step):
    """
    Run codump from a YAML description.

    Input YAML:
      file: path of the source file
      search_path: [list, of, substrings]
      preset / outer / outer_start / outer_end / inner / inner_start / inner_end
      ignore: [regex, ...]
      format: summary | comment | detail
      context: bool
      context_comments: bool

    The output is the input plus `dump` with the rendered text, or `error`.
    When the search path is ambiguous, `candidates` holds the rendered matches.
    """

    def setup(self):
        super().setup()
        if not isinstance(self.input_data.get('file'), str):
            self.error('missing "file" in input yaml')

        try:
            config = config_from_dict(self.input_data)
        except ConfigError as e:
            self.error(str(e))

        self.codump = Codump()
        if not self.codump.setup(config):
            self.error(f'codump setup failed: {self.codump.get_error()}')

    def run(self, data: Dict):
        data_copy = data.copy()

        search_path = data.get('search_path') or []
        if isinstance(search_path, str):
            search_path = [search_path]
        search_path = [str(term) for term in search_path]

        try:
            lines = self.codump.execute(data['file'], search_path)
        except MultipleComponentsError as e:
            data_copy['candidates'] = ['\n'.join(candidate) for candidate in e.candidates]
            data_copy['error'] = str(e)
            return data_copy
        except CodumpError as e:
            data_copy['error'] = str(e)
            return data_copy

        data_copy['dump'] = '\n'.join(lines) + '\n' if lines else ''
        return data_copy


if __name__ == '__main__':  # pragma: no cover
    dump_step = Dump()
    dump_step.parse_arguments()
    dump_step.setup()
    dump_step.step()
