# See LICENSE for details

import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

from codump.core.config import Config, ConfigError, config_from_dict
from codump.tool.lines import split_lines
from codump.tool.locate import FindComponentResult, Found, Multiple, NotFound, find_component
from codump.tool.outline import Component, parse_lines
from codump.tool.render import format_component, format_with_context
from codump.tool.tool import Tool


class CodumpError(RuntimeError):
    """Error raised by the Codump tool."""


class ComponentNotFoundError(CodumpError):
    def __init__(self, term: str):
        super().__init__(f'No component found matching "{term}"')
        self.term = term


class MultipleComponentsError(CodumpError):
    """
    The search path is ambiguous.

    candidates holds the formatted lines of every matched component so the caller can
    show them for disambiguation.
    """

    def __init__(self, term: str, candidates: List[List[str]]):
        super().__init__(
            f'Multiple components found matching "{term}". The matched components are shown above.'
        )
        self.term = term
        self.candidates = candidates


class Codump(Tool):
    """
    Dump documented components of a source file.

    The file is split into a tree of components using only the indentation and the
    configured comment patterns. A search path of substrings selects one component,
    which is then formatted, optionally bracketed by its ancestors.

    Usage:
        tool = Codump()
        if not tool.setup(preset='rust'):
            print(tool.get_error())
        lines = tool.execute('src/lib.rs', ['Config', 'new'])
    """

    def __init__(self):
        super().__init__()
        self.config: Optional[Config] = None
        self.logger = logging.getLogger(__name__)

    def setup(self, config: Union[Config, Mapping[str, Any], None] = None, **options) -> bool:
        """
        Set up the tool with a Config, or with the options accepted by config_from_dict.

        Returns:
            True if the configuration is valid, False otherwise (see get_error()).
        """
        try:
            if isinstance(config, Config):
                self.config = config
            else:
                merged = dict(config or {})
                merged.update(options)
                self.config = config_from_dict(merged)
        except ConfigError as e:
            self.set_error(str(e))
            return False

        self.set_ready()
        return True

    def _check_ready(self) -> Config:
        if not self._is_ready or self.config is None:
            raise CodumpError(f'Codump is not set up: {self.error_message or "call setup() first"}')
        return self.config

    def read_lines(self, file_path: str) -> List[str]:
        try:
            with open(file_path, 'r', encoding='utf-8', newline='') as f:
                return split_lines(f.read())
        except (OSError, UnicodeDecodeError) as e:
            self.error_message = f'io error while processing file {file_path}: {e}'
            raise CodumpError(self.error_message) from e

    def parse_lines(self, lines: Sequence[str]) -> Component:
        root = parse_lines(list(lines), self._check_ready())
        self.logger.debug('parsed %d lines into %d top level components', len(lines), len(root.children))
        return root

    def parse_file(self, file_path: str) -> Component:
        """Read a file and parse it into the root component."""
        self._check_ready()
        return self.parse_lines(self.read_lines(file_path))

    def search(self, root: Component, search_path: Sequence[str]) -> FindComponentResult:
        config = self._check_ready()
        result = find_component(root, list(search_path), config.context_include_comments)
        self.logger.debug('search %s: %s', list(search_path), type(result).__name__)
        return result

    def search_file(self, file_path: str, search_path: Sequence[str]) -> FindComponentResult:
        """Parse a file and search a component in it."""
        return self.search(self.parse_file(file_path), search_path)

    def render(self, result: FindComponentResult) -> List[str]:
        """
        Turn a search result into output lines.

        Raises:
            ComponentNotFoundError: nothing matched.
            MultipleComponentsError: the search path is ambiguous.
        """
        config = self._check_ready()
        if isinstance(result, NotFound):
            self.error_message = f'No component found matching "{result.term}"'
            raise ComponentNotFoundError(result.term)
        if isinstance(result, Multiple):
            candidates = [format_component(c, config.format) for c in result.candidates]
            error = MultipleComponentsError(result.term, candidates)
            self.error_message = str(error)
            raise error
        if not isinstance(result, Found):
            raise CodumpError(f'Unexpected search result {result!r}')

        if config.include_context:
            return format_with_context(result.component, result.contexts, config.format)
        return format_component(result.component, config.format)

    def execute(self, file_path: str, search_path: Sequence[str]) -> List[str]:
        """
        Run the tool on a file.

        Returns:
            list: the output lines.

        Raises:
            CodumpError: when the file can not be read or the search does not find exactly one component.
        """
        return self.render(self.search_file(file_path, search_path))
