# See LICENSE for details

from abc import ABCMeta, abstractmethod


class Tool(metaclass=ABCMeta):
    """
    Common shape of the codump tools.

    A tool is unusable until setup() succeeds. setup() reports a bad configuration by
    returning False and leaving the reason in error_message, so callers (the CLI, a
    step) can show it without catching anything. Later failures keep error_message
    current as well.
    """

    def __init__(self):
        self.error_message = ''
        self._is_ready = False

    def set_error(self, message: str) -> None:
        """Record why the tool can not be used. The tool stays unusable until the next successful setup()."""
        self.error_message = message
        self._is_ready = False

    def set_ready(self) -> None:
        self.error_message = ''
        self._is_ready = True

    def is_ready(self) -> bool:
        return self._is_ready

    def get_error(self) -> str:
        return self.error_message

    @abstractmethod
    def setup(self, *args, **kwargs) -> bool:
        """Validate the configuration. True when the tool can be used."""
