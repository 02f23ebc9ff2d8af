import logging
from functools import partial
from typing import Callable, Optional


class LoggingMixin:
    """
    Prefixes log messages with an identifier, the class name unless told otherwise.
    Logs to the logger of the defining module by default, so everything falls
    under the "macaddress" hierarchy.
    """
    def __init__(self, logger: Optional[logging.Logger] = None, extra_func: Optional[Callable[[], str]] = None):
        self.logger = logger if logger is not None else logging.getLogger(self.__class__.__module__)
        self.extra_func = extra_func if extra_func is not None else partial(str, self.__class__.__qualname__)

    def _log(self, level: int, msg, *args, **kwargs):
        self.logger.log(level, f"{self.extra_func()} {msg}", *args, **kwargs)

    def debug(self, msg, *args, **kwargs):
        self._log(logging.DEBUG, msg, *args, **kwargs)
