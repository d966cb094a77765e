import logging
import sys
from typing import Optional, TextIO, Tuple


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


class _SplitStreamHandler(logging.StreamHandler):
    """Marker type so repeated configuration only replaces our own handlers."""


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> Tuple[logging.Handler, logging.Handler]:
    """Configure root logging:

    - records below ``stderr_level`` go to stdout
    - records at or above ``stderr_level`` go to stderr

    Build systems usually swallow the generator's stdout, so anything that
    should stop a build (a rejected sysprop file) must land on stderr.

    Handlers installed by a previous call are replaced; handlers added by
    anyone else (e.g. a test harness) are left alone.

    Returns:
        (stdout handler, stderr handler)
    """

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, _SplitStreamHandler):
            root.removeHandler(handler)
    root.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    if stderr_level < logging.DEBUG:
        stderr_level = logging.DEBUG

    stdout_handler = _SplitStreamHandler(stream=stdout if stdout is not None else sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(stderr_level - 1))
    stdout_handler.setFormatter(formatter)

    stderr_handler = _SplitStreamHandler(stream=stderr if stderr is not None else sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    root.addHandler(stdout_handler)
    root.addHandler(stderr_handler)
    return stdout_handler, stderr_handler
