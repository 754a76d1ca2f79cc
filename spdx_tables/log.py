"""Nicer log formatting with colours.

Only the level name is coloured, and only when stderr is a terminal.
"""
import logging
import os
import sys

COLOURS = {
    logging.DEBUG: '\033[34m',     # Blue
    logging.INFO: '\033[32m',      # Green
    logging.WARNING: '\033[33m',   # Yellow
    logging.ERROR: '\033[31m',     # Red
    logging.CRITICAL: '\033[31m',
}
NORMAL = '\033[0m'


def _stderr_supports_colour():
    return (hasattr(sys.stderr, 'isatty') and sys.stderr.isatty()
            and os.name != 'nt' and not os.environ.get('NO_COLOR'))


class LogFormatter(logging.Formatter):
    def __init__(self, colour=True):
        super().__init__()
        self._colour = colour and _stderr_supports_colour()

    def format(self, record):
        message = record.getMessage()
        level = record.levelname[0]
        if self._colour:
            level = COLOURS.get(record.levelno, NORMAL) + level + NORMAL
        formatted = '[{} {}] {}'.format(level, record.name, message)
        if record.exc_info:
            formatted += '\n' + self.formatException(record.exc_info)
        return formatted


_installed_handler = None

def enable_colourful_output(level=logging.INFO):
    global _installed_handler
    root = logging.getLogger()
    if _installed_handler is not None:
        root.removeHandler(_installed_handler)
    handler = logging.StreamHandler()
    handler.setFormatter(LogFormatter())
    root.addHandler(handler)
    root.setLevel(level)
    _installed_handler = handler
