from __future__ import annotations

"""Static values shared by the console logger factory."""

LEVEL_LABELS = {
    0: 'DEBUG',
    1: 'INFO',
    2: 'WARN',
    3: 'ERROR',
}

LEVEL_ALIASES = {
    'DEBUG': 0,
    'INFO': 1,
    'WARN': 2,
    'WARNING': 2,
    'ERROR': 3,
}

# loguru markup, without the angle brackets
DEFAULT_LEVEL_COLORS = {
    'debug': 'light-black',
    'info': 'green',
    'warn': 'yellow',
    'error': 'red',
}

RESET_COLOR = '\x1b[0m'

# .NET style "yyyy-MM-dd hh:mm:ss", hh being the 12-hour clock
TIMESTAMP_FORMAT = '%Y-%m-%d %I:%M:%S'

LINE_FORMAT = '{type_name} {level} ({thread_name}): {message}'
TIMESTAMPED_LINE_FORMAT = '{timestamp} ' + LINE_FORMAT

RENDER_FAILURE_TEMPLATE = "Could not render output string: '{0}' with args: {1}"

ENV_PREFIX = 'CONLOG_'
