# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import logging
import os
import sys

DEBUG_ENV = 'EMOJIKIT_DEBUG'


def parseLogLevel(arg: str) -> int:
    '''
    Either numeric value or level name from logging module
    '''
    if arg.isdigit():
        return int(arg)
    if arg.isupper() and hasattr(logging, arg):
        return getattr(logging, arg)
    print('%s is not a valid loglevel' % repr(arg), file=sys.stderr)
    return 0


def parseLogTarget(arg: str) -> str:
    '''
    [emojikit.]c.x.y  ->  emojikit.c.x.y
    .other_logger     ->  other_logger
    <None>            ->  emojikit
    '''
    arg = arg.lower()
    if not arg:
        return 'emojikit'
    if arg.startswith('.'):
        return arg[1:]
    if arg.startswith('emojikit'):
        return arg
    return 'emojikit.' + arg


def parseAndSetLogLevels(arg: str) -> None:
    '''
    [=]LOGLEVEL        ->  emojikit=LOGLEVEL
    emojikit=LOGLEVEL  ->  emojikit=LOGLEVEL
    .other=10          ->  other=10
    .=10               ->  <nothing>
    c.x.y=c.z=20       ->  emojikit.c.x.y=20
                           emojikit.c.z=20
    emojikit=10,c.x=20 ->  emojikit=10
                           emojikit.c.x=20
    '''
    for directive in arg.split(','):
        directive = directive.strip()
        if not directive:
            continue
        if '=' not in directive:
            directive = '=' + directive
        targets, level = directive.rsplit('=', 1)
        level = parseLogLevel(level.strip())
        for target in targets.split('='):
            target = parseLogTarget(target.strip())
            if target:
                logging.getLogger(target).setLevel(level)


class Colors:
    NONE = chr(27) + '[0m'
    RED = chr(27) + '[31m'
    GREEN = chr(27) + '[32m'
    BROWN = chr(27) + '[33m'
    BLUE = chr(27) + '[34m'
    CYAN = chr(27) + '[36m'
    BRIGHT_RED = chr(27) + '[31;1m'


def colorize(text: str, color: str) -> str:
    return color + text + Colors.NONE


class FancyFormatter(logging.Formatter):
    '''
    An eye-candy formatter with Colors
    '''
    colors_mapping = {
        'DEBUG': Colors.BLUE,
        'INFO': Colors.GREEN,
        'WARNING': Colors.BROWN,
        'ERROR': Colors.RED,
        'CRITICAL': Colors.BRIGHT_RED,
    }

    def __init__(self,
                 fmt: str | None = None,
                 datefmt: str | None = None,
                 use_color: bool = False) -> None:
        logging.Formatter.__init__(self, fmt, datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        record.levelname = '(%s)' % level[0]

        if self.use_color:
            c = FancyFormatter.colors_mapping.get(level, '')
            record.levelname = colorize(record.levelname, c)
            record.name = '%-25s' % colorize(record.name, Colors.CYAN)
        else:
            record.name = '%-25s|' % record.name

        return logging.Formatter.format(self, record)


def init() -> None:
    '''
    Initialize the logging system
    '''
    use_color = False
    if os.name != 'nt':
        use_color = sys.stderr.isatty()

    _stream_handler.setFormatter(
        FancyFormatter(
            '%(asctime)s %(levelname)s %(name)-35s %(message)s',
            '%x %H:%M:%S',
            use_color
        )
    )

    root_log = logging.getLogger('emojikit')
    root_log.setLevel(logging.WARNING)
    if _stream_handler not in root_log.handlers:
        root_log.addHandler(_stream_handler)
    root_log.propagate = False

    if os.environ.get(DEBUG_ENV, False):
        set_verbose()


def set_loglevels(loglevels_string: str) -> None:
    parseAndSetLogLevels(loglevels_string)


def set_verbose() -> None:
    parseAndSetLogLevels('emojikit=DEBUG')


def set_quiet() -> None:
    parseAndSetLogLevels('emojikit=CRITICAL')


def get_stream_handler() -> logging.StreamHandler:
    return _stream_handler


_stream_handler = logging.StreamHandler()
