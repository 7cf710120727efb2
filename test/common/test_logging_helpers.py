# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

import logging
import os
import unittest
from unittest.mock import patch

from emojikit.common import logging_helpers
from emojikit.common.logging_helpers import Colors
from emojikit.common.logging_helpers import FancyFormatter
from emojikit.common.logging_helpers import parseAndSetLogLevels
from emojikit.common.logging_helpers import parseLogLevel
from emojikit.common.logging_helpers import parseLogTarget


class TestLoggingHelpers(unittest.TestCase):

    def tearDown(self) -> None:
        for name in ('emojikit', 'emojikit.c.table', 'emojikit.c.emojis',
                     'other'):
            logging.getLogger(name).setLevel(logging.NOTSET)

    def test_log_level(self) -> None:
        self.assertEqual(parseLogLevel('10'), 10)
        self.assertEqual(parseLogLevel('DEBUG'), logging.DEBUG)
        with patch('sys.stderr'):
            self.assertEqual(parseLogLevel('debug'), 0)

    def test_log_target(self) -> None:
        self.assertEqual(parseLogTarget(''), 'emojikit')
        self.assertEqual(parseLogTarget('c.table'), 'emojikit.c.table')
        self.assertEqual(parseLogTarget('emojikit.c.table'),
                         'emojikit.c.table')
        self.assertEqual(parseLogTarget('.other'), 'other')

    def test_set_levels(self) -> None:
        parseAndSetLogLevels('INFO,c.table=c.emojis=DEBUG,.other=30')
        self.assertEqual(logging.getLogger('emojikit').level, logging.INFO)
        self.assertEqual(logging.getLogger('emojikit.c.table').level,
                         logging.DEBUG)
        self.assertEqual(logging.getLogger('emojikit.c.emojis').level,
                         logging.DEBUG)
        self.assertEqual(logging.getLogger('other').level, logging.WARNING)

    def test_verbose_and_quiet(self) -> None:
        logging_helpers.set_verbose()
        self.assertEqual(logging.getLogger('emojikit').level, logging.DEBUG)
        logging_helpers.set_quiet()
        self.assertEqual(logging.getLogger('emojikit').level,
                         logging.CRITICAL)

    def test_init(self) -> None:
        with patch.dict(os.environ, {logging_helpers.DEBUG_ENV: '1'}):
            logging_helpers.init()

        root_log = logging.getLogger('emojikit')
        self.assertEqual(root_log.level, logging.DEBUG)
        self.assertIn(logging_helpers.get_stream_handler(), root_log.handlers)
        self.assertFalse(root_log.propagate)

        logging_helpers.init()
        self.assertEqual(root_log.level, logging.WARNING)
        self.assertEqual(
            root_log.handlers.count(logging_helpers.get_stream_handler()), 1)

    def test_formatter(self) -> None:
        record = logging.LogRecord('emojikit.c.table', logging.WARNING,
                                   __file__, 1, 'Built table', None, None)
        plain = FancyFormatter('%(levelname)s %(name)s %(message)s')
        self.assertEqual(plain.format(record),
                         '(W) emojikit.c.table         | Built table')

        record = logging.LogRecord('emojikit.c.table', logging.ERROR,
                                   __file__, 1, 'Failed', None, None)
        colored = FancyFormatter('%(levelname)s %(message)s', use_color=True)
        self.assertEqual(colored.format(record),
                         f'{Colors.RED}(E){Colors.NONE} Failed')


if __name__ == '__main__':
    unittest.main()
