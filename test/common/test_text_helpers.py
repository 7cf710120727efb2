# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

import unittest

from emojikit.common.text_helpers import replace_shortcodes

ROCKET = '\U0001F680'

REPLACEMENTS = [
    ('launch nothing', 'launch nothing'),
    ('launch :rocket: something', f'launch {ROCKET} something'),
    ('? :unknown: emoji', '? :unknown: emoji'),
    ('::very:naughty::', '::very:naughty::'),
    (':maybe:rocket:', f':maybe{ROCKET}'),
    (':rocket::rocket:', f'{ROCKET}{ROCKET}'),
    ('', ''),
    (':', ':'),
    ('rocket:', 'rocket:'),
    (':rocket', ':rocket'),
    (':+1: :thumbsup:', '\U0001F44D \U0001F44D'),
]


class TestReplaceShortcodes(unittest.TestCase):

    def test_replace(self) -> None:
        for text, expected in REPLACEMENTS:
            with self.subTest(text=text):
                self.assertEqual(replace_shortcodes(text), expected)


if __name__ == '__main__':
    unittest.main()
