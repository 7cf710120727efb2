# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

import unittest

from emojikit.common.const import Group
from emojikit.common.const import SkinTone
from emojikit.common.const import UnicodeVersion
from emojikit.common.exceptions import DuplicateShortcodeError
from emojikit.common.exceptions import EmojiDataError

LIGHT = '\U0001F3FB'
MEDIUM = '\U0001F3FD'
DARK = '\U0001F3FF'


class TestConst(unittest.TestCase):

    def test_group(self) -> None:
        self.assertIs(Group.from_str('Food & Drink'), Group.FOOD_AND_DRINK)
        self.assertIs(Group.from_str('food_and_drink'), Group.FOOD_AND_DRINK)
        self.assertEqual(str(Group.FLAGS), 'Flags')
        with self.assertRaises(ValueError):
            Group.from_str('Component')
        with self.assertRaises(ValueError):
            Group.from_str(None)  # type: ignore

    def test_skin_tone_from_modifiers(self) -> None:
        self.assertIsNone(SkinTone.from_modifiers([]))
        self.assertIs(SkinTone.from_modifiers([DARK]), SkinTone.DARK)
        self.assertIs(SkinTone.from_modifiers([LIGHT, LIGHT]), SkinTone.LIGHT)
        self.assertIs(SkinTone.from_modifiers([MEDIUM, LIGHT]),
                      SkinTone.MEDIUM_AND_LIGHT)
        self.assertIs(SkinTone.from_modifiers([LIGHT, MEDIUM]),
                      SkinTone.LIGHT_AND_MEDIUM)
        with self.assertRaises(ValueError):
            SkinTone.from_modifiers([LIGHT, MEDIUM, DARK])

    def test_skin_tone_order(self) -> None:
        self.assertEqual(len(SkinTone), 26)
        self.assertLess(SkinTone.DEFAULT, SkinTone.LIGHT)
        self.assertLess(SkinTone.DARK, SkinTone.LIGHT_AND_MEDIUM_LIGHT)
        self.assertEqual(SkinTone.DARK_AND_MEDIUM_DARK, 25)

    def test_unicode_version(self) -> None:
        self.assertEqual(UnicodeVersion.from_string('13.1'),
                         UnicodeVersion(13, 1))
        self.assertEqual(UnicodeVersion.from_string('5'), UnicodeVersion(5, 0))
        self.assertLess(UnicodeVersion(0, 6), UnicodeVersion(0, 7))
        self.assertLess(UnicodeVersion(2, 0), UnicodeVersion(11, 0))
        self.assertLess(UnicodeVersion(13, 0), UnicodeVersion(13, 1))
        self.assertEqual(str(UnicodeVersion(15, 1)), '15.1')

    def test_exceptions(self) -> None:
        error = DuplicateShortcodeError('Shortcode "rocket" is used twice')
        self.assertIsInstance(error, EmojiDataError)
        self.assertEqual(str(error), 'Shortcode "rocket" is used twice')
        self.assertEqual(error.text, 'Shortcode "rocket" is used twice')


if __name__ == '__main__':
    unittest.main()
