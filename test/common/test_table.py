# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

import dataclasses
import unittest

from emojikit.common.const import Group
from emojikit.common.const import SkinTone
from emojikit.common.const import UnicodeVersion
from emojikit.common.exceptions import DuplicateEmojiError
from emojikit.common.exceptions import DuplicateShortcodeError
from emojikit.common.exceptions import EmojiDataError
from emojikit.common.table import EmojiTable

WAVE = '\U0001F44B'
LIGHT = '\U0001F3FB'
DARK = '\U0001F3FF'

RECORDS = [
    ('\U0001F600', 'grinning face', 'Smileys & Emotion', 'face-smiling',
     '1.0', ('grinning',), (), None),
    ('\u263A\uFE0F', 'smiling face', 'Smileys & Emotion', 'face-affection',
     '0.6', ('relaxed',), ('\u263A',), None),
    (WAVE, 'waving hand', 'People & Body', 'hand-fingers-open',
     '0.6', ('wave', 'waving_hand'), (), (
         # Out of order on purpose
         (WAVE + DARK, 'waving hand: dark skin tone', '1.0', 'DARK',
          ('wave_tone5',), ()),
         (WAVE + LIGHT, 'waving hand: light skin tone', '1.0', 'LIGHT',
          ('wave_tone1',), ()),
     )),
    ('\U0001F680', 'rocket', 'Travel & Places', 'transport-air',
     '0.6', ('rocket',), (), None),
]


class TestEmojiTable(unittest.TestCase):

    def setUp(self) -> None:
        self.table = EmojiTable(RECORDS)

    def test_order(self) -> None:
        self.assertEqual(len(self.table), 6)
        self.assertEqual([emoji.id for emoji in self.table.emojis],
                         list(range(6)))
        self.assertEqual(
            [emoji.as_str() for emoji in self.table.representatives],
            ['\U0001F600', '\u263A\uFE0F', WAVE, '\U0001F680'])

    def test_fields(self) -> None:
        emoji = self.table.get_by_unicode('\U0001F600')
        assert emoji is not None
        self.assertEqual(emoji.name, 'grinning face')
        self.assertEqual(emoji.group, Group.SMILEYS_AND_EMOTION)
        self.assertEqual(emoji.subgroup, 'face-smiling')
        self.assertEqual(emoji.unicode_version, UnicodeVersion(1, 0))
        self.assertEqual(emoji.shortcode, 'grinning')
        self.assertIsNone(emoji.skin_tone)
        self.assertTrue(emoji.is_representative)
        self.assertEqual(str(emoji), '\U0001F600')

    def test_variations(self) -> None:
        emoji = self.table.get_by_unicode('\u263A')
        self.assertIs(emoji, self.table.get_by_unicode('\u263A\uFE0F'))
        assert emoji is not None
        self.assertEqual(emoji.as_str(), '\u263A\uFE0F')

    def test_shortcodes(self) -> None:
        wave = self.table.get_by_shortcode('wave')
        self.assertIs(wave, self.table.get_by_shortcode('waving_hand'))
        assert wave is not None
        self.assertEqual(wave.shortcode, 'wave')
        self.assertIsNone(self.table.get_by_shortcode(':wave:'))
        self.assertIsNone(self.table.get_by_shortcode('nonexistent_xyz'))

    def test_family(self) -> None:
        wave = self.table.get_by_unicode(WAVE)
        assert wave is not None
        self.assertEqual(wave.skin_tone, SkinTone.DEFAULT)

        family = self.table.get_family(wave)
        assert family is not None
        self.assertEqual([member.skin_tone for member in family],
                         [SkinTone.DEFAULT, SkinTone.LIGHT, SkinTone.DARK])
        self.assertIs(family[0], wave)

        dark = self.table.get_by_shortcode('wave_tone5')
        assert dark is not None
        self.assertFalse(dark.is_representative)
        self.assertEqual(self.table.get_family(dark), family)

        rocket = self.table.get_by_unicode('\U0001F680')
        assert rocket is not None
        self.assertIsNone(self.table.get_family(rocket))

    def test_groups(self) -> None:
        self.assertEqual(
            [e.name for e in self.table.get_group(Group.SMILEYS_AND_EMOTION)],
            ['grinning face', 'smiling face'])
        self.assertEqual(
            [e.name for e in self.table.get_group(Group.PEOPLE_AND_BODY)],
            ['waving hand'])
        self.assertEqual(self.table.get_group(Group.FLAGS), ())

    def test_duplicate_emoji(self) -> None:
        records = RECORDS + [
            ('\u263A', 'smiling face', 'Smileys & Emotion', 'face-affection',
             '0.6', (), (), None)]
        with self.assertRaises(DuplicateEmojiError):
            EmojiTable(records)

    def test_duplicate_shortcode(self) -> None:
        records = RECORDS + [
            ('\U0001F6F8', 'flying saucer', 'Travel & Places',
             'transport-air', '5.0', ('rocket',), (), None)]
        with self.assertRaises(DuplicateShortcodeError):
            EmojiTable(records)

    def test_invalid_records(self) -> None:
        unknown_group = [
            ('\U0001F600', 'grinning face', 'Component', 'face-smiling',
             '1.0', (), (), None)]
        with self.assertRaises(EmojiDataError):
            EmojiTable(unknown_group)

        duplicate_tone = [
            (WAVE, 'waving hand', 'People & Body', 'hand-fingers-open',
             '0.6', (), (), (
                 (WAVE + LIGHT, 'light', '1.0', 'LIGHT', (), ()),
                 (WAVE + DARK, 'dark', '1.0', 'LIGHT', (), ()),
             ))]
        with self.assertRaises(EmojiDataError):
            EmojiTable(duplicate_tone)

        unknown_tone = [
            (WAVE, 'waving hand', 'People & Body', 'hand-fingers-open',
             '0.6', (), (), (
                 (WAVE + LIGHT, 'light', '1.0', 'PURPLE', (), ()),
             ))]
        with self.assertRaises(EmojiDataError):
            EmojiTable(unknown_tone)

    def test_emoji_equality(self) -> None:
        other = EmojiTable(RECORDS)
        self.assertEqual(self.table.get_by_unicode(WAVE),
                         other.get_by_unicode(WAVE))
        self.assertLess(self.table.emojis[0], self.table.emojis[1])
        self.assertEqual(len(set(self.table.emojis) | set(other.emojis)), 6)

        smiling = self.table.emojis[1]
        renamed = dataclasses.replace(smiling, name='smile', shortcodes=())
        self.assertEqual(smiling, renamed)
        self.assertEqual(hash(smiling), hash(renamed))
        moved = dataclasses.replace(smiling, id=smiling.id + 100)
        self.assertNotEqual(smiling, moved)
        self.assertLess(smiling, moved)


if __name__ == '__main__':
    unittest.main()
