# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

import unittest

from emojikit.common.exceptions import DuplicateShortcodeError
from emojikit.common.shortcodes import assign_shortcodes
from emojikit.common.shortcodes import parse_emoji_pretty
from emojikit.common.shortcodes import parse_shortcode_map
from emojikit.common.shortcodes import unified_to_unicode
from emojikit.common.structs import RawEmoji
from emojikit.common.structs import RawSkinTone

WAVE = '\U0001F44B'
LIGHT = '\U0001F3FB'

RECORDS = [
    RawEmoji('\u263A\uFE0F', 'smiling face', 'Smileys & Emotion',
             'face-affection', '0.6', variations=('\u263A',)),
    RawEmoji(WAVE, 'waving hand', 'People & Body', 'hand-fingers-open', '0.6',
             skin_tones=(RawSkinTone(WAVE + LIGHT,
                                     'waving hand: light skin tone',
                                     '1.0',
                                     'LIGHT'),)),
    RawEmoji('\U0001F680', 'rocket', 'Travel & Places', 'transport-air',
             '0.6'),
]


class TestShortcodeFeeds(unittest.TestCase):

    def test_unified(self) -> None:
        self.assertEqual(unified_to_unicode('1F44B-1F3FB'), WAVE + LIGHT)
        self.assertEqual(unified_to_unicode('263A-FE0F'), '\u263A\uFE0F')

    def test_emoji_pretty(self) -> None:
        items = [
            {'unified': '1F44D', 'short_name': '+1',
             'short_names': ['+1', 'thumbsup']},
            {'unified': '1F680', 'short_name': 'rocket'},
            {'unified': '1F44B', 'short_names': [':wave:', 'wave']},
        ]
        self.assertEqual(parse_emoji_pretty(items), {
            '\U0001F44D': ['+1', 'thumbsup'],
            '\U0001F680': ['rocket'],
            WAVE: ['wave'],
        })

    def test_shortcode_map(self) -> None:
        data = {
            ':rocket:': '\U0001F680',
            'wave': WAVE,
            'waving_hand': WAVE,
            '': WAVE,
        }
        self.assertEqual(parse_shortcode_map(data), {
            '\U0001F680': ['rocket'],
            WAVE: ['wave', 'waving_hand'],
        })


class TestAssignShortcodes(unittest.TestCase):

    def test_assign(self) -> None:
        mapping = {
            '\u263A': ['relaxed'],
            WAVE: ['wave'],
            WAVE + LIGHT: ['wave_tone1'],
            '\U0001F680': ['rocket'],
        }
        with self.assertLogs('emojikit.c.shortcodes', level='INFO'):
            records = assign_shortcodes(RECORDS, mapping)

        smiling, wave, rocket = records
        self.assertEqual(smiling.shortcodes, ('relaxed',))
        self.assertEqual(wave.shortcodes, ('wave',))
        assert wave.skin_tones is not None
        self.assertEqual(wave.skin_tones[0].shortcodes, ('wave_tone1',))
        self.assertEqual(rocket.shortcodes, ('rocket',))

        # Input records are left untouched
        self.assertEqual(RECORDS[2].shortcodes, ())

    def test_unknown_emoji(self) -> None:
        mapping = {'\U0001F680': ['rocket'], 'X': ['letter_x']}
        with self.assertLogs('emojikit.c.shortcodes', level='WARNING') as cm:
            records = assign_shortcodes(RECORDS, mapping)
        self.assertIn('letter_x', cm.output[0])
        self.assertEqual(records[2].shortcodes, ('rocket',))

    def test_duplicate(self) -> None:
        mapping = {'\U0001F680': ['rocket'], WAVE: ['rocket']}
        with self.assertRaises(DuplicateShortcodeError):
            assign_shortcodes(RECORDS, mapping)

    def test_variation_and_emoji(self) -> None:
        mapping = {'\u263A\uFE0F': ['smiling'], '\u263A': ['relaxed', 'smiling']}
        records = assign_shortcodes(RECORDS, mapping)
        self.assertEqual(records[0].shortcodes, ('smiling', 'relaxed'))

    def test_fallback(self) -> None:
        mapping = {'\u263A': ['relaxed'], WAVE: ['wave']}
        fallback = {
            '\u263A\uFE0F': ['smiling_face'],
            WAVE: ['waving_hand'],
            WAVE + LIGHT: ['waving_hand_light_skin_tone'],
            '\U0001F680': ['rocket', 'relaxed'],
            'X': ['letter_x'],
        }
        records = assign_shortcodes(RECORDS, mapping, [fallback])

        smiling, wave, rocket = records
        # Emojis with shortcodes are not extended
        self.assertEqual(smiling.shortcodes, ('relaxed',))
        self.assertEqual(wave.shortcodes, ('wave',))
        assert wave.skin_tones is not None
        self.assertEqual(wave.skin_tones[0].shortcodes,
                         ('waving_hand_light_skin_tone',))
        # Taken shortcodes are skipped instead of raising
        self.assertEqual(rocket.shortcodes, ('rocket',))

    def test_fallback_order(self) -> None:
        first = {'\U0001F680': ['rocket']}
        second = {'\U0001F680': ['space_rocket'], WAVE: ['wave']}
        records = assign_shortcodes(RECORDS, {}, [first, second])
        self.assertEqual(records[1].shortcodes, ('wave',))
        self.assertEqual(records[2].shortcodes, ('rocket',))


if __name__ == '__main__':
    unittest.main()
