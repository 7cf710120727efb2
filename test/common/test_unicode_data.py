# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

import unittest

from emojikit.common.exceptions import EmojiDataError
from emojikit.common.unicode_data import get_emoji_version
from emojikit.common.unicode_data import parse_code_points
from emojikit.common.unicode_data import parse_emoji_test
from emojikit.common.unicode_data import parse_line
from emojikit.common.unicode_data import parse_version

EMOJI_TEST = '''\
# emoji-test.txt
# Date: 2023-06-05, 21:39:54 GMT
# Version: 15.1

# group: Smileys & Emotion

# subgroup: face-smiling
1F600                                                  ; fully-qualified     # \U0001F600 E1.0 grinning face
1F603                                                  ; fully-qualified     # \U0001F603 E0.6 grinning face with big eyes

# subgroup: face-affection
263A FE0F                                              ; fully-qualified     # \u263A\uFE0F E0.6 smiling face
263A                                                   ; unqualified         # \u263A E0.6 smiling face

# group: People & Body

# subgroup: hand-fingers-open
1F44B                                                  ; fully-qualified     # \U0001F44B E0.6 waving hand
1F44B 1F3FB                                            ; fully-qualified     # \U0001F44B\U0001F3FB E1.0 waving hand: light skin tone
1F44B 1F3FF                                            ; fully-qualified     # \U0001F44B\U0001F3FF E1.0 waving hand: dark skin tone

# subgroup: hands
1F91D                                                  ; fully-qualified     # \U0001F91D E3.0 handshake
1F91D 1F3FB                                            ; fully-qualified     # \U0001F91D\U0001F3FB E14.0 handshake: light skin tone
1FAF1 1F3FB 200D 1FAF2 1F3FF                           ; fully-qualified     # \U0001FAF1\U0001F3FB\u200D\U0001FAF2\U0001F3FF E14.0 handshake: light skin tone, dark skin tone

# subgroup: family
1F9D1 200D 1F91D 200D 1F9D1                            ; fully-qualified     # \U0001F9D1\u200D\U0001F91D\u200D\U0001F9D1 E12.0 people holding hands
1F9D1 1F3FB 200D 1F91D 200D 1F9D1 1F3FB                ; fully-qualified     # \U0001F9D1\U0001F3FB\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FB E12.0 people holding hands: light skin tone

# group: Component

# subgroup: skin-tone
1F3FB                                                  ; component           # \U0001F3FB E1.0 light skin tone

# Status Counts
# fully-qualified : 3773
'''


class TestParseHelpers(unittest.TestCase):

    def test_code_points(self) -> None:
        self.assertEqual(parse_code_points('1F44B 1F3FB'),
                         '\U0001F44B\U0001F3FB')
        with self.assertRaises(EmojiDataError):
            parse_code_points('1F44B XYZ')

    def test_version(self) -> None:
        self.assertEqual(parse_version('E0.6'), '0.6')
        self.assertEqual(parse_version('E14.0'), '14.0')
        self.assertEqual(parse_version('15.1'), '15.1')
        self.assertEqual(parse_version('E5'), '5.0')
        with self.assertRaises(EmojiDataError):
            parse_version('Eleven')

    def test_emoji_version(self) -> None:
        self.assertEqual(get_emoji_version(EMOJI_TEST), '15.1')
        self.assertIsNone(get_emoji_version('# group: Flags\n'))

    def test_line(self) -> None:
        self.assertEqual(
            parse_line('1F600 ; fully-qualified # \U0001F600 E1.0 grinning face'),
            ('\U0001F600', 'fully-qualified', '1.0', 'grinning face'))

        with self.assertRaises(EmojiDataError):
            parse_line('1F600 fully-qualified # \U0001F600 E1.0 grinning')
        with self.assertRaises(EmojiDataError):
            parse_line('1F600 ; fully-qualified')
        with self.assertRaises(EmojiDataError):
            parse_line('1F600 ; qualified # \U0001F600 E1.0 grinning face')
        with self.assertRaises(EmojiDataError):
            parse_line('1F600 ; fully-qualified # \U0001F600 E1.0')


class TestParseEmojiTest(unittest.TestCase):

    def setUp(self) -> None:
        self.records = parse_emoji_test(EMOJI_TEST)

    def test_records(self) -> None:
        self.assertEqual([record.name for record in self.records],
                         ['grinning face',
                          'grinning face with big eyes',
                          'smiling face',
                          'waving hand',
                          'handshake',
                          'people holding hands'])

        grinning = self.records[0]
        self.assertEqual(grinning.emoji, '\U0001F600')
        self.assertEqual(grinning.group, 'Smileys & Emotion')
        self.assertEqual(grinning.subgroup, 'face-smiling')
        self.assertEqual(grinning.version, '1.0')
        self.assertEqual(grinning.shortcodes, ())
        self.assertIsNone(grinning.skin_tones)

    def test_variations(self) -> None:
        smiling = self.records[2]
        self.assertEqual(smiling.emoji, '\u263A\uFE0F')
        self.assertEqual(smiling.variations, ('\u263A',))

    def test_skin_tones(self) -> None:
        wave = self.records[3]
        assert wave.skin_tones is not None
        self.assertEqual([tone.skin_tone for tone in wave.skin_tones],
                         ['LIGHT', 'DARK'])
        self.assertEqual(wave.skin_tones[0].version, '1.0')

        handshake = self.records[4]
        assert handshake.skin_tones is not None
        self.assertEqual([tone.skin_tone for tone in handshake.skin_tones],
                         ['LIGHT', 'LIGHT_AND_DARK'])

    def test_same_tone_twice(self) -> None:
        people = self.records[5]
        assert people.skin_tones is not None
        self.assertEqual([tone.skin_tone for tone in people.skin_tones],
                         ['LIGHT'])

    def test_components_skipped(self) -> None:
        for record in self.records:
            self.assertNotEqual(record.group, 'Component')

    def test_errors(self) -> None:
        orphan = ('# group: Smileys & Emotion\n'
                  '# subgroup: face-affection\n'
                  '263A ; unqualified # \u263A E0.6 smiling face\n')
        with self.assertRaisesRegex(EmojiDataError, 'Line 3'):
            parse_emoji_test(orphan)

        no_subgroup = '1F600 ; fully-qualified # \U0001F600 E1.0 grinning face\n'
        with self.assertRaises(EmojiDataError):
            parse_emoji_test(no_subgroup)

        no_base = ('# group: People & Body\n'
                   '# subgroup: hand-fingers-open\n'
                   '1F44B 1F3FB ; fully-qualified # \U0001F44B\U0001F3FB '
                   'E1.0 waving hand: light skin tone\n')
        with self.assertRaises(EmojiDataError):
            parse_emoji_test(no_base)

        bad_status = ('# group: Smileys & Emotion\n'
                      '# subgroup: face-smiling\n'
                      '1F600 ; qualified # \U0001F600 E1.0 grinning face\n')
        with self.assertRaisesRegex(EmojiDataError, 'Line 3'):
            parse_emoji_test(bad_status)


if __name__ == '__main__':
    unittest.main()
