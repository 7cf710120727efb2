# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

from typing import Any

import io
import unittest

from emojikit.common.codegen import escape_emoji
from emojikit.common.codegen import format_record
from emojikit.common.codegen import quote
from emojikit.common.codegen import write_emoji_data
from emojikit.common.const import SkinTone
from emojikit.common.structs import RawEmoji
from emojikit.common.structs import RawSkinTone
from emojikit.common.table import EmojiTable

WAVE = '\U0001F44B'
LIGHT = '\U0001F3FB'

RECORDS = [
    RawEmoji('\u263A\uFE0F', 'smiling face', 'Smileys & Emotion',
             'face-affection', '0.6', ('relaxed',), ('\u263A',)),
    RawEmoji(WAVE, 'waving hand', 'People & Body', 'hand-fingers-open', '0.6',
             ('wave',),
             skin_tones=(RawSkinTone(WAVE + LIGHT,
                                     'waving hand: light skin tone',
                                     '1.0',
                                     'LIGHT',
                                     ('wave_tone1',)),)),
    RawEmoji('\U0001F1E8\U0001F1EE', "flag: Côte d'Ivoire", 'Flags',
             'country-flag', '2.0', ('flag_ci', 'ci')),
]


class TestCodegen(unittest.TestCase):

    def test_escape(self) -> None:
        self.assertEqual(escape_emoji('\u263A\uFE0F'), "'\\u263A\\uFE0F'")
        self.assertEqual(escape_emoji(WAVE + LIGHT),
                         "'\\U0001F44B\\U0001F3FB'")
        self.assertEqual(quote("d'Ivoire"), "'d\\'Ivoire'")

    def test_format_record(self) -> None:
        self.assertEqual(
            format_record(RECORDS[0]),
            "    ('\\u263A\\uFE0F', 'smiling face', 'Smileys & Emotion', "
            "'face-affection', '0.6', ('relaxed',), ('\\u263A',), None),\n")

        lines = format_record(RECORDS[1]).splitlines()
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[0].endswith("('wave',), (), ("))
        self.assertTrue(lines[1].startswith("        ('\\U0001F44B"))
        self.assertEqual(lines[2], '    )),')

    def test_generated_module(self) -> None:
        file = io.StringIO()
        write_emoji_data(file,
                         RECORDS,
                         '15.1',
                         'emoji-test.txt',
                         'shortcodes.json')
        source = file.getvalue()
        self.assertTrue(source.startswith('# This file is part of emojikit.'))
        self.assertIn('# Emoji data: emoji-test.txt', source)

        namespace: dict[str, Any] = {}
        exec(compile(source, 'emoji_data.py', 'exec'), namespace)
        self.assertEqual(namespace['EMOJI_VERSION'], '15.1')
        self.assertEqual([RawEmoji._make(record)
                          for record in namespace['EMOJI_DATA']],
                         [record for record in RECORDS])

        table = EmojiTable(namespace['EMOJI_DATA'])
        emoji = table.get_by_shortcode('wave_tone1')
        assert emoji is not None
        self.assertEqual(emoji.skin_tone, SkinTone.LIGHT)
        flag = table.get_by_shortcode('ci')
        assert flag is not None
        self.assertEqual(flag.name, "flag: Côte d'Ivoire")


if __name__ == '__main__':
    unittest.main()
