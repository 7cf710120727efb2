# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

'''
Writes the emoji_data module consumed by emojikit.common.table
'''

from __future__ import annotations

from typing import Iterable
from typing import TextIO

from emojikit.common.structs import RawEmoji
from emojikit.common.structs import RawSkinTone

HEADER = '''\
# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

# Generated by scripts/generate_emoji_data.py, do not edit by hand.
#
# Emoji data: {emoji_source}
# Shortcodes: {shortcode_source}

# pylint: disable=line-too-long,too-many-lines

EMOJI_VERSION = {emoji_version}

EMOJI_DATA = [
'''

FOOTER = ']\n'


def escape_emoji(emoji: str) -> str:
    escaped = ''
    for char in emoji:
        codepoint = ord(char)
        if codepoint > 0xFFFF:
            escaped += f'\\U{codepoint:08X}'
        else:
            escaped += f'\\u{codepoint:04X}'
    return f"'{escaped}'"


def quote(text: str) -> str:
    text = text.replace('\\', '\\\\').replace("'", "\\'")
    return f"'{text}'"


def format_tuple(items: Iterable[str]) -> str:
    items = list(items)
    if not items:
        return '()'
    if len(items) == 1:
        return f'({items[0]},)'
    return f'({", ".join(items)})'


def format_skin_tone(tone: RawSkinTone) -> str:
    fields = [
        escape_emoji(tone.emoji),
        quote(tone.name),
        quote(tone.version),
        quote(tone.skin_tone),
        format_tuple(map(quote, tone.shortcodes)),
        format_tuple(map(escape_emoji, tone.variations)),
    ]
    return f'        ({", ".join(fields)}),\n'


def format_record(record: RawEmoji) -> str:
    fields = [
        escape_emoji(record.emoji),
        quote(record.name),
        quote(record.group),
        quote(record.subgroup),
        quote(record.version),
        format_tuple(map(quote, record.shortcodes)),
        format_tuple(map(escape_emoji, record.variations)),
    ]

    if record.skin_tones is None:
        return f'    ({", ".join(fields)}, None),\n'

    lines = [f'    ({", ".join(fields)}, (\n']
    lines.extend(format_skin_tone(tone) for tone in record.skin_tones)
    lines.append('    )),\n')
    return ''.join(lines)


def write_emoji_data(file: TextIO,
                     records: Iterable[RawEmoji],
                     emoji_version: str,
                     emoji_source: str,
                     shortcode_source: str
                     ) -> None:

    file.write(HEADER.format(emoji_version=quote(emoji_version),
                             emoji_source=emoji_source,
                             shortcode_source=shortcode_source))
    for record in records:
        file.write(format_record(record))
    file.write(FOOTER)
