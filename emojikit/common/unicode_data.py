# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

'''
Parser for the Unicode emoji-test.txt file, see
https://www.unicode.org/reports/tr51/#emoji_data
'''

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field

from packaging.version import InvalidVersion

from emojikit.common.const import SKIN_TONE_MODIFIERS
from emojikit.common.const import SkinTone
from emojikit.common.const import UnicodeVersion
from emojikit.common.exceptions import EmojiDataError
from emojikit.common.structs import RawEmoji
from emojikit.common.structs import RawSkinTone

log = logging.getLogger('emojikit.c.unicode_data')

GROUP_PREFIX = '# group: '
SUBGROUP_PREFIX = '# subgroup: '
VERSION_PREFIX = '# Version: '

FULLY_QUALIFIED = 'fully-qualified'
MINIMALLY_QUALIFIED = 'minimally-qualified'
UNQUALIFIED = 'unqualified'
COMPONENT = 'component'

STATUSES = (FULLY_QUALIFIED, MINIMALLY_QUALIFIED, UNQUALIFIED, COMPONENT)


@dataclass
class _PendingSkinTone:
    emoji: str
    name: str
    version: str
    skin_tone: SkinTone
    variations: list[str] = field(default_factory=list)

    def freeze(self) -> RawSkinTone:
        return RawSkinTone(self.emoji,
                           self.name,
                           self.version,
                           self.skin_tone.name,
                           (),
                           tuple(self.variations))


@dataclass
class _PendingEmoji:
    emoji: str
    name: str
    group: str
    subgroup: str
    version: str
    variations: list[str] = field(default_factory=list)
    skin_tones: list[_PendingSkinTone] = field(default_factory=list)

    def freeze(self) -> RawEmoji:
        skin_tones = None
        if self.skin_tones:
            skin_tones = tuple(tone.freeze() for tone in self.skin_tones)

        return RawEmoji(self.emoji,
                        self.name,
                        self.group,
                        self.subgroup,
                        self.version,
                        (),
                        tuple(self.variations),
                        skin_tones)


def parse_code_points(code_points: str) -> str:
    try:
        return ''.join(chr(int(point, 16)) for point in code_points.split())
    except ValueError:
        raise EmojiDataError(f'Invalid code points: {code_points}') from None


def parse_version(version: str) -> str:
    '''
    Normalizes an emoji version like "E0.6" or "13.1" to "major.minor"
    '''
    try:
        return str(UnicodeVersion.from_string(version.removeprefix('E')))
    except InvalidVersion:
        raise EmojiDataError(f'Invalid emoji version: {version}') from None


def get_emoji_version(text: str) -> str | None:
    for line in text.splitlines():
        if line.startswith(VERSION_PREFIX):
            return parse_version(line.removeprefix(VERSION_PREFIX).strip())
    return None


def parse_line(line: str) -> tuple[str, str, str, str]:
    '''
    Parses a data line, e.g.
    1F600 ; fully-qualified # 😀 E1.0 grinning face

    Returns emoji, status, version and name
    '''
    code_points, sep, rest = line.partition(';')
    if not sep:
        raise EmojiDataError('Expected code points')

    status, sep, comment = rest.partition('#')
    if not sep:
        raise EmojiDataError('Expected status')

    status = status.strip()
    if status not in STATUSES:
        raise EmojiDataError(f'Unrecognized status "{status}"')

    parts = comment.strip().split(' ', 2)
    if len(parts) != 3:
        raise EmojiDataError('Expected emoji, version and name')

    _emoji, version, name = parts
    return (parse_code_points(code_points),
            status,
            parse_version(version),
            name.strip())


def parse_emoji_test(text: str) -> list[RawEmoji]:
    '''
    Returns the fully-qualified emojis of emoji-test.txt in file order.

    Minimally-qualified and unqualified emojis are added as variations to
    the preceding fully-qualified emoji. Emojis with skin tone modifiers
    are added as skin tones to the preceding emoji without modifiers.
    Components are skipped.
    '''
    records: list[_PendingEmoji] = []
    group: str | None = None
    subgroup: str | None = None
    last: _PendingEmoji | _PendingSkinTone | None = None
    base: _PendingEmoji | None = None

    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue

        if line.startswith(GROUP_PREFIX):
            group = line.removeprefix(GROUP_PREFIX).strip()
            subgroup = None
            last = base = None
            continue

        if line.startswith(SUBGROUP_PREFIX):
            subgroup = line.removeprefix(SUBGROUP_PREFIX).strip()
            last = base = None
            continue

        if line.startswith('#'):
            continue

        if group is None or subgroup is None:
            raise EmojiDataError(f'Line {lineno}: emoji outside of subgroup')

        try:
            emoji, status, version, name = parse_line(line)
        except EmojiDataError as error:
            raise EmojiDataError(f'Line {lineno}: {error}') from None

        if status == COMPONENT:
            continue

        if status != FULLY_QUALIFIED:
            if last is None:
                raise EmojiDataError(
                    f'Line {lineno}: no fully-qualified emoji for "{name}"')
            last.variations.append(emoji)
            continue

        modifiers = [char for char in emoji if char in SKIN_TONE_MODIFIERS]
        try:
            skin_tone = SkinTone.from_modifiers(modifiers)
        except ValueError as error:
            raise EmojiDataError(f'Line {lineno}: {error}') from None

        if skin_tone is None:
            base = _PendingEmoji(emoji, name, group, subgroup, version)
            records.append(base)
            last = base
            continue

        if base is None:
            raise EmojiDataError(
                f'Line {lineno}: no default skin tone emoji for "{name}"')

        last = _PendingSkinTone(emoji, name, version, skin_tone)
        base.skin_tones.append(last)

    log.info('Parsed %s emojis', len(records))
    return [record.freeze() for record in records]
