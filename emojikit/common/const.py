# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import NamedTuple

import functools
from enum import Enum
from enum import IntEnum
from enum import unique

from packaging.version import Version as V

EMOJI_TEST_URL = 'https://unicode.org/Public/emoji/{version}/emoji-test.txt'

SKIN_TONE_MODIFIERS = {
    '\U0001F3FB': 'LIGHT',
    '\U0001F3FC': 'MEDIUM_LIGHT',
    '\U0001F3FD': 'MEDIUM',
    '\U0001F3FE': 'MEDIUM_DARK',
    '\U0001F3FF': 'DARK',
}


@unique
class Group(Enum):
    SMILEYS_AND_EMOTION = 'Smileys & Emotion'
    PEOPLE_AND_BODY = 'People & Body'
    ANIMALS_AND_NATURE = 'Animals & Nature'
    FOOD_AND_DRINK = 'Food & Drink'
    TRAVEL_AND_PLACES = 'Travel & Places'
    ACTIVITIES = 'Activities'
    OBJECTS = 'Objects'
    SYMBOLS = 'Symbols'
    FLAGS = 'Flags'

    @classmethod
    def from_str(cls, name: str) -> Group:
        '''
        Accepts the upstream group name ("Food & Drink") or the
        member name ("FOOD_AND_DRINK")
        '''
        try:
            return cls(name)
        except ValueError:
            pass

        if not isinstance(name, str):
            raise ValueError(f'Unknown emoji group: {name!r}')

        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f'Unknown emoji group: {name}') from None

    def __str__(self) -> str:
        return self.value


@unique
class SkinTone(IntEnum):
    DEFAULT = 0
    LIGHT = 1
    MEDIUM_LIGHT = 2
    MEDIUM = 3
    MEDIUM_DARK = 4
    DARK = 5
    LIGHT_AND_MEDIUM_LIGHT = 6
    LIGHT_AND_MEDIUM = 7
    LIGHT_AND_MEDIUM_DARK = 8
    LIGHT_AND_DARK = 9
    MEDIUM_LIGHT_AND_LIGHT = 10
    MEDIUM_LIGHT_AND_MEDIUM = 11
    MEDIUM_LIGHT_AND_MEDIUM_DARK = 12
    MEDIUM_LIGHT_AND_DARK = 13
    MEDIUM_AND_LIGHT = 14
    MEDIUM_AND_MEDIUM_LIGHT = 15
    MEDIUM_AND_MEDIUM_DARK = 16
    MEDIUM_AND_DARK = 17
    MEDIUM_DARK_AND_LIGHT = 18
    MEDIUM_DARK_AND_MEDIUM_LIGHT = 19
    MEDIUM_DARK_AND_MEDIUM = 20
    MEDIUM_DARK_AND_DARK = 21
    DARK_AND_LIGHT = 22
    DARK_AND_MEDIUM_LIGHT = 23
    DARK_AND_MEDIUM = 24
    DARK_AND_MEDIUM_DARK = 25

    @classmethod
    def from_modifiers(cls, modifiers: list[str]) -> SkinTone | None:
        '''
        Returns the tone described by the skin tone modifiers of an emoji,
        in the order they appear in the sequence
        '''
        names: list[str] = []
        for modifier in modifiers:
            name = SKIN_TONE_MODIFIERS[modifier]
            if name not in names:
                names.append(name)

        if not names:
            return None
        if len(names) > 2:
            raise ValueError(f'Too many skin tones: {names}')
        return cls['_AND_'.join(names)]

    @property
    def is_paired(self) -> bool:
        return self > SkinTone.DARK


class UnicodeVersion(NamedTuple):
    major: int
    minor: int

    @classmethod
    def from_string(cls, version: str) -> UnicodeVersion:
        return _parse_unicode_version(version)

    def __str__(self) -> str:
        return f'{self.major}.{self.minor}'


@functools.lru_cache(maxsize=None)
def _parse_unicode_version(version: str) -> UnicodeVersion:
    v = V(version)
    return UnicodeVersion(v.major, v.minor)
