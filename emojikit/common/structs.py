# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import NamedTuple

from dataclasses import dataclass
from dataclasses import field
from functools import total_ordering

from emojikit.common.const import Group
from emojikit.common.const import SkinTone
from emojikit.common.const import UnicodeVersion


class RawSkinTone(NamedTuple):
    emoji: str
    name: str
    version: str
    skin_tone: str
    shortcodes: tuple[str, ...] = ()
    variations: tuple[str, ...] = ()


class RawEmoji(NamedTuple):
    emoji: str
    name: str
    group: str
    subgroup: str
    version: str
    shortcodes: tuple[str, ...] = ()
    variations: tuple[str, ...] = ()
    skin_tones: tuple[RawSkinTone, ...] | None = None


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Emoji:
    '''
    A single emoji of the table, ordered by its position in the
    Unicode recommended order
    '''

    id: int
    emoji: str
    name: str
    group: Group
    subgroup: str
    unicode_version: UnicodeVersion
    shortcodes: tuple[str, ...] = ()
    skin_tone: SkinTone | None = None
    family: int | None = field(default=None, repr=False)

    def as_str(self) -> str:
        return self.emoji

    @property
    def shortcode(self) -> str | None:
        if not self.shortcodes:
            return None
        return self.shortcodes[0]

    @property
    def is_representative(self) -> bool:
        return self.skin_tone in (None, SkinTone.DEFAULT)

    def __str__(self) -> str:
        return self.emoji

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Emoji):
            return NotImplemented
        return self.id == other.id and self.emoji == other.emoji

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Emoji):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash((self.id, self.emoji))
