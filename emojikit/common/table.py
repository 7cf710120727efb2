# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import Iterable
from typing import Sequence

import logging
import threading
from collections import defaultdict

from emojikit.common.const import Group
from emojikit.common.const import SkinTone
from emojikit.common.const import UnicodeVersion
from emojikit.common.exceptions import DuplicateEmojiError
from emojikit.common.exceptions import DuplicateShortcodeError
from emojikit.common.exceptions import EmojiDataError
from emojikit.common.structs import Emoji
from emojikit.common.structs import RawEmoji
from emojikit.common.structs import RawSkinTone

log = logging.getLogger('emojikit.c.table')


class EmojiTable:
    '''
    Immutable table of all emojis, built once from the raw records of the
    generated data module.

    All emojis are kept in recommended order, every family representative
    is directly followed by the other members of its skin tone family.
    '''

    def __init__(self, records: Iterable[Sequence[object]]) -> None:
        self._emojis: list[Emoji] = []
        self._representatives: list[Emoji] = []
        self._by_unicode: dict[str, Emoji] = {}
        self._by_shortcode: dict[str, Emoji] = {}
        self._by_group: dict[Group, list[Emoji]] = defaultdict(list)
        self._families: dict[int, tuple[Emoji, ...]] = {}

        for record in records:
            self._add_record(RawEmoji._make(record))

        self._emojis_view = tuple(self._emojis)
        self._representatives_view = tuple(self._representatives)
        self._groups_view = {
            group: tuple(emojis) for group, emojis in self._by_group.items()}

        log.info('Built emoji table: %s emojis, %s representatives, '
                 '%s shortcodes, %s skin tone families',
                 len(self._emojis),
                 len(self._representatives),
                 len(self._by_shortcode),
                 len(self._families))

    def _add_record(self, record: RawEmoji) -> None:
        try:
            group = Group(record.group)
        except ValueError:
            raise EmojiDataError(
                f'Unknown group "{record.group}" for {record.name}') from None

        if record.skin_tones is None:
            emoji = self._add_emoji(record.emoji,
                                    record.name,
                                    group,
                                    record.subgroup,
                                    record.version,
                                    record.shortcodes,
                                    record.variations,
                                    None,
                                    None)
            self._representatives.append(emoji)
            self._by_group[group].append(emoji)
            return

        family_id = len(self._emojis)
        default = self._add_emoji(record.emoji,
                                  record.name,
                                  group,
                                  record.subgroup,
                                  record.version,
                                  record.shortcodes,
                                  record.variations,
                                  SkinTone.DEFAULT,
                                  family_id)
        self._representatives.append(default)
        self._by_group[group].append(default)

        members = [default]
        for raw_tone in record.skin_tones:
            raw_tone = RawSkinTone._make(raw_tone)
            try:
                skin_tone = SkinTone[raw_tone.skin_tone]
            except KeyError:
                raise EmojiDataError(
                    f'Unknown skin tone "{raw_tone.skin_tone}" '
                    f'for {raw_tone.name}') from None

            if skin_tone == SkinTone.DEFAULT or any(
                    member.skin_tone == skin_tone for member in members):
                raise EmojiDataError(
                    f'Skin tone {skin_tone.name} defined twice '
                    f'for {record.name}')

            members.append(self._add_emoji(raw_tone.emoji,
                                           raw_tone.name,
                                           group,
                                           record.subgroup,
                                           raw_tone.version,
                                           raw_tone.shortcodes,
                                           raw_tone.variations,
                                           skin_tone,
                                           family_id))

        members.sort(key=lambda member: member.skin_tone)
        self._families[family_id] = tuple(members)

    def _add_emoji(self,
                   emoji_str: str,
                   name: str,
                   group: Group,
                   subgroup: str,
                   version: str,
                   shortcodes: Sequence[str],
                   variations: Sequence[str],
                   skin_tone: SkinTone | None,
                   family: int | None
                   ) -> Emoji:

        emoji = Emoji(id=len(self._emojis),
                      emoji=emoji_str,
                      name=name,
                      group=group,
                      subgroup=subgroup,
                      unicode_version=UnicodeVersion.from_string(version),
                      shortcodes=tuple(shortcodes),
                      skin_tone=skin_tone,
                      family=family)

        for key in (emoji_str, *variations):
            existing = self._by_unicode.get(key)
            if existing is not None:
                raise DuplicateEmojiError(
                    f'{key!r} is used by "{existing.name}" and "{name}"')
            self._by_unicode[key] = emoji

        for shortcode in emoji.shortcodes:
            if not shortcode:
                raise EmojiDataError(f'Empty shortcode for {name}')
            existing = self._by_shortcode.get(shortcode)
            if existing is not None:
                raise DuplicateShortcodeError(
                    f'Shortcode "{shortcode}" is used by "{existing.name}" '
                    f'and "{name}"')
            self._by_shortcode[shortcode] = emoji

        self._emojis.append(emoji)
        return emoji

    def __len__(self) -> int:
        return len(self._emojis)

    @property
    def emojis(self) -> tuple[Emoji, ...]:
        return self._emojis_view

    @property
    def representatives(self) -> tuple[Emoji, ...]:
        return self._representatives_view

    def get_by_unicode(self, emoji: str) -> Emoji | None:
        return self._by_unicode.get(emoji)

    def get_by_shortcode(self, shortcode: str) -> Emoji | None:
        return self._by_shortcode.get(shortcode)

    def get_group(self, group: Group) -> tuple[Emoji, ...]:
        return self._groups_view.get(group, ())

    def get_family(self, emoji: Emoji) -> tuple[Emoji, ...] | None:
        if emoji.family is None:
            return None
        return self._families.get(emoji.family)


_table: EmojiTable | None = None
_table_lock = threading.Lock()


def get_table() -> EmojiTable:
    '''
    Returns the process wide emoji table, building it on first use
    '''
    global _table
    if _table is not None:
        return _table

    with _table_lock:
        if _table is None:
            from emojikit.common.emoji_data import EMOJI_DATA
            from emojikit.common.emoji_data import EMOJI_VERSION

            log.debug('Loading emoji data, emoji version %s', EMOJI_VERSION)
            _table = EmojiTable(EMOJI_DATA)
    return _table
