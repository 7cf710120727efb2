# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

'''
Shortcode feeds, mapped to the emojis parsed from emoji-test.txt
'''

from __future__ import annotations

from typing import Any
from typing import Sequence

import logging

from emojikit.common.exceptions import DuplicateShortcodeError
from emojikit.common.structs import RawEmoji

log = logging.getLogger('emojikit.c.shortcodes')

EMOJI_PRETTY_URL = ('https://raw.githubusercontent.com/iamcal/emoji-data/'
                    'master/emoji_pretty.json')

ShortcodeMapT = dict[str, list[str]]


def unified_to_unicode(unified: str) -> str:
    return ''.join(chr(int(code, 16)) for code in unified.split('-'))


def _add(mapping: ShortcodeMapT, shortcode: str, emoji: str) -> None:
    shortcode = shortcode.strip(':')
    if not shortcode:
        return
    mapping.setdefault(emoji, [])
    if shortcode not in mapping[emoji]:
        mapping[emoji].append(shortcode)


def parse_emoji_pretty(items: list[dict[str, Any]]) -> ShortcodeMapT:
    '''
    Parses the emoji_pretty.json format of the iamcal emoji-data project.
    Returns a dict of emoji -> shortcodes, the first one is the
    preferred shortcode.
    '''
    mapping: ShortcodeMapT = {}
    for item in items:
        emoji = unified_to_unicode(item['unified'])
        short_names = item.get('short_names') or [item.get('short_name', '')]
        for short_name in short_names:
            _add(mapping, short_name, emoji)
    return mapping


def parse_shortcode_map(data: dict[str, str]) -> ShortcodeMapT:
    '''
    Parses a plain JSON object of shortcode -> emoji, the order of the
    object defines the preferred shortcode of an emoji
    '''
    mapping: ShortcodeMapT = {}
    for shortcode, emoji in data.items():
        _add(mapping, shortcode, emoji)
    return mapping


def assign_shortcodes(records: list[RawEmoji],
                      mapping: ShortcodeMapT,
                      fallbacks: Sequence[ShortcodeMapT] = ()
                      ) -> list[RawEmoji]:
    '''
    Returns new records with shortcodes. Shortcodes given for a minimally
    or unqualified spelling are assigned to the fully-qualified emoji.

    Fallback feeds only give shortcodes to emojis which have none yet,
    a fallback shortcode already taken by another emoji is skipped.
    '''
    shortcodes: dict[str, list[str]] = {}
    targets: dict[str, str] = {}
    for record in records:
        members = [record]
        if record.skin_tones is not None:
            members.extend(record.skin_tones)  # type: ignore
        for member in members:
            shortcodes[member.emoji] = []
            targets[member.emoji] = member.emoji
            for variation in member.variations:
                targets[variation] = member.emoji

    owners: dict[str, str] = {}
    for emoji, codes in mapping.items():
        target = targets.get(emoji)
        if target is None:
            log.warning('Unknown emoji %r for shortcodes %s',
                        emoji, ', '.join(codes))
            continue

        for shortcode in codes:
            owner = owners.get(shortcode)
            if owner is not None and owner != target:
                raise DuplicateShortcodeError(
                    f'Shortcode "{shortcode}" is used by {owner!r} '
                    f'and {target!r}')
            owners[shortcode] = target
            if shortcode not in shortcodes[target]:
                shortcodes[target].append(shortcode)

    for fallback in fallbacks:
        _assign_fallback(fallback, shortcodes, targets, owners)

    result: list[RawEmoji] = []
    for record in records:
        skin_tones = record.skin_tones
        if skin_tones is not None:
            skin_tones = tuple(
                tone._replace(shortcodes=tuple(shortcodes[tone.emoji]))
                for tone in skin_tones)
        result.append(record._replace(
            shortcodes=tuple(shortcodes[record.emoji]),
            skin_tones=skin_tones))

    log.info('Assigned %s shortcodes', len(owners))
    return result


def _assign_fallback(mapping: ShortcodeMapT,
                     shortcodes: dict[str, list[str]],
                     targets: dict[str, str],
                     owners: dict[str, str]) -> None:

    missing = {emoji for emoji, codes in shortcodes.items() if not codes}
    added = 0
    for emoji, codes in mapping.items():
        target = targets.get(emoji)
        if target is None:
            log.debug('Unknown fallback emoji %r', emoji)
            continue

        if target not in missing:
            continue

        for shortcode in codes:
            owner = owners.get(shortcode)
            if owner is not None and owner != target:
                log.debug('Fallback shortcode "%s" is already used by %r',
                          shortcode, owner)
                continue
            owners[shortcode] = target
            if shortcode not in shortcodes[target]:
                shortcodes[target].append(shortcode)
                added += 1

    log.info('Added %s fallback shortcodes', added)
