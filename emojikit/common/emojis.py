# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import Iterator

import logging

from emojikit.common.const import Group
from emojikit.common.const import SkinTone
from emojikit.common.search import rank
from emojikit.common.structs import Emoji
from emojikit.common.table import get_table

log = logging.getLogger('emojikit.c.emojis')


def get_by_unicode(emoji: str) -> Emoji | None:
    '''
    Lookup an emoji by its exact code point sequence.

    Minimally-qualified and unqualified spellings resolve to the
    fully-qualified emoji, no other normalization takes place.
    '''
    return get_table().get_by_unicode(emoji)


def get_by_shortcode(shortcode: str) -> Emoji | None:
    '''
    Lookup an emoji by shortcode, e.g. "rocket" (without colons)
    '''
    return get_table().get_by_shortcode(shortcode)


def iter_emojis() -> Iterator[Emoji]:
    '''
    Returns an iterator over all emojis in recommended order. Skin tone
    variants are only reachable through skin_tones().
    '''
    return iter(get_table().representatives)


def iter_group(group: Group | str) -> Iterator[Emoji]:
    if not isinstance(group, Group):
        group = Group.from_str(group)
    return iter(get_table().get_group(group))


def skin_tones(emoji: Emoji) -> Iterator[Emoji] | None:
    '''
    Returns an iterator over all members of the skin tone family of emoji,
    starting with the default (yellow) one, or None if the emoji has
    no skin tone variations
    '''
    family = get_table().get_family(emoji)
    if family is None:
        return None
    return iter(family)


def with_skin_tone(emoji: Emoji, skin_tone: SkinTone) -> Emoji | None:
    family = get_table().get_family(emoji)
    if family is None:
        return None

    for member in family:
        if member.skin_tone == skin_tone:
            return member
    return None


def search(query: str, include_shortcodes: bool = False) -> Iterator[Emoji]:
    '''
    Fuzzy search over emoji names, best matches first
    '''
    results = rank(get_table().representatives,
                   query,
                   include_shortcodes=include_shortcodes)
    log.debug('Search for "%s" returned %s results', query, len(results))
    return iter(results)
