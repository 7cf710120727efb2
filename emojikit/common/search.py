# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

'''
Fuzzy matching of emoji names.

A query matches a text when all characters of the query appear in the text
in the same order. The score of a match is the score of the best alignment:
every matched character scores SCORE_MATCH, characters matched directly
after the previous one and characters at the start of a word get a bonus,
characters skipped between two matches cost a gap penalty. Unmatched text
before the first and after the last match is free.
'''

from __future__ import annotations

from typing import Iterable

from emojikit.common.structs import Emoji

SCORE_MATCH = 16
BONUS_CONSECUTIVE = 12
BONUS_BOUNDARY = 8
BONUS_FIRST = 8
PENALTY_GAP_START = 3
PENALTY_GAP_EXTENSION = 1

WORD_SEPARATORS = frozenset(' -_:,(.')


def is_subsequence(query: str, text: str) -> bool:
    chars = iter(text)
    return all(char in chars for char in query)


def _bonus(text: str, index: int) -> int:
    if index == 0:
        return BONUS_FIRST + BONUS_BOUNDARY
    if text[index - 1] in WORD_SEPARATORS:
        return BONUS_BOUNDARY
    return 0


def _max(a: int | None, b: int | None) -> int | None:
    if a is None:
        return b
    if b is None:
        return a
    return max(a, b)


def score(query: str, text: str) -> int | None:
    '''
    Returns the score of the best alignment of query in text or None if
    the query does not match. Both strings are compared as given, callers
    casefold them.
    '''
    if not query or not is_subsequence(query, text):
        return None

    length = len(text)
    bonuses = [_bonus(text, index) for index in range(length)]

    # previous[j]: best score of the query so far with its last character
    # matched at text[j]
    previous: list[int | None] = [None] * length
    for i, char in enumerate(query):
        current: list[int | None] = [None] * length
        # best previous[k] minus the gap penalty, for all k <= j - 2
        gapped: int | None = None
        for j in range(length):
            if i > 0 and j >= 2:
                opened = previous[j - 2]
                if opened is not None:
                    opened -= PENALTY_GAP_START
                if gapped is not None:
                    gapped -= PENALTY_GAP_EXTENSION
                gapped = _max(gapped, opened)

            if text[j] != char:
                continue

            points = SCORE_MATCH + bonuses[j]
            if i == 0:
                current[j] = points
                continue

            best = gapped
            if j >= 1 and previous[j - 1] is not None:
                best = _max(best, previous[j - 1] + BONUS_CONSECUTIVE)
            if best is not None:
                current[j] = best + points

        previous = current

    return max((s for s in previous if s is not None), default=None)


def rank(emojis: Iterable[Emoji],
         query: str,
         include_shortcodes: bool = False
         ) -> list[Emoji]:
    '''
    Returns all emojis matching query. Exact name matches come first, then
    higher scores, ties keep the recommended order.
    '''
    needle = query.casefold()
    if not needle.strip():
        return []

    matches: list[tuple[bool, int, int, Emoji]] = []
    for emoji in emojis:
        name = emoji.name.casefold()
        best = score(needle, name)
        if include_shortcodes:
            for shortcode in emoji.shortcodes:
                best = _max(best, score(needle, shortcode.casefold()))

        if best is None:
            continue

        matches.append((name != needle, -best, emoji.id, emoji))

    matches.sort(key=lambda match: match[:3])
    return [match[3] for match in matches]
