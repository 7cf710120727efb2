# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

import unittest

from emojikit.common.const import Group
from emojikit.common.const import UnicodeVersion
from emojikit.common.search import BONUS_BOUNDARY
from emojikit.common.search import BONUS_CONSECUTIVE
from emojikit.common.search import BONUS_FIRST
from emojikit.common.search import PENALTY_GAP_EXTENSION
from emojikit.common.search import PENALTY_GAP_START
from emojikit.common.search import SCORE_MATCH
from emojikit.common.search import is_subsequence
from emojikit.common.search import rank
from emojikit.common.search import score
from emojikit.common.structs import Emoji


def make_emoji(id_: int, name: str, *shortcodes: str) -> Emoji:
    return Emoji(id=id_,
                 emoji=chr(0x1F600 + id_),
                 name=name,
                 group=Group.SMILEYS_AND_EMOTION,
                 subgroup='face-smiling',
                 unicode_version=UnicodeVersion(1, 0),
                 shortcodes=shortcodes)


class TestScore(unittest.TestCase):

    def test_subsequence(self) -> None:
        self.assertTrue(is_subsequence('rkt', 'rocket'))
        self.assertTrue(is_subsequence('', 'rocket'))
        self.assertFalse(is_subsequence('tr', 'rocket'))
        self.assertFalse(is_subsequence('rockets', 'rocket'))

    def test_no_match(self) -> None:
        self.assertIsNone(score('', 'rocket'))
        self.assertIsNone(score('x', 'rocket'))
        self.assertIsNone(score('tr', 'rocket'))

    def test_single_character(self) -> None:
        self.assertEqual(score('r', 'rocket'),
                         SCORE_MATCH + BONUS_FIRST + BONUS_BOUNDARY)
        self.assertEqual(score('c', 'rocket'), SCORE_MATCH)
        self.assertEqual(score('f', 'red flag'),
                         SCORE_MATCH + BONUS_BOUNDARY)

    def test_consecutive(self) -> None:
        self.assertEqual(score('ro', 'rocket'),
                         2 * SCORE_MATCH + BONUS_FIRST + BONUS_BOUNDARY
                         + BONUS_CONSECUTIVE)

    def test_gap(self) -> None:
        # r and c are separated by one character
        self.assertEqual(score('rc', 'rocket'),
                         2 * SCORE_MATCH + BONUS_FIRST + BONUS_BOUNDARY
                         - PENALTY_GAP_START)
        # r and k are separated by two characters
        self.assertEqual(score('rk', 'rocket'),
                         2 * SCORE_MATCH + BONUS_FIRST + BONUS_BOUNDARY
                         - PENALTY_GAP_START - PENALTY_GAP_EXTENSION)

    def test_boundary_after_gap(self) -> None:
        # four characters between f and s
        self.assertEqual(score('fs', 'face smiling'),
                         2 * SCORE_MATCH + BONUS_FIRST + 2 * BONUS_BOUNDARY
                         - PENALTY_GAP_START - 3 * PENALTY_GAP_EXTENSION)

    def test_prefer_consecutive(self) -> None:
        consecutive = score('cat', 'cat face')
        scattered = score('cat', 'crescent moon at night')
        assert consecutive is not None
        assert scattered is not None
        self.assertGreater(consecutive, scattered)


class TestRank(unittest.TestCase):

    def setUp(self) -> None:
        self.emojis = [
            make_emoji(0, 'star-struck', 'star_struck'),
            make_emoji(1, 'glowing star', 'star2'),
            make_emoji(2, 'Star'),
            make_emoji(3, 'shooting star', 'stars'),
            make_emoji(4, 'rocket'),
        ]

    def test_exact_match_first(self) -> None:
        results = rank(self.emojis, 'star')
        self.assertEqual([emoji.id for emoji in results], [2, 0, 1, 3])

    def test_ties_keep_order(self) -> None:
        results = rank(self.emojis, 'st')
        self.assertEqual([emoji.id for emoji in results], [0, 2, 1, 3])

    def test_case_insensitive(self) -> None:
        self.assertEqual(rank(self.emojis, 'STAR'),
                         rank(self.emojis, 'star'))

    def test_blank_query(self) -> None:
        self.assertEqual(rank(self.emojis, ''), [])
        self.assertEqual(rank(self.emojis, '  '), [])

    def test_shortcodes(self) -> None:
        self.assertEqual(rank(self.emojis, 'star2'), [])
        results = rank(self.emojis, 'star2', include_shortcodes=True)
        self.assertEqual([emoji.id for emoji in results], [1])


if __name__ == '__main__':
    unittest.main()
