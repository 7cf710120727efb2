# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

import threading
import unittest

from emojikit.common import emojis
from emojikit.common.const import Group
from emojikit.common.const import SkinTone
from emojikit.common.const import UnicodeVersion
from emojikit.common.table import get_table

FIVE_TONES = [
    SkinTone.DEFAULT,
    SkinTone.LIGHT,
    SkinTone.MEDIUM_LIGHT,
    SkinTone.MEDIUM,
    SkinTone.MEDIUM_DARK,
    SkinTone.DARK,
]


class TestLookup(unittest.TestCase):

    def test_unicode_round_trip(self) -> None:
        for emoji in get_table().emojis:
            self.assertIs(emojis.get_by_unicode(emoji.as_str()), emoji)

    def test_shortcode_round_trip(self) -> None:
        for emoji in get_table().emojis:
            for shortcode in emoji.shortcodes:
                self.assertIs(emojis.get_by_shortcode(shortcode), emoji)

    def test_get_by_unicode(self) -> None:
        emoji = emojis.get_by_unicode('\U0001F928')
        assert emoji is not None
        self.assertEqual(emoji.name, 'face with raised eyebrow')
        self.assertEqual(emoji.group, Group.SMILEYS_AND_EMOTION)
        self.assertIsNone(emojis.get_by_unicode('abc'))
        self.assertIsNone(emojis.get_by_unicode(''))

    def test_variation_spellings(self) -> None:
        emoji = emojis.get_by_unicode('\u263A')
        assert emoji is not None
        self.assertEqual(emoji.as_str(), '\u263A\uFE0F')
        self.assertEqual(emoji.name, 'smiling face')

        keycap = emojis.get_by_unicode('\u0023\u20E3')
        assert keycap is not None
        self.assertEqual(keycap.as_str(), '\u0023\uFE0F\u20E3')

    def test_get_by_shortcode(self) -> None:
        rocket = emojis.get_by_shortcode('rocket')
        assert rocket is not None
        self.assertEqual(rocket.as_str(), '\U0001F680')
        self.assertEqual(rocket.group, Group.TRAVEL_AND_PLACES)

        thumbs_up = emojis.get_by_shortcode('+1')
        self.assertIs(thumbs_up, emojis.get_by_shortcode('thumbsup'))
        assert thumbs_up is not None
        self.assertEqual(thumbs_up.shortcode, 'thumbsup')

        self.assertIsNone(emojis.get_by_shortcode('nonexistent_xyz'))
        self.assertIsNone(emojis.get_by_shortcode(':rocket:'))

    def test_unicode_version(self) -> None:
        rocket = emojis.get_by_unicode('\U0001F680')
        assert rocket is not None
        self.assertEqual(rocket.unicode_version, UnicodeVersion(0, 6))

        star_struck = emojis.get_by_shortcode('star_struck')
        assert star_struck is not None
        self.assertGreater(star_struck.unicode_version,
                           rocket.unicode_version)
        self.assertEqual(str(star_struck.unicode_version), '5.0')

    def test_recent_shortcodes(self) -> None:
        yawning = emojis.get_by_shortcode('yawning_face')
        assert yawning is not None
        self.assertEqual(yawning.as_str(), '\U0001F971')
        self.assertEqual(yawning.unicode_version, UnicodeVersion(12, 0))

        melting = emojis.get_by_shortcode('melting_face')
        assert melting is not None
        self.assertEqual(melting.as_str(), '\U0001FAE0')
        self.assertEqual(melting.shortcode, 'melting_face')

        recent = [emoji for emoji in emojis.iter_emojis()
                  if emoji.unicode_version >= UnicodeVersion(12, 0)]
        self.assertTrue(recent)
        with_shortcode = [emoji for emoji in recent if emoji.shortcodes]
        self.assertGreater(len(with_shortcode), len(recent) // 2)


class TestIteration(unittest.TestCase):

    def test_unique(self) -> None:
        seen = [emoji.as_str() for emoji in emojis.iter_emojis()]
        self.assertEqual(len(seen), len(set(seen)))

    def test_deterministic(self) -> None:
        self.assertEqual(list(emojis.iter_emojis()),
                         list(emojis.iter_emojis()))

    def test_order(self) -> None:
        ids = [emoji.id for emoji in emojis.iter_emojis()]
        self.assertEqual(ids, sorted(ids))
        first = next(emojis.iter_emojis())
        self.assertEqual(first.name, 'grinning face')

    def test_only_representatives(self) -> None:
        for emoji in emojis.iter_emojis():
            self.assertIn(emoji.skin_tone, (None, SkinTone.DEFAULT))

    def test_groups_partition(self) -> None:
        grouped = []
        for group in Group:
            members = list(emojis.iter_group(group))
            self.assertTrue(members)
            for emoji in members:
                self.assertEqual(emoji.group, group)
            grouped.extend(members)

        self.assertEqual(sorted(grouped), list(emojis.iter_emojis()))

    def test_group_by_name(self) -> None:
        self.assertEqual(list(emojis.iter_group('Flags')),
                         list(emojis.iter_group(Group.FLAGS)))
        self.assertEqual(list(emojis.iter_group('food_and_drink')),
                         list(emojis.iter_group(Group.FOOD_AND_DRINK)))
        with self.assertRaises(ValueError):
            emojis.iter_group('Component')
        with self.assertRaises(ValueError):
            emojis.iter_group(1)  # type: ignore


class TestSkinTones(unittest.TestCase):

    def test_five_tones(self) -> None:
        raised_hands = emojis.get_by_unicode('\U0001F64C')
        assert raised_hands is not None
        family = emojis.skin_tones(raised_hands)
        assert family is not None
        family = list(family)

        self.assertEqual([emoji.skin_tone for emoji in family], FIVE_TONES)
        self.assertIs(family[0], raised_hands)
        self.assertEqual(family[0].as_str(), '\U0001F64C')
        self.assertEqual(family[1].as_str(), '\U0001F64C\U0001F3FB')
        self.assertEqual(family[5].shortcode, 'raised_hands_tone5')

    def test_paired_tones(self) -> None:
        handshake = emojis.get_by_shortcode('handshake')
        assert handshake is not None
        family = emojis.skin_tones(handshake)
        assert family is not None
        tones = [emoji.skin_tone for emoji in family]

        self.assertEqual(tones, list(SkinTone))
        self.assertFalse(SkinTone.DARK.is_paired)
        self.assertTrue(SkinTone.LIGHT_AND_DARK.is_paired)

    def test_family_sizes(self) -> None:
        for emoji in emojis.iter_emojis():
            family = emojis.skin_tones(emoji)
            if family is None:
                self.assertIsNone(emoji.skin_tone)
                continue
            self.assertIn(len(list(family)), (6, 26))

    def test_from_member(self) -> None:
        dark = emojis.get_by_unicode('\U0001F44B\U0001F3FF')
        assert dark is not None
        self.assertEqual(dark.skin_tone, SkinTone.DARK)
        family = emojis.skin_tones(dark)
        assert family is not None
        self.assertEqual(next(family).as_str(), '\U0001F44B')

    def test_no_tones(self) -> None:
        rocket = emojis.get_by_unicode('\U0001F680')
        assert rocket is not None
        self.assertIsNone(emojis.skin_tones(rocket))
        self.assertIsNone(emojis.with_skin_tone(rocket, SkinTone.DARK))

    def test_with_skin_tone(self) -> None:
        wave = emojis.get_by_shortcode('wave')
        assert wave is not None
        medium = emojis.with_skin_tone(wave, SkinTone.MEDIUM)
        assert medium is not None
        self.assertEqual(medium.as_str(), '\U0001F44B\U0001F3FD')
        self.assertIs(emojis.with_skin_tone(medium, SkinTone.DEFAULT), wave)
        self.assertIsNone(emojis.with_skin_tone(wave,
                                                SkinTone.LIGHT_AND_DARK))


class TestSearch(unittest.TestCase):

    def test_rocket(self) -> None:
        results = list(emojis.search('rocket'))
        self.assertTrue(results)
        self.assertIn('rocket', results[0].name)
        self.assertEqual(results[0].as_str(), '\U0001F680')

    def test_exact_match_first(self) -> None:
        results = list(emojis.search('star'))
        self.assertEqual(results[0].as_str(), '\u2B50')
        self.assertEqual(results[1].name, 'star-struck')

    def test_case_insensitive(self) -> None:
        self.assertEqual(list(emojis.search('ROCKET')),
                         list(emojis.search('rocket')))

    def test_no_results(self) -> None:
        self.assertEqual(list(emojis.search('')), [])
        self.assertEqual(list(emojis.search('   ')), [])
        self.assertEqual(list(emojis.search('qqqqxzzz')), [])

    def test_shortcodes(self) -> None:
        self.assertEqual(list(emojis.search('satisfied')), [])
        results = list(emojis.search('satisfied', include_shortcodes=True))
        self.assertEqual(results, [emojis.get_by_shortcode('satisfied')])

    def test_representatives_only(self) -> None:
        for emoji in emojis.search('hand'):
            self.assertIn(emoji.skin_tone, (None, SkinTone.DEFAULT))


class TestTable(unittest.TestCase):

    def test_single_instance(self) -> None:
        tables = []

        def load() -> None:
            tables.append(get_table())

        threads = [threading.Thread(target=load) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(tables), 8)
        for table in tables:
            self.assertIs(table, get_table())


if __name__ == '__main__':
    unittest.main()
