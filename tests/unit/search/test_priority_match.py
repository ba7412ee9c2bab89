"""Priority matcher tests: name beats description beats classes."""

from __future__ import annotations

import unittest
from dataclasses import dataclass

from herocards.errors import InvalidPattern
from herocards.search import MatchRank, compile_pattern, complete_names, find_best, match_rank, matching_names


@dataclass(frozen=True)
class Entry:
    name: str
    description: str = ""
    classes: tuple[str, ...] = ()


def classes_of(entry: Entry) -> tuple[str, ...]:
    return entry.classes


DRAGON = Entry("Dragon", "A calamity on wings")
OGRE = Entry("Ogre", "Big, with a dragon tattoo")
WYVERN = Entry("Wyvern", "A lesser dragon")
WIZARD_MOVE = Entry("Spell Defense", "Ward yourself", ("wizard",))
HAT = Entry("Pointy Hat", "Favoured by every wizard")


class FindBestTests(unittest.TestCase):
    def test_name_match_beats_earlier_description_match(self) -> None:
        self.assertIs(find_best([OGRE, DRAGON], "dragon"), DRAGON)
        self.assertIs(find_best([DRAGON, OGRE], "dragon"), DRAGON)

    def test_first_description_match_wins_without_name_match(self) -> None:
        self.assertIs(find_best([OGRE, WYVERN], "dragon"), OGRE)
        self.assertIs(find_best([WYVERN, OGRE], "dragon"), WYVERN)

    def test_description_beats_classes(self) -> None:
        self.assertIs(find_best([WIZARD_MOVE, HAT], "wizard", classes_of), HAT)

    def test_classes_only_searched_when_extractor_given(self) -> None:
        self.assertIs(find_best([WIZARD_MOVE], "wizard", classes_of), WIZARD_MOVE)
        self.assertIsNone(find_best([WIZARD_MOVE], "wizard"))

    def test_matching_is_case_insensitive_regex(self) -> None:
        self.assertIs(find_best([OGRE, DRAGON], "^DRAG"), DRAGON)
        self.assertIs(find_best([OGRE, DRAGON], "tat+oo"), OGRE)

    def test_no_match_returns_none(self) -> None:
        self.assertIsNone(find_best([OGRE, DRAGON], "beholder"))
        self.assertIsNone(find_best([], "anything"))

    def test_name_match_stops_the_scan(self) -> None:
        def records():
            yield OGRE
            yield DRAGON
            raise AssertionError("scanned past a name match")

        self.assertIs(find_best(records(), "dragon"), DRAGON)

    def test_invalid_pattern_raises(self) -> None:
        with self.assertRaises(InvalidPattern) as ctx:
            find_best([DRAGON], "(")
        self.assertEqual(ctx.exception.pattern, "(")
        self.assertIsInstance(ctx.exception, ValueError)


class MatchRankTests(unittest.TestCase):
    def test_rank_order(self) -> None:
        self.assertLess(MatchRank.NONE, MatchRank.CLASSES)
        self.assertLess(MatchRank.CLASSES, MatchRank.DESCRIPTION)
        self.assertLess(MatchRank.DESCRIPTION, MatchRank.NAME)

    def test_highest_field_is_reported(self) -> None:
        regex = compile_pattern("wizard")
        self.assertEqual(match_rank(Entry("Wizard", "wizard", ("wizard",)), regex, classes_of), MatchRank.NAME)
        self.assertEqual(match_rank(HAT, regex, classes_of), MatchRank.DESCRIPTION)
        self.assertEqual(match_rank(WIZARD_MOVE, regex, classes_of), MatchRank.CLASSES)
        self.assertEqual(match_rank(DRAGON, regex, classes_of), MatchRank.NONE)


class NameListingTests(unittest.TestCase):
    def test_matching_names_keeps_order(self) -> None:
        self.assertEqual(matching_names([OGRE, DRAGON, WYVERN], "r"), ["Ogre", "Dragon", "Wyvern"])
        self.assertEqual(matching_names([OGRE, DRAGON, WYVERN], "^d"), ["Dragon"])
        self.assertEqual(matching_names([OGRE, DRAGON], ""), ["Ogre", "Dragon"])

    def test_matching_names_rejects_bad_pattern(self) -> None:
        with self.assertRaises(InvalidPattern):
            matching_names([OGRE], "[")

    def test_complete_names_by_prefix(self) -> None:
        self.assertEqual(complete_names([OGRE, DRAGON, WYVERN], "w"), ["Wyvern"])
        self.assertEqual(complete_names([OGRE, DRAGON], ""), ["Ogre", "Dragon"])
        self.assertEqual(complete_names([OGRE, DRAGON], "(x"), [])


if __name__ == "__main__":
    unittest.main()
