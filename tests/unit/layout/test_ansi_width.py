"""Display-width and padding tests.

Styling escapes must never change measured width, and wide glyphs count
as two cells.
"""

from __future__ import annotations

import unittest

from herocards.ansi import display_width, pad, split_ansi_chunks, strip_ansi

RED = "\033[31m"
BOLD_YELLOW = "\033[1;33m"
ON_BLACK = "\033[40m"
RESET = "\033[0m"


class DisplayWidthTests(unittest.TestCase):
    def test_plain_ascii_counts_characters(self) -> None:
        self.assertEqual(display_width("Hello World"), 11)

    def test_styling_does_not_change_width(self) -> None:
        text = "Hello World"
        styled = [
            f"{RED}{text}{RESET}",
            f"{ON_BLACK}{RED}{text}{RESET}",
            f"\033[5m{ON_BLACK}{RED}{text}{RESET}{RESET}",
            f"{BOLD_YELLOW}Hello{RESET} {RED}World{RESET}",
        ]
        for value in styled:
            self.assertEqual(display_width(value), display_width(text))
            self.assertNotEqual(len(value), display_width(value))

    def test_empty_and_escape_only_strings_are_zero(self) -> None:
        self.assertEqual(display_width(""), 0)
        self.assertEqual(display_width(f"{RED}{RESET}"), 0)

    def test_wide_glyphs_take_two_cells(self) -> None:
        self.assertEqual(display_width("日本"), 4)
        self.assertEqual(display_width(f"{RED}日本{RESET}x"), 5)

    def test_combining_and_zero_width_glyphs_take_no_cells(self) -> None:
        self.assertEqual(display_width("e\u0301"), 1)
        self.assertEqual(display_width("a\u200bb"), 2)

    def test_box_drawing_glyphs_are_single_width(self) -> None:
        self.assertEqual(display_width("┏━━┓"), 4)
        self.assertEqual(display_width("•"), 1)

    def test_strip_ansi_removes_only_style_sequences(self) -> None:
        self.assertEqual(strip_ansi(f"{BOLD_YELLOW}Name{RESET} [x]"), "Name [x]")


class PadTests(unittest.TestCase):
    def test_left_right_and_center_alignment(self) -> None:
        self.assertEqual(pad("ab", 5), "ab   ")
        self.assertEqual(pad("ab", 5, "right"), "   ab")
        self.assertEqual(pad("ab", 5, "center"), " ab  ")

    def test_pad_measures_display_width_not_length(self) -> None:
        styled = f"{RED}ab{RESET}"
        self.assertEqual(pad(styled, 4), f"{styled}  ")
        self.assertEqual(pad("日", 3), "日 ")

    def test_over_width_text_is_returned_unchanged(self) -> None:
        self.assertEqual(pad("abcdef", 3), "abcdef")

    def test_pad_result_width_is_max_of_target_and_text(self) -> None:
        for text in ("", "a", "abc", f"{RED}abcdef{RESET}", "日本"):
            for width in (0, 1, 4, 8):
                for align in ("left", "right", "center"):
                    self.assertEqual(
                        display_width(pad(text, width, align)),
                        max(width, display_width(text)),
                    )

    def test_pad_is_idempotent(self) -> None:
        for align in ("left", "right", "center"):
            once = pad("xy", 7, align)
            self.assertEqual(pad(once, 7, align), once)

    def test_unknown_alignment_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            pad("ab", 5, "justify")


class SplitChunksTests(unittest.TestCase):
    def test_splits_by_display_width(self) -> None:
        self.assertEqual(split_ansi_chunks("abcdefg", 3), ["abc", "def", "g"])

    def test_wide_glyph_never_straddles_a_chunk(self) -> None:
        self.assertEqual(split_ansi_chunks("日本語", 3), ["日", "本", "語"])

    def test_glyph_wider_than_width_gets_its_own_overflowing_chunk(self) -> None:
        chunks = split_ansi_chunks("a日b", 1)
        self.assertEqual(chunks, ["a", "日", "b"])
        self.assertEqual([display_width(chunk) for chunk in chunks], [1, 2, 1])

    def test_escapes_stay_with_their_chunk(self) -> None:
        chunks = split_ansi_chunks(f"{RED}abcd{RESET}", 2)
        self.assertEqual(chunks, [f"{RED}ab", f"cd{RESET}"])
        self.assertEqual([display_width(chunk) for chunk in chunks], [2, 2])


if __name__ == "__main__":
    unittest.main()
