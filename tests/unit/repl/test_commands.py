"""Command dispatch, completion, and prompt-loop tests.

Everything runs against an in-memory library with the plain theme, so no
terminal is needed.
"""

from __future__ import annotations

import io
import unittest
from unittest import mock

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from herocards.records import Library, Monster, Move, Tag
from herocards.repl import CommandCompleter, CommandResult, Session, complete_line, execute, run_repl
from herocards.theme import PLAIN_THEME


def make_library() -> Library:
    return Library.from_records(
        monsters=(
            Monster(key="ogre", name="Ogre", description="Big, with a dragon tattoo"),
            Monster(key="dragon", name="Dragon", description="A calamity on wings"),
        ),
        moves=(
            Move(name="Chosen One", key="chosen_one", description="Pick a spell.", classes=("cleric",)),
            Move(name="Anointed", key="anointed", description="Another spell.", classes=("cleric",), requires="Chosen One"),
        ),
        tags=(Tag(name="reach", key="reach", description="Several feet away."),),
    )


class FakePrompt:
    def __init__(self, lines: list[str]) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def prompt(self, message: str) -> str:
        self.prompts.append(message)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class ExecuteTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = Session(library=make_library(), theme=PLAIN_THEME)

    def test_blank_input_does_nothing(self) -> None:
        self.assertEqual(execute(self.session, "   "), CommandResult())

    def test_quit_and_exit(self) -> None:
        self.assertTrue(execute(self.session, "quit").quit)
        self.assertTrue(execute(self.session, "EXIT").quit)

    def test_lookup_renders_card(self) -> None:
        output = execute(self.session, "move anointed").output
        self.assertTrue(output.startswith("\n ┏"))
        self.assertIn("Anointed", output)
        self.assertIn("Requires  Chosen One", output)

    def test_name_match_wins_over_earlier_description(self) -> None:
        output = execute(self.session, "monster dragon").output
        self.assertIn("A calamity on wings", output)
        self.assertNotIn("Ogre", output)

    def test_no_match(self) -> None:
        self.assertEqual(execute(self.session, "tag beholder").output, "No match")
        self.assertEqual(execute(self.session, "item rope").output, "No match")

    def test_bad_pattern_is_reported_and_session_continues(self) -> None:
        result = execute(self.session, "move (")
        self.assertTrue(result.output.startswith("Invalid pattern:"))
        self.assertFalse(result.quit)

    def test_missing_pattern_shows_usage(self) -> None:
        self.assertEqual(execute(self.session, "monster").output, "Usage: monster PATTERN")

    def test_roll(self) -> None:
        self.assertEqual(execute(self.session, "roll 3+4").output, "\n >> 7\n")
        self.assertTrue(execute(self.session, "roll 2d").output.startswith("Error:"))

    def test_list_kinds_and_patterns(self) -> None:
        self.assertEqual(execute(self.session, "list moves").output, ">> Moves\n   Chosen One\n   Anointed")
        self.assertEqual(execute(self.session, "list move ^a").output, ">> Moves\n   Anointed")
        everything = execute(self.session, "list").output
        self.assertEqual(
            [line for line in everything.split("\n") if line.startswith(">>")],
            [">> Monsters", ">> Moves", ">> Items", ">> Tags"],
        )

    def test_list_with_pattern_only_filters_every_kind(self) -> None:
        output = execute(self.session, "list re").output
        self.assertIn("   reach", output)
        self.assertNotIn("Chosen One", output)

    def test_info_counts_records(self) -> None:
        self.assertEqual(
            execute(self.session, "info").output,
            "   Monsters: 2\n   Moves: 2\n   Items: 0\n   Tags: 1",
        )

    def test_help_and_unknown(self) -> None:
        self.assertIn("roll EXPR", execute(self.session, "help").output)
        self.assertIn("try 'help'", execute(self.session, "frobnicate").output)


class CompletionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.library = make_library()

    def test_top_level_commands(self) -> None:
        start, candidates = complete_line(self.library, "")
        self.assertEqual(start, 0)
        self.assertIn("monster", candidates)
        self.assertEqual(complete_line(self.library, "mo"), (0, ["monster", "move"]))

    def test_record_names(self) -> None:
        self.assertEqual(complete_line(self.library, "move a"), (5, ["Anointed"]))
        self.assertEqual(complete_line(self.library, "monster "), (8, ["Ogre", "Dragon"]))

    def test_list_kinds(self) -> None:
        self.assertEqual(complete_line(self.library, "list m"), (5, ["monsters", "moves"]))

    def test_nothing_to_complete(self) -> None:
        self.assertEqual(complete_line(self.library, "xyz"), (3, []))

    def test_prompt_toolkit_adapter(self) -> None:
        completer = CommandCompleter(self.library)
        completions = list(completer.get_completions(Document("move an"), CompleteEvent()))
        self.assertEqual([c.text for c in completions], ["Anointed"])
        self.assertEqual(completions[0].start_position, -2)


class RunReplTests(unittest.TestCase):
    def test_loop_prints_results_until_quit(self) -> None:
        session = Session(library=make_library(), theme=PLAIN_THEME)
        prompt = FakePrompt(["roll 2", "", "quit", "roll 5"])
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            run_repl(session, prompt_session=prompt)

        self.assertEqual(stdout.getvalue(), "\n >> 2\n\n")
        self.assertEqual(prompt.lines, ["roll 5"])
        self.assertEqual(prompt.prompts, [">> "] * 3)

    def test_loop_ends_on_eof(self) -> None:
        session = Session(library=make_library(), theme=PLAIN_THEME)
        prompt = FakePrompt(["tag reach"])
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            run_repl(session, prompt_session=prompt)

        self.assertIn("Several feet away.", stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
