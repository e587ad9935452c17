import io
import json
import logging
import tempfile
import unittest
from pathlib import Path

from main import build_parser, main, run
from jumble.utils.logger import level_from_name


def run_cli(argv, lines=None) -> str:
    stream = io.StringIO()
    args = build_parser().parse_args(argv)
    exit_code = run(args, stream=stream, lines=lines)
    assert exit_code == 0
    return stream.getvalue()


class CliTests(unittest.TestCase):
    def test_exists(self) -> None:
        self.assertEqual(json.loads(run_cli(["--json", "exists", " Yellow "])), True)
        self.assertEqual(run_cli(["exists", "qwxz"]).strip(), "False")

    def test_subwords_json(self) -> None:
        words = json.loads(run_cli(["--json", "subwords", "yellow", "--min-length", "5"]))
        self.assertEqual(words, ["lowly", "welly"])

    def test_search_and_prefix(self) -> None:
        found = json.loads(run_cli(["--json", "search", "--start", "y", "--end", "w", "--length", "3"]))
        self.assertEqual(found, ["yaw", "yew"])
        prefixed = json.loads(run_cli(["--json", "prefix", "yel"]))
        self.assertEqual(prefixed, ["yell", "yellow"])

    def test_palindromes(self) -> None:
        words = json.loads(run_cli(["--json", "palindromes"]))
        self.assertIn("level", words)
        self.assertTrue(all(word == word[::-1] and len(word) > 1 for word in words))

    def test_scramble_is_a_permutation(self) -> None:
        scrambled = run_cli(["--seed", "4", "scramble", "planet"]).strip()
        self.assertNotEqual(scrambled, "planet")
        self.assertEqual(sorted(scrambled), sorted("planet"))

    def test_new_game_payload(self) -> None:
        payload = json.loads(run_cli(["--seed", "2", "new"]))
        self.assertEqual(payload["status"], "CREATED")
        self.assertEqual(len(payload["original_word"]), 6)
        self.assertEqual(payload["total_words"], payload["remaining_words"])
        self.assertEqual(payload["guessed_words"], [])

    def test_play_loop_quits(self) -> None:
        output = run_cli(["--seed", "1", "play"], lines=["zzz", ":shuffle", ":quit"])
        self.assertIn("New game!", output)
        self.assertIn("'zzz': Guessed incorrectly.", output)

    def test_play_accepts_two_letter_words_with_min_length_two(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "words.txt"
            source.write_text("cat\nact\nat\nta\n", encoding="utf-8")
            output = run_cli(
                ["--dictionary", str(source), "play", "--length", "3", "--min-length", "2"],
                lines=["at", "ta", "cat", "act"],
            )
        self.assertNotIn("Must be at least", output)
        self.assertIn("All words guessed.", output)

    def test_custom_dictionary_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "words.txt"
            source.write_text("tide\nedit\ndiet\n", encoding="utf-8")
            words = json.loads(run_cli(["--json", "--dictionary", str(source), "subwords", "tied", "--min-length", "4"]))
        self.assertEqual(words, ["diet", "edit", "tide"])

    def test_missing_dictionary_exits_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            code = main(["--dictionary", str(Path(tmpdir) / "nope.txt"), "exists", "word"])
        self.assertEqual(code, 1)

    def test_level_from_name(self) -> None:
        self.assertEqual(level_from_name("debug"), logging.DEBUG)
        self.assertEqual(level_from_name("nonsense"), logging.INFO)
        self.assertEqual(level_from_name(None, logging.ERROR), logging.ERROR)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
