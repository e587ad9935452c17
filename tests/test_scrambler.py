import random
import unittest
from unittest.mock import MagicMock

from jumble.engine.scrambler import Scrambler


class ScramblerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.scrambler = Scrambler(random.Random(1234))

    def test_scramble_differs_and_keeps_letters(self) -> None:
        for word in ("ab", "aab", "yellow", "elephant", "gloomy", "noon", "level"):
            for _ in range(25):
                scrambled = self.scrambler.scramble(word)
                self.assertNotEqual(scrambled, word)
                self.assertEqual(sorted(scrambled), sorted(word))

    def test_short_words_are_returned_unchanged(self) -> None:
        self.assertEqual(self.scrambler.scramble("a"), "a")
        self.assertEqual(self.scrambler.scramble(""), "")
        self.assertIsNone(self.scrambler.scramble(None))

    def test_identical_letters_do_not_loop_forever(self) -> None:
        self.assertEqual(self.scrambler.scramble("aaaa"), "aaaa")

    def test_exhausted_budget_falls_back_to_rotation(self) -> None:
        stuck_rng = MagicMock()
        stuck_rng.shuffle = MagicMock(return_value=None)
        scrambler = Scrambler(stuck_rng, max_attempts=5)

        self.assertEqual(scrambler.scramble("abc"), "bca")
        self.assertEqual(stuck_rng.shuffle.call_count, 5)

    def test_rescramble_avoids_previous_scramble(self) -> None:
        previous = self.scrambler.scramble("listen")
        for _ in range(25):
            scrambled = self.scrambler.rescramble("listen", previous)
            self.assertNotEqual(scrambled, "listen")
            self.assertNotEqual(scrambled, previous)
            previous = scrambled

    def test_rescramble_accepts_repeat_when_no_alternative(self) -> None:
        # "ba" is the only scramble of "ab" that differs from the word itself.
        self.assertEqual(self.scrambler.rescramble("ab", "ba"), "ba")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
