import random
import unittest

from jumble.core.exceptions import ConfigurationError, NoWordAvailableError
from jumble.core.models import GameState
from jumble.data.dictionary import WordDictionary
from jumble.engine.game import GameConfig, GameFactory
from jumble.engine.scrambler import Scrambler

YELLOW_SUB_WORDS = {
    "low", "lowly", "lye", "ole", "owe", "owl", "well",
    "welly", "woe", "yell", "yeow", "yew", "yowl",
}


def make_factory(seed: int = 5) -> GameFactory:
    words = YELLOW_SUB_WORDS | {"yellow", "cat", "dog", "lo", "we"}
    dictionary = WordDictionary.from_words(words, rng=random.Random(seed))
    return GameFactory(dictionary, GameConfig(seed=seed))


class GameFactoryTests(unittest.TestCase):
    def test_create_builds_consistent_state(self) -> None:
        state = make_factory().create(6, 3)

        self.assertEqual(state.original, "yellow")
        self.assertNotEqual(state.scramble, "yellow")
        self.assertEqual(sorted(state.scramble), sorted("yellow"))
        self.assertEqual(set(state.sub_words), YELLOW_SUB_WORDS)
        self.assertFalse(any(state.sub_words.values()))
        self.assertEqual(state.total_words, len(YELLOW_SUB_WORDS))
        self.assertEqual(state.remaining_words, state.total_words)
        self.assertEqual(state.guessed_words, [])

    def test_create_uses_configured_defaults(self) -> None:
        state = make_factory().create()
        self.assertEqual(state.original, "yellow")

    def test_min_length_limits_sub_words(self) -> None:
        state = make_factory().create(6, 5)
        self.assertEqual(set(state.sub_words), {"lowly", "welly"})

    def test_invalid_parameters_raise_configuration_error(self) -> None:
        factory = make_factory()
        for length, min_length in ((2, 1), (6, 0), (6, -1), (4, 5)):
            with self.assertRaises(ConfigurationError):
                factory.create(length, min_length)

    def test_missing_length_raises_configuration_error(self) -> None:
        factory = make_factory()
        factory.config = GameConfig(word_length=None)
        with self.assertRaises(ConfigurationError):
            factory.create()

    def test_no_word_of_length_raises(self) -> None:
        with self.assertRaises(NoWordAvailableError):
            make_factory().create(9, 3)

    def test_words_without_distinct_scramble_are_skipped(self) -> None:
        dictionary = WordDictionary.from_words(["aaa", "zzz"], rng=random.Random(1))
        with self.assertRaises(NoWordAvailableError):
            GameFactory(dictionary).create(3, 3)


class GameStateTests(unittest.TestCase):
    def setUp(self) -> None:
        self.state = GameState(
            original="yellow",
            scramble="wolley",
            sub_words={word: False for word in YELLOW_SUB_WORDS},
        )

    def test_wrong_word_leaves_state_unchanged(self) -> None:
        self.assertFalse(self.state.update_guess_word("cat"))
        self.assertFalse(self.state.update_guess_word(None))
        self.assertFalse(self.state.update_guess_word("yellow"))
        self.assertEqual(self.state.remaining_words, 13)

    def test_correct_word_is_marked_after_normalizing(self) -> None:
        self.assertTrue(self.state.update_guess_word("  YeLL "))
        self.assertTrue(self.state.is_guessed("yell"))
        self.assertEqual(self.state.guessed_words, ["yell"])
        self.assertEqual(self.state.remaining_words, 12)

    def test_repeat_guess_does_not_change_counts(self) -> None:
        self.state.update_guess_word("owl")
        self.state.update_guess_word("owl")
        self.assertEqual(self.state.remaining_words, 12)
        self.assertEqual(self.state.total_words, 13)

    def test_completion_is_reached_after_every_word(self) -> None:
        for word in sorted(YELLOW_SUB_WORDS):
            self.assertFalse(self.state.is_complete)
            self.assertTrue(self.state.update_guess_word(word))
        self.assertTrue(self.state.is_complete)
        self.assertEqual(self.state.remaining_words, 0)
        self.assertEqual(set(self.state.sub_words), YELLOW_SUB_WORDS)

    def test_rescramble_keeps_letters_and_avoids_original(self) -> None:
        scrambler = Scrambler(random.Random(3))
        for _ in range(10):
            previous = self.state.scramble
            scrambled = self.state.rescramble(scrambler)
            self.assertEqual(self.state.scramble, scrambled)
            self.assertNotEqual(scrambled, "yellow")
            self.assertNotEqual(scrambled, previous)
            self.assertEqual(sorted(scrambled), sorted("yellow"))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
