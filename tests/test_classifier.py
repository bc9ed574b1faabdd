import pytest

from spellsift.classifier import (
    CallableClassifier,
    CharacterClassifier,
    UnicodeWordClassifier,
    as_predicate,
)
from spellsift.models import WordPosition

ALL_POSITIONS = list(WordPosition)


@pytest.mark.parametrize("char", ["a", "Z", "é", "ß", "7", "_", "\u0301", "ж"])
def test_unicode_classifier_accepts_word_characters_everywhere(char):
    classifier = UnicodeWordClassifier()

    assert all(classifier.is_word_character(char, pos) for pos in ALL_POSITIONS)


def test_unicode_classifier_apostrophes_cannot_end_words():
    classifier = UnicodeWordClassifier()
    for char in ("'", "’"):
        assert classifier.is_word_character(char, WordPosition.START)
        assert classifier.is_word_character(char, WordPosition.MIDDLE)
        assert not classifier.is_word_character(char, WordPosition.END)


def test_unicode_classifier_dashes_only_join_words():
    classifier = UnicodeWordClassifier()

    assert classifier.is_word_character("-", WordPosition.MIDDLE)
    assert not classifier.is_word_character("-", WordPosition.START)
    assert not classifier.is_word_character("-", WordPosition.END)


def test_unicode_classifier_rejects_separators_and_nul():
    classifier = UnicodeWordClassifier(extra_word_characters=".\0")
    for char in (" ", ",", "!", "\t", "\0"):
        assert not classifier.is_word_character(char, WordPosition.START)
        assert not classifier.is_word_character(char, WordPosition.END)
    assert not classifier.is_word_character("\0", WordPosition.MIDDLE)


def test_unicode_classifier_extra_characters_are_interior_only():
    classifier = UnicodeWordClassifier(extra_word_characters=".@")

    assert classifier.extra_word_characters == ".@"
    assert classifier.is_word_character(".", WordPosition.MIDDLE)
    assert not classifier.is_word_character(".", WordPosition.END)
    assert not UnicodeWordClassifier().is_word_character(".", WordPosition.MIDDLE)


def test_callable_classifier_guards_end_of_text():
    classifier = CallableClassifier(lambda char, position: True)

    assert classifier.is_word_character("x", WordPosition.END)
    assert not classifier.is_word_character("\0", WordPosition.START)


def test_as_predicate_wraps_plain_functions():
    predicate = as_predicate(lambda char, position: position is WordPosition.START)

    assert predicate("x", WordPosition.START)
    assert not predicate("x", WordPosition.END)
    assert not predicate("\0", WordPosition.START)


class _EverythingClassifier(CharacterClassifier):
    def is_word_character(self, char: str, position: WordPosition) -> bool:
        return True


def test_as_predicate_guards_end_of_text_for_subclasses():
    predicate = as_predicate(_EverythingClassifier())

    assert predicate("x", WordPosition.MIDDLE)
    assert not predicate("\0", WordPosition.START)
    assert not predicate("\0", WordPosition.MIDDLE)
