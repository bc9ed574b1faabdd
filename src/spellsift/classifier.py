from __future__ import annotations

import unicodedata
from abc import ABC, abstractmethod
from typing import Callable, Union

from .models import WordPosition

END_OF_TEXT = "\0"

APOSTROPHES = frozenset({"'", "’"})

# Letters, marks, numbers and connector punctuation may sit anywhere in a word.
WORD_CATEGORIES = frozenset(
    {"Lu", "Ll", "Lt", "Lm", "Lo", "Mn", "Mc", "Me", "Nd", "Nl", "No", "Pc"}
)
DASH_CATEGORY = "Pd"

ClassifierFunc = Callable[[str, WordPosition], bool]


class CharacterClassifier(ABC):
    """Decides which characters may begin, continue or end a word."""

    @abstractmethod
    def is_word_character(self, char: str, position: WordPosition) -> bool:
        """Return True when ``char`` may occupy ``position`` in a word."""
        raise NotImplementedError


class CallableClassifier(CharacterClassifier):
    """Adapt an arbitrary callable into the CharacterClassifier interface."""

    def __init__(self, func: ClassifierFunc) -> None:
        self._func = func

    def is_word_character(self, char: str, position: WordPosition) -> bool:
        if char == END_OF_TEXT:
            return False
        return bool(self._func(char, position))


class UnicodeWordClassifier(CharacterClassifier):
    """
    Language-independent word rules based on Unicode general categories.

    Apostrophes may start or continue a word but never end one, hyphens and
    other dashes only join word parts, and ``extra_word_characters`` (a
    dictionary's WORDCHARS) are additionally accepted inside a word.
    """

    def __init__(self, extra_word_characters: str = "") -> None:
        self._extra = frozenset(extra_word_characters) - {END_OF_TEXT}

    @property
    def extra_word_characters(self) -> str:
        return "".join(sorted(self._extra))

    def is_word_character(self, char: str, position: WordPosition) -> bool:
        if char == END_OF_TEXT:
            return False
        if char in APOSTROPHES:
            return position is not WordPosition.END
        category = unicodedata.category(char)
        if category in WORD_CATEGORIES:
            return True
        if position is WordPosition.MIDDLE:
            return category == DASH_CATEGORY or char in self._extra
        return False


ClassifierLike = Union[CharacterClassifier, ClassifierFunc]


def as_predicate(classifier: ClassifierLike) -> ClassifierFunc:
    """
    Return a plain predicate for either a classifier object or a callable.

    The predicate always rejects the end-of-text character, whatever the
    wrapped classifier answers for it.
    """
    if isinstance(classifier, CallableClassifier):
        return classifier.is_word_character
    if isinstance(classifier, CharacterClassifier):
        return CallableClassifier(classifier.is_word_character).is_word_character
    return CallableClassifier(classifier).is_word_character
