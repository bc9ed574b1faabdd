from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Dict, FrozenSet, Iterable, Sequence

from ..classifier import UnicodeWordClassifier


class DictionaryNotFoundError(LookupError):
    """Raised when no provider offers a dictionary for a language tag."""

    def __init__(self, tag: str, reason: str) -> None:
        super().__init__(reason)
        self.tag = tag
        self.reason = reason


@dataclass(slots=True, frozen=True)
class DictionaryInfo:
    """A dictionary a provider can load."""

    tag: str
    provider_name: str
    path: Path


@dataclass(slots=True, frozen=True)
class SpellingDictionary:
    """
    Spelling oracle for one language tag.

    Words are known when the provider's ``speller`` accepts them, or when
    they (or an accepted case variant) appear in ``words`` or
    ``personal_words``.
    """

    tag: str
    provider_name: str
    path: Path | None = None
    words: FrozenSet[str] = frozenset()
    personal_words: FrozenSet[str] = frozenset()
    extra_word_characters: str = ""
    speller: Callable[[str], bool] | None = field(
        default=None, compare=False, repr=False
    )
    classifier: UnicodeWordClassifier = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "classifier", UnicodeWordClassifier(self.extra_word_characters)
        )

    def check(self, word: str) -> bool:
        """Return True when ``word`` (or an accepted case variant) is known."""
        if any(
            variant in self.words or variant in self.personal_words
            for variant in case_variants(word)
        ):
            return True
        return self.speller is not None and self.speller(word)

    def with_personal_words(self, words: Iterable[str]) -> "SpellingDictionary":
        """Return a copy that also accepts ``words``."""
        return replace(self, personal_words=self.personal_words | frozenset(words))


def case_variants(word: str) -> list[str]:
    """Spellings under which ``word`` is accepted, most specific first."""
    variants = [word]
    lowered = word.lower()
    if word.isupper():
        variants.extend([lowered, lowered.capitalize()])
    elif word[:1].isupper() and word[1:] == word[1:].lower():
        variants.append(lowered)
    return variants


class Provider(ABC):
    """Loader for one family of dictionary files."""

    name: str = ""
    description: str = ""

    @abstractmethod
    def list_dictionaries(self, search_dirs: Sequence[Path]) -> Dict[str, Path]:
        """Map each available language tag to the file that provides it."""
        raise NotImplementedError

    @abstractmethod
    def load(self, tag: str, path: Path) -> SpellingDictionary:
        """Read the dictionary stored at ``path``."""
        raise NotImplementedError


def find_by_suffix(search_dirs: Sequence[Path], suffix: str) -> Dict[str, Path]:
    """Collect ``<tag><suffix>`` files; earlier directories win."""
    found: Dict[str, Path] = {}
    for directory in search_dirs:
        if not directory.is_dir():
            continue
        for path in sorted(directory.glob(f"*{suffix}")):
            if path.is_file():
                found.setdefault(path.name[: -len(suffix)], path)
    return found
