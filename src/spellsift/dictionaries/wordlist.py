from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, FrozenSet, Sequence

from .base import Provider, SpellingDictionary, find_by_suffix

logger = logging.getLogger(__name__)

WORDLIST_SUFFIX = ".txt"


def load_word_list(path: Path) -> FrozenSet[str]:
    """Read a UTF-8 word list with one word per line and ``#`` comments."""
    words = set()
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            word = line.strip()
            if word and not word.startswith("#"):
                words.add(word)
    return frozenset(words)


def load_personal_word_list(path: Path) -> FrozenSet[str]:
    """Like load_word_list, but a missing file is simply an empty list."""
    if not path.exists():
        logger.info("Personal word list %s does not exist yet; using none.", path)
        return frozenset()
    return load_word_list(path)


class WordListProvider(Provider):
    """Plain-text word lists named ``<tag>.txt``."""

    name = "wordlist"
    description = "Plain text word lists"

    def list_dictionaries(self, search_dirs: Sequence[Path]) -> Dict[str, Path]:
        return find_by_suffix(search_dirs, WORDLIST_SUFFIX)

    def load(self, tag: str, path: Path) -> SpellingDictionary:
        words = load_word_list(path)
        logger.info("Loaded %d words for %s from %s", len(words), tag, path)
        return SpellingDictionary(
            tag=tag, provider_name=self.name, path=path, words=words
        )
