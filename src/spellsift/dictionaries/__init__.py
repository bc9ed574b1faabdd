from __future__ import annotations

from .base import (
    DictionaryInfo,
    DictionaryNotFoundError,
    Provider,
    SpellingDictionary,
    case_variants,
)
from .broker import Broker, create_provider, normalize_tag
from .hunspell import HunspellProvider
from .wordlist import WordListProvider, load_personal_word_list, load_word_list

__all__ = [
    "Broker",
    "DictionaryInfo",
    "DictionaryNotFoundError",
    "HunspellProvider",
    "Provider",
    "SpellingDictionary",
    "WordListProvider",
    "case_variants",
    "create_provider",
    "load_personal_word_list",
    "load_word_list",
    "normalize_tag",
]
