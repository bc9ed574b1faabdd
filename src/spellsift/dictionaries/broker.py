from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, List, Sequence

from .base import DictionaryInfo, DictionaryNotFoundError, Provider, SpellingDictionary
from .hunspell import HunspellProvider
from .wordlist import WordListProvider, load_personal_word_list

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import SpellsiftConfig

logger = logging.getLogger(__name__)


def create_provider(name: str) -> Provider:
    """Factory for building dictionary providers by name."""
    normalized = name.lower().strip()
    if normalized in {"hunspell", "myspell"}:
        return HunspellProvider()
    if normalized in {"wordlist", "word_list"}:
        return WordListProvider()
    raise ValueError(f"Unknown provider '{name}'.")


def normalize_tag(tag: str) -> str:
    """Normalize ``en-us.UTF-8`` style tags to ``en_US``."""
    tag = tag.strip().split(".", 1)[0].split("@", 1)[0].replace("-", "_")
    language, sep, territory = tag.partition("_")
    if not sep:
        return language.lower()
    return f"{language.lower()}_{territory.upper()}"


class Broker:
    """Finds dictionaries across providers and search directories."""

    def __init__(
        self, search_dirs: Sequence[Path], providers: Sequence[Provider]
    ) -> None:
        self._search_dirs = list(search_dirs)
        self._providers = list(providers)

    @classmethod
    def from_config(cls, config: "SpellsiftConfig") -> "Broker":
        dirs: List[Path] = []
        env_value = os.environ.get(config.dictionary_path_env, "")
        for entry in env_value.split(os.pathsep):
            if entry:
                dirs.append(Path(entry).expanduser())
        dirs.extend(Path(entry).expanduser() for entry in config.dictionary_dirs)
        providers = [create_provider(name) for name in config.providers]
        return cls(dirs, providers)

    @property
    def search_dirs(self) -> List[Path]:
        return list(self._search_dirs)

    def describe(self) -> List[Provider]:
        """Return the configured providers in priority order."""
        return list(self._providers)

    def list_dicts(self) -> List[DictionaryInfo]:
        """Return every available dictionary, one per tag, sorted by tag."""
        found: dict[str, DictionaryInfo] = {}
        for provider in self._providers:
            for tag, path in provider.list_dictionaries(self._search_dirs).items():
                if tag not in found:
                    found[tag] = DictionaryInfo(tag, provider.name, path)
        logger.debug("Found %d dictionaries in %s", len(found), self._search_dirs)
        return [found[tag] for tag in sorted(found)]

    def dict_exists(self, tag: str) -> bool:
        return self._find(tag) is not None

    def request_dict(
        self, tag: str, personal_word_list: str | Path | None = None
    ) -> SpellingDictionary:
        """Load the dictionary for ``tag``, falling back to its bare language."""
        match = self._find(tag)
        if match is None:
            raise DictionaryNotFoundError(
                tag, "no provider offers a dictionary for this language"
            )
        provider, info = match
        dictionary = provider.load(info.tag, info.path)
        if personal_word_list is not None:
            dictionary = dictionary.with_personal_words(
                load_personal_word_list(Path(personal_word_list).expanduser())
            )
        return dictionary

    def _find(self, tag: str) -> tuple[Provider, DictionaryInfo] | None:
        normalized = normalize_tag(tag)
        candidates = [normalized]
        language = normalized.partition("_")[0]
        if language and language != normalized:
            candidates.append(language)
        for candidate in candidates:
            for provider in self._providers:
                path = provider.list_dictionaries(self._search_dirs).get(candidate)
                if path is not None:
                    return provider, DictionaryInfo(candidate, provider.name, path)
        # A bare language accepts any regional variant, e.g. "en" -> "en_US".
        if language == normalized:
            for info in self.list_dicts():
                if info.tag.startswith(f"{language}_"):
                    provider = next(
                        p for p in self._providers if p.name == info.provider_name
                    )
                    return provider, info
        return None
